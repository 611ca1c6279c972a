from __future__ import annotations

"""Entry point of the CountDown Timer application.

Sets up logging, applies the theme and shows the main window.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from countdown.config import AppConfig
from countdown.ui.main_window import MainWindow
from countdown.ui.styles import apply_theme


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(config: AppConfig | None = None) -> int:
    """Create the window and run the Qt event loop."""
    config = config or AppConfig()
    configure_logging(config)

    app = QApplication(sys.argv)
    apply_theme(app, config.theme)

    window = MainWindow(config)
    window.show()
    logging.getLogger(__name__).info("CountDown Timer started")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
