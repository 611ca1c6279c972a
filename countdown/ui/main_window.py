from __future__ import annotations

import logging
import math

from PyQt6.QtCore import QRect, Qt
from PyQt6.QtGui import QAction, QColor, QFont, QKeySequence, QPainter, QPen
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListView,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from countdown.config import AppConfig
from countdown.core.engine import CountdownEngine, CountdownState
from countdown.core.errors import CountdownError
from countdown.core.presets import PRESETS
from countdown.core.tick_source import QtTickSource


logger = logging.getLogger(__name__)

DIAL_COLORS = {
    "light": ("#e0d6cd", "#eb8f60", "#2d2824"),
    "dark": ("#3a3430", "#eb8f60", "#f1ebe5"),
}


class ProgressDial(QWidget):
    def __init__(self, theme: str = "light", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(240, 240)
        self._progress = 0.0
        self._remaining_text = "00:00"
        self._track, self._arc, self._text = (QColor(c) for c in DIAL_COLORS[theme])

    def set_state(self, progress: float, remaining_text: str) -> None:
        self._progress = 0.0 if math.isnan(progress) else max(0.0, min(1.0, progress))
        self._remaining_text = remaining_text
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        side = min(self.width(), self.height()) - 16
        circle_rect = QRect((self.width() - side) // 2, (self.height() - side) // 2, side, side)

        painter.setPen(QPen(self._track, 4))
        painter.drawEllipse(circle_rect)
        painter.setPen(QPen(self._arc, 4))
        span = int(-360 * 16 * self._progress)
        painter.drawArc(circle_rect, 90 * 16, span)

        font = QFont(painter.font())
        font.setPointSize(max(12, side // 7))
        painter.setFont(font)
        painter.setPen(self._text)
        painter.drawText(circle_rect, Qt.AlignmentFlag.AlignCenter, self._remaining_text)


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig, engine: CountdownEngine | None = None) -> None:
        super().__init__()
        self.setWindowTitle("CountDown Timer")
        self.resize(config.window_width, config.window_height)

        self.config = config
        self.engine = engine or CountdownEngine(QtTickSource(self), config.tick_interval_ms, parent=self)

        self._build_ui()
        self._connect_signals()
        self._render(self.engine.snapshot)

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 16)

        heading = QLabel("CountDown Timer")
        heading.setObjectName("Heading")
        root_layout.addWidget(heading)
        root_layout.addSpacing(48)

        self.dial = ProgressDial(self.config.theme)
        root_layout.addWidget(self.dial, 1)
        root_layout.addSpacing(48)

        controls = QHBoxLayout()
        controls.setContentsMargins(16, 0, 16, 0)
        self.toggle_btn = QPushButton("Start")
        self.toggle_btn.setObjectName("PrimaryButton")
        controls.addWidget(self.toggle_btn)

        self.preset_list = QListWidget()
        self.preset_list.setFlow(QListView.Flow.LeftToRight)
        self.preset_list.setWrapping(False)
        self.preset_list.setFixedHeight(56)
        for preset in PRESETS:
            item = QListWidgetItem(preset.label, self.preset_list)
            item.setData(Qt.ItemDataRole.UserRole, preset.millis)
        controls.addWidget(self.preset_list, 1)
        root_layout.addLayout(controls)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self.toggle_countdown)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        self.toggle_btn.clicked.connect(self.toggle_countdown)
        self.preset_list.itemClicked.connect(self._on_preset_clicked)
        self.engine.state_changed.connect(self._render)
        self.engine.running_changed.connect(self._on_running_changed)

    def _on_preset_clicked(self, item: QListWidgetItem) -> None:
        millis = item.data(Qt.ItemDataRole.UserRole)
        try:
            self.engine.select_duration(millis)
        except CountdownError as exc:
            logger.warning("Preset %s ignored: %s", item.text(), exc)

    def toggle_countdown(self) -> None:
        try:
            self.engine.toggle()
        except CountdownError as exc:
            logger.warning("Start/pause ignored: %s", exc)

    def _on_running_changed(self, running: bool) -> None:
        self.toggle_btn.setText("Pause" if running else "Start")
        self.preset_list.setEnabled(not running)

    def _render(self, snapshot: CountdownState) -> None:
        self.dial.set_state(snapshot.completion_fraction, snapshot.remaining_text)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.engine.close()
        event.accept()
