import logging

import pytest

from countdown.config import AppConfig
from countdown.ui.styles import stylesheet


def test_defaults() -> None:
    config = AppConfig()
    assert config.tick_interval_ms == 1000
    assert config.theme == "light"
    assert config.log_level_value == logging.INFO


def test_from_mapping_converts_and_ignores_unknown() -> None:
    config = AppConfig.from_mapping(
        {"tick_interval_ms": "500", "theme": "dark", "log_level": "debug", "extra": 1}
    )
    assert config.tick_interval_ms == 500
    assert config.theme == "dark"
    assert config.log_level_value == logging.DEBUG


@pytest.mark.parametrize(
    "values",
    [
        {"tick_interval_ms": 0},
        {"tick_interval_ms": "fast"},
        {"theme": "neon"},
        {"window_width": -1},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values_rejected(values) -> None:
    with pytest.raises(ValueError):
        AppConfig.from_mapping(values)


@pytest.mark.parametrize("theme", ["light", "dark"])
def test_stylesheet_renders_for_each_theme(theme) -> None:
    qss = stylesheet(theme)
    assert "QPushButton#PrimaryButton" in qss
    assert "{" in qss and "{{" not in qss
