from __future__ import annotations

"""Application settings with defaults; nothing is read from disk."""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping


THEMES = ("light", "dark")


@dataclass(frozen=True)
class AppConfig:
    tick_interval_ms: int = 1000
    theme: str = "light"
    window_width: int = 360
    window_height: int = 640
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive")
        if self.theme not in THEMES:
            raise ValueError(f"Unknown theme {self.theme!r}, expected one of {THEMES}")
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError("Window size must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> AppConfig:
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                continue
            if key in {"tick_interval_ms", "window_width", "window_height"}:
                try:
                    value = int(value)
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"{key} must be an integer, got {value!r}") from exc
            else:
                value = str(value)
            kwargs[key] = value
        return cls(**kwargs)
