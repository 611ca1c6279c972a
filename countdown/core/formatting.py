from __future__ import annotations

"""Rendering of remaining time for the dial and the preset list."""

from datetime import datetime, timezone


def format_remaining(millis: int) -> str:
    """Format milliseconds as `mm:ss` of a UTC timestamp.

    The value is read as an instant after the epoch, so only minute-of-hour
    and second-of-minute are shown. An hour or more wraps around.
    """
    instant = datetime.fromtimestamp(max(0, millis) / 1000, tz=timezone.utc)
    return instant.strftime("%M:%S")
