from __future__ import annotations


class CountdownError(Exception):
    """Base class for rejected countdown commands."""


class InvalidStateError(CountdownError, RuntimeError):
    """Command is not allowed in the engine's current state."""


class InvalidDurationError(CountdownError, ValueError):
    """Duration or interval is negative, non-finite or not a number."""
