from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from countdown.core.errors import InvalidDurationError, InvalidStateError
from countdown.core.formatting import format_remaining
from countdown.core.tick_source import TickHandle, TickSource


logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 1000


class EngineState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass(frozen=True)
class CountdownState:
    total_millis: int
    remaining_millis: int
    completion_fraction: float
    state: EngineState

    @property
    def is_running(self) -> bool:
        return self.state == EngineState.RUNNING

    @property
    def remaining_text(self) -> str:
        return format_remaining(self.remaining_millis)


class CountdownEngine(QObject):
    """Countdown state machine driven by an external tick source.

    Every mutation emits `state_changed` with a fresh `CountdownState`;
    the per-field signals fire only when their value differs from the
    previously published one.
    """

    state_changed = pyqtSignal(object)
    remaining_text_changed = pyqtSignal(str)
    completion_changed = pyqtSignal(float)
    running_changed = pyqtSignal(bool)
    finished = pyqtSignal()

    def __init__(
        self,
        tick_source: TickSource,
        default_interval_ms: int = DEFAULT_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._check_interval(default_interval_ms)
        self._tick_source = tick_source
        self._default_interval_ms = default_interval_ms
        self._total_millis = 0
        self._remaining_millis = 0
        self._completion = 0.0
        self._state = EngineState.IDLE
        self._handle: TickHandle | None = None
        self._closed = False
        self._published = self.snapshot

    @property
    def snapshot(self) -> CountdownState:
        return CountdownState(
            total_millis=self._total_millis,
            remaining_millis=self._remaining_millis,
            completion_fraction=self._completion,
            state=self._state,
        )

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def total_millis(self) -> int:
        return self._total_millis

    @property
    def remaining_millis(self) -> int:
        return self._remaining_millis

    @property
    def completion_fraction(self) -> float:
        return self._completion

    @property
    def is_running(self) -> bool:
        return self._state == EngineState.RUNNING

    @property
    def remaining_text(self) -> str:
        return format_remaining(self._remaining_millis)

    @property
    def has_active_tick(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def set_duration(self, millis: int | float) -> None:
        self._ensure_open("set_duration")
        if self.is_running:
            logger.warning("Rejected set_duration(%s): countdown is running", millis)
            raise InvalidStateError("Cannot change duration while the countdown is running")
        value = self._to_millis(millis, "Duration")
        self._total_millis = value
        self._remaining_millis = value
        self._completion = 0.0
        self._state = EngineState.IDLE
        logger.debug("Duration set to %sms", value)
        self._publish()

    select_duration = set_duration

    def start(self, interval_millis: int | None = None, from_millis: int | None = None) -> None:
        """Start or resume the countdown.

        Without `from_millis` counting continues from the current remaining
        time; with it, counting restarts from that value. Any running tick
        source is replaced.
        """
        self._ensure_open("start")
        interval = self._default_interval_ms if interval_millis is None else interval_millis
        self._check_interval(interval)
        if from_millis is None:
            start_from = self._remaining_millis
        else:
            start_from = self._to_millis(from_millis, "Start point")
            if start_from > self._total_millis:
                raise InvalidDurationError(
                    f"Start point {start_from}ms exceeds selected duration {self._total_millis}ms"
                )

        self._cancel_ticks()
        self._remaining_millis = start_from
        if start_from == 0:
            self._complete()
            return

        self._completion = self._fraction()
        self._state = EngineState.RUNNING
        self._handle = self._tick_source.schedule_periodic(interval, self._on_tick)
        logger.debug("Countdown running from %sms, interval=%sms", start_from, interval)
        self._publish()

    def pause(self) -> None:
        self._ensure_open("pause")
        if not self.is_running:
            return
        self._cancel_ticks()
        self._state = EngineState.PAUSED
        logger.debug("Countdown paused at %sms", self._remaining_millis)
        self._publish()

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self._ensure_open("reset")
        self._cancel_ticks()
        self._remaining_millis = self._total_millis
        self._completion = 0.0
        self._state = EngineState.IDLE
        self._publish()

    def close(self) -> None:
        if self._closed:
            return
        self._cancel_ticks()
        self._closed = True
        logger.debug("Countdown engine closed")

    def _on_tick(self, handle: TickHandle) -> None:
        if self._closed or handle is not self._handle:
            return
        self._remaining_millis = max(0, self._remaining_millis - handle.interval_millis)
        if self._remaining_millis == 0:
            self._complete()
            return
        self._completion = self._fraction()
        self._publish()

    def _complete(self) -> None:
        self._cancel_ticks()
        self._remaining_millis = 0
        self._completion = 1.0
        self._state = EngineState.COMPLETED
        logger.info("Countdown of %sms completed", self._total_millis)
        self._publish()
        self.finished.emit()

    def _fraction(self) -> float:
        if self._total_millis == 0:
            return 0.0
        return (self._total_millis - self._remaining_millis) / self._total_millis

    def _cancel_ticks(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def _publish(self) -> None:
        previous, current = self._published, self.snapshot
        self._published = current
        self.state_changed.emit(current)
        if current.remaining_text != previous.remaining_text:
            self.remaining_text_changed.emit(current.remaining_text)
        if current.completion_fraction != previous.completion_fraction:
            self.completion_changed.emit(current.completion_fraction)
        if current.is_running != previous.is_running:
            self.running_changed.emit(current.is_running)

    def _ensure_open(self, command: str) -> None:
        if self._closed:
            logger.warning("Rejected %s: engine is closed", command)
            raise InvalidStateError(f"Cannot {command}: engine is closed")

    @staticmethod
    def _to_millis(value: int | float, what: str) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidDurationError(f"{what} must be a number of milliseconds, got {value!r}")
        if not math.isfinite(value) or value < 0:
            raise InvalidDurationError(f"{what} must be finite and non-negative, got {value!r}")
        return int(value)

    @staticmethod
    def _check_interval(interval: int) -> None:
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            raise InvalidDurationError(f"Tick interval must be a positive integer, got {interval!r}")
