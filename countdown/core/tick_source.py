from __future__ import annotations

"""Periodic tick sources the countdown engine can be driven by.

The engine only needs `schedule_periodic(interval_millis, on_tick)`; the
returned handle stops the ticks. `QtTickSource` runs on the Qt event loop,
`ManualTickSource` is a virtual clock advanced explicitly.
"""

import logging
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, Qt, QTimer


logger = logging.getLogger(__name__)

TickCallback = Callable[["TickHandle"], None]


class TickHandle:
    """Cancellable registration of a periodic callback."""

    def __init__(
        self,
        interval_millis: int,
        on_tick: TickCallback,
        on_cancel: Callable[[TickHandle], None] | None = None,
    ) -> None:
        self.interval_millis = interval_millis
        self._on_tick = on_tick
        self._on_cancel = on_cancel
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel(self)

    def deliver(self) -> None:
        # Checked right before the callback so a tick queued before cancel() is dropped.
        if self._cancelled:
            return
        self._on_tick(self)


class TickSource(Protocol):
    def schedule_periodic(self, interval_millis: int, on_tick: TickCallback) -> TickHandle:
        ...


class QtTickSource:
    """One `QTimer` per scheduled handle."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._timers: dict[int, QTimer] = {}

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def schedule_periodic(self, interval_millis: int, on_tick: TickCallback) -> TickHandle:
        handle = TickHandle(interval_millis, on_tick, on_cancel=self._release)
        timer = QTimer(self._parent)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setInterval(interval_millis)
        timer.timeout.connect(handle.deliver)
        self._timers[id(handle)] = timer
        timer.start()
        logger.debug("Qt tick source started, interval=%sms", interval_millis)
        return handle

    def _release(self, handle: TickHandle) -> None:
        timer = self._timers.pop(id(handle), None)
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()


class ManualTickSource:
    """Virtual clock: ticks fire only from `advance()`."""

    def __init__(self) -> None:
        self._now_millis = 0
        self._due: dict[TickHandle, int] = {}

    @property
    def now_millis(self) -> int:
        return self._now_millis

    @property
    def pending(self) -> list[TickHandle]:
        return list(self._due)

    def schedule_periodic(self, interval_millis: int, on_tick: TickCallback) -> TickHandle:
        if interval_millis <= 0:
            raise ValueError("Tick interval must be positive")
        handle = TickHandle(interval_millis, on_tick, on_cancel=self._release)
        self._due[handle] = self._now_millis + interval_millis
        return handle

    def advance(self, millis: int) -> int:
        """Move the clock forward and fire due ticks in time order.

        Returns the number of ticks delivered.
        """
        if millis < 0:
            raise ValueError("Cannot move the clock backwards")
        target = self._now_millis + millis
        fired = 0
        while self._due:
            handle, due = min(self._due.items(), key=lambda item: item[1])
            if due > target:
                break
            self._now_millis = due
            self._due[handle] = due + handle.interval_millis
            handle.deliver()
            fired += 1
        self._now_millis = target
        return fired

    def _release(self, handle: TickHandle) -> None:
        self._due.pop(handle, None)
