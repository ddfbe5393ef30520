"""Timer scheduling primitives."""

from __future__ import annotations

import threading
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> TimerHandle: ...


class ThreadingScheduler:
    """Runs callbacks on ``threading.Timer`` threads."""

    def __init__(self, *, daemon: bool = True) -> None:
        self._daemon = daemon

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> threading.Timer:
        timer = threading.Timer(max(0.0, float(delay_seconds)), callback)
        timer.daemon = self._daemon
        timer.start()
        return timer


__all__ = [
    "TimerHandle",
    "Scheduler",
    "ThreadingScheduler",
]
