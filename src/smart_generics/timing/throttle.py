"""Throttle timing utility."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Generic, TypeVar

from ..core.async_scheduling import AsyncioScheduler
from ..core.scheduling import Scheduler, TimerHandle
from .shared import Action, ensure_not_disposed, run_action

T = TypeVar("T")

logger = logging.getLogger("smart_generics")


class Throttler(Generic[T]):
    """Runs an action at most once per ``interval_seconds``.

    The first call while ready runs the action synchronously; calls arriving
    before the interval elapses are dropped.
    """

    def __init__(
        self,
        interval_seconds: float,
        *,
        action: Action[T] | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._interval_seconds = max(0.0, float(interval_seconds))
        self.action = action
        self._scheduler = scheduler or AsyncioScheduler()
        self._ready = True
        self._reset_timer: TimerHandle | None = None
        self._disposed = False

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __call__(self, value: T) -> None:
        self.call(value)

    def call(self, value: T) -> None:
        ensure_not_disposed(self, disposed=self._disposed)
        if not self._ready:
            logger.debug("throttle call dropped interval=%s", self._interval_seconds)
            return
        # Readiness only flips once a reset timer exists.
        timer = self._scheduler.call_later(self._interval_seconds, self._restore)
        self._ready = False
        self._reset_timer = timer
        action = self.action
        if action is None:
            logger.debug("throttle fire skipped reason=no_action")
            return
        run_action(action, value)

    def dispose(self) -> None:
        if self._disposed:
            return
        timer = self._reset_timer
        self._reset_timer = None
        if timer is not None:
            timer.cancel()
        self._disposed = True
        logger.debug("throttle disposed")

    def _restore(self) -> None:
        if self._disposed:
            return
        self._reset_timer = None
        self._ready = True
        logger.debug("throttle ready")

    def __enter__(self) -> "Throttler[T]":
        ensure_not_disposed(self, disposed=self._disposed)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.dispose()
        return False


__all__ = [
    "Throttler",
]
