"""Debounce timing utility."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Generic, TypeVar

from ..core.async_scheduling import AsyncioScheduler
from ..core.scheduling import Scheduler, TimerHandle
from .shared import Action, ensure_not_disposed, run_action

T = TypeVar("T")

logger = logging.getLogger("smart_generics")


class Debouncer(Generic[T]):
    """Delays an action until calls have been quiet for ``delay_seconds``.

    Every ``call`` cancels the pending invocation and schedules a new one, so
    a burst of calls fires the action once with the last value. The action is
    read when the timer fires; if it is ``None`` by then the value is dropped.

    Example::

        debouncer = Debouncer[str](0.3, action=search)
        debouncer("Fl")
        debouncer("Flutter")  # only this one reaches ``search``
    """

    def __init__(
        self,
        delay_seconds: float,
        *,
        action: Action[T] | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._delay_seconds = max(0.0, float(delay_seconds))
        self.action = action
        self._scheduler = scheduler or AsyncioScheduler()
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._disposed = False

    @property
    def delay_seconds(self) -> float:
        return self._delay_seconds

    @property
    def pending(self) -> bool:
        return self._timer is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __call__(self, value: T) -> None:
        self.call(value)

    def call(self, value: T) -> None:
        ensure_not_disposed(self, disposed=self._disposed)
        self.cancel()
        self._generation += 1
        generation = self._generation
        self._timer = self._scheduler.call_later(
            self._delay_seconds,
            lambda: self._fire(generation, value),
        )
        logger.debug(
            "debounce scheduled delay=%s generation=%s",
            self._delay_seconds,
            generation,
        )

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""

        timer = self._timer
        if timer is None:
            return
        self._timer = None
        self._generation += 1
        timer.cancel()
        logger.debug("debounce cancelled generation=%s", self._generation)

    def dispose(self) -> None:
        if self._disposed:
            return
        self.cancel()
        self._disposed = True
        logger.debug("debounce disposed")

    def _fire(self, generation: int, value: T) -> None:
        if self._disposed or generation != self._generation:
            return
        self._timer = None
        action = self.action
        if action is None:
            logger.debug("debounce fire skipped generation=%s reason=no_action", generation)
            return
        run_action(action, value)

    def __enter__(self) -> "Debouncer[T]":
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
    "Debouncer",
]
