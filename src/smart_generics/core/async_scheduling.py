"""Asyncio event-loop scheduling."""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class AsyncioScheduler:
    """Schedules callbacks on an asyncio event loop.

    Without an explicit loop, the loop running in the calling thread is used,
    so ``call_later`` must then be invoked from inside that loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0.0, float(delay_seconds)), callback)


__all__ = [
    "AsyncioScheduler",
]
