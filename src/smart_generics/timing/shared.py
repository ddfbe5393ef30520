"""Shared action plumbing for debouncer/throttler."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ..core.errors import TimerDisposedError

T = TypeVar("T")

Action = Callable[[T], object]

# Strong references for fire-and-forget coroutine actions.
_background_tasks: set[asyncio.Task[Any]] = set()


def run_action(action: Action[T], value: T) -> asyncio.Task[Any] | None:
    """Invoke ``action`` with ``value``.

    Awaitable outcomes become a task on the loop running in this thread. With
    no running loop (e.g. a ``ThreadingScheduler`` timer thread) the awaitable
    is run to completion here via ``asyncio.run``. Exceptions raised by the
    action itself propagate to the caller.
    """

    outcome = action(value)
    if not inspect.isawaitable(outcome):
        return None
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(_await(outcome))
        return None
    task = loop.create_task(_await(outcome))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def ensure_not_disposed(owner: object, *, disposed: bool) -> None:
    if disposed:
        raise TimerDisposedError(
            f"{type(owner).__name__} is already disposed",
            cause="disposed",
        )


__all__ = [
    "Action",
    "run_action",
    "ensure_not_disposed",
]
