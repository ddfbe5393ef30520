from __future__ import annotations

import asyncio
import threading

from smart_generics.core.scheduling import ThreadingScheduler
from smart_generics.timing.debounce import Debouncer
from smart_generics.timing.throttle import Throttler


def test_threading_scheduler_runs_callback_on_timer_thread():
    fired = threading.Event()
    thread_names: list[str] = []

    def callback() -> None:
        thread_names.append(threading.current_thread().name)
        fired.set()

    timer = ThreadingScheduler().call_later(0.01, callback)
    assert fired.wait(timeout=2.0)
    assert timer.daemon is True
    assert thread_names and thread_names[0] != threading.main_thread().name


def test_threading_scheduler_cancel_prevents_callback():
    fired = threading.Event()
    timer = ThreadingScheduler(daemon=False).call_later(0.2, fired.set)
    timer.cancel()
    assert not fired.wait(timeout=0.4)


def test_debouncer_with_threading_scheduler():
    fired = threading.Event()
    seen: list[str] = []

    def action(value: str) -> None:
        seen.append(value)
        fired.set()

    debouncer = Debouncer[str](0.05, action=action, scheduler=ThreadingScheduler())
    debouncer.call("a")
    debouncer.call("b")
    assert fired.wait(timeout=2.0)
    assert seen == ["b"]
    debouncer.dispose()


def test_throttler_with_threading_scheduler():
    seen: list[str] = []
    throttler = Throttler[str](5.0, action=seen.append, scheduler=ThreadingScheduler())
    throttler.call("a")
    throttler.call("b")
    throttler.dispose()
    assert seen == ["a"]


def test_debouncer_runs_coroutine_action_on_timer_thread():
    fired = threading.Event()
    seen: list[str] = []
    errors: list[BaseException] = []
    previous_hook = threading.excepthook
    threading.excepthook = lambda args: errors.append(args.exc_value)

    async def search(term: str) -> None:
        await asyncio.sleep(0)
        seen.append(term)
        fired.set()

    try:
        debouncer = Debouncer[str](0.01, action=search, scheduler=ThreadingScheduler())
        debouncer.call("a")
        debouncer.call("b")
        assert fired.wait(timeout=2.0)
    finally:
        threading.excepthook = previous_hook

    assert seen == ["b"]
    assert errors == []
