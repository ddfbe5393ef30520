"""Config-driven construction of schedulers, debouncers and throttlers."""

from __future__ import annotations

from typing import TypeVar

from .config import TimingConfig
from .core.async_scheduling import AsyncioScheduler
from .core.errors import ConfigurationError
from .core.scheduling import Scheduler, ThreadingScheduler
from .timing.debounce import Debouncer
from .timing.shared import Action
from .timing.throttle import Throttler

T = TypeVar("T")


def validate_timing_config(config: TimingConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc), cause="config") from exc


def resolve_scheduler(
    *,
    config: TimingConfig,
    scheduler: Scheduler | None,
) -> Scheduler:
    if scheduler is not None:
        return scheduler
    if config.scheduler.backend == "threading":
        return ThreadingScheduler(daemon=config.scheduler.daemon_threads)
    return AsyncioScheduler()


def build_debouncer(
    config: TimingConfig | None = None,
    *,
    action: Action[T] | None = None,
    scheduler: Scheduler | None = None,
) -> Debouncer[T]:
    resolved = config or TimingConfig()
    validate_timing_config(resolved)
    return Debouncer(
        resolved.debounce.delay_seconds,
        action=action,
        scheduler=resolve_scheduler(config=resolved, scheduler=scheduler),
    )


def build_throttler(
    config: TimingConfig | None = None,
    *,
    action: Action[T] | None = None,
    scheduler: Scheduler | None = None,
) -> Throttler[T]:
    resolved = config or TimingConfig()
    validate_timing_config(resolved)
    return Throttler(
        resolved.throttle.interval_seconds,
        action=action,
        scheduler=resolve_scheduler(config=resolved, scheduler=scheduler),
    )


__all__ = [
    "validate_timing_config",
    "resolve_scheduler",
    "build_debouncer",
    "build_throttler",
]
