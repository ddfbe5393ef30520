"""Timing configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

SCHEDULER_BACKENDS = frozenset({"asyncio", "threading"})


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(slots=True, frozen=True)
class DebounceConfig:
    """Debounce-related settings."""

    delay_seconds: float = 0.3

    def validate(self) -> None:
        if not _is_number(self.delay_seconds):
            raise ValueError("debounce.delay_seconds must be a number")
        if self.delay_seconds < 0:
            raise ValueError("debounce.delay_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class ThrottleConfig:
    """Throttle-related settings."""

    interval_seconds: float = 1.0

    def validate(self) -> None:
        if not _is_number(self.interval_seconds):
            raise ValueError("throttle.interval_seconds must be a number")
        if self.interval_seconds < 0:
            raise ValueError("throttle.interval_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class SchedulerConfig:
    """Timer service settings."""

    backend: str = "asyncio"
    daemon_threads: bool = True

    def validate(self) -> None:
        if self.backend not in SCHEDULER_BACKENDS:
            raise ValueError(
                f"scheduler.backend must be one of {sorted(SCHEDULER_BACKENDS)}"
            )
        if not isinstance(self.daemon_threads, bool):
            raise ValueError("scheduler.daemon_threads must be bool")


@dataclass(slots=True, frozen=True)
class TimingConfig:
    """Runtime configuration for debouncers and throttlers."""

    debounce: DebounceConfig = field(default_factory=DebounceConfig)
    throttle: ThrottleConfig = field(default_factory=ThrottleConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)

    def validate(self) -> None:
        self.debounce.validate()
        self.throttle.validate()
        self.scheduler.validate()


__all__ = [
    "DebounceConfig",
    "ThrottleConfig",
    "SchedulerConfig",
    "TimingConfig",
]
