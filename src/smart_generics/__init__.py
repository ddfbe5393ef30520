"""Public package exports for smart_generics."""

from .config import TimingConfig
from .factory import build_debouncer, build_throttler
from .result import Failure, Result, Success, failure, success
from .timing import Debouncer, Throttler

__all__ = [
    "Debouncer",
    "Throttler",
    "TimingConfig",
    "build_debouncer",
    "build_throttler",
    "Success",
    "Failure",
    "Result",
    "success",
    "failure",
]
