"""Debounce and throttle timing utilities."""

from .debounce import Debouncer
from .throttle import Throttler

__all__ = [
    "Debouncer",
    "Throttler",
]
