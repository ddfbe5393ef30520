"""Key-selector sorting."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def sort_by(
    items: Iterable[T],
    key_selector: Callable[[T], Any],
    *,
    descending: bool = False,
) -> list[T]:
    """Return a new list of ``items`` ordered by ``key_selector``.

    The input is left untouched. Equal keys keep their input order.
    """

    return sorted(items, key=key_selector, reverse=descending)


__all__ = [
    "sort_by",
]
