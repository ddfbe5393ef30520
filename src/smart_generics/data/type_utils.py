"""Safe casting helpers."""

from __future__ import annotations

import types
from collections.abc import Mapping
from typing import Any, TypeVar, Union, get_args, get_origin, overload

T = TypeVar("T")

_SEQUENCE_ORIGINS = (list, set, frozenset)


@overload
def try_cast(value: object, target: type[T]) -> T | None: ...


@overload
def try_cast(value: object, target: Any) -> Any: ...


def try_cast(value: object, target: Any) -> Any:
    """Return ``value`` when it matches ``target``, otherwise ``None``.

    ``target`` may be a class, a tuple of classes, ``None``, or a
    parameterized builtin container such as ``list[int]`` or
    ``dict[str, int]``; containers are checked element by element.
    """

    return value if _matches(value, target) else None


def is_not_null(value: object) -> bool:
    return value is not None


def _matches(value: object, target: Any) -> bool:
    if target is None or target is type(None):
        return value is None
    if target is Any:
        return True
    if isinstance(target, tuple):
        return any(_matches(value, option) for option in target)

    origin = get_origin(target)
    if origin is None:
        if not isinstance(target, type):
            raise TypeError(f"unsupported cast target: {target!r}")
        # bool is an int subclass but never a valid int.
        if target is int and isinstance(value, bool):
            return False
        return isinstance(value, target)

    args = get_args(target)
    if origin is Union or origin is types.UnionType:
        return any(_matches(value, option) for option in args)
    if not isinstance(value, origin):
        return False
    if not args:
        return True
    if origin in _SEQUENCE_ORIGINS:
        return all(_matches(item, args[0]) for item in value)  # type: ignore[attr-defined]
    if origin is tuple:
        return _matches_tuple(value, args)  # type: ignore[arg-type]
    if isinstance(value, Mapping) and len(args) == 2:
        key_type, value_type = args
        return all(
            _matches(key, key_type) and _matches(item, value_type)
            for key, item in value.items()
        )
    return True


def _matches_tuple(value: tuple[object, ...], args: tuple[Any, ...]) -> bool:
    if len(args) == 2 and args[1] is Ellipsis:
        return all(_matches(item, args[0]) for item in value)
    if args == ((),):
        return len(value) == 0
    if len(args) != len(value):
        return False
    return all(_matches(item, arg) for item, arg in zip(value, args))


__all__ = [
    "try_cast",
    "is_not_null",
]
