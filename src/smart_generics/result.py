"""Success/failure result wrapper."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from .core.errors import ResultUnwrapError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(slots=True, frozen=True)
class Success(Generic[T]):
    data: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.data

    def unwrap_or(self, default: T) -> T:
        return self.data

    def map(self, func: Callable[[T], U]) -> "Success[U]":
        return Success(func(self.data))


@dataclass(slots=True, frozen=True)
class Failure(Generic[T]):
    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ResultUnwrapError(self.message, cause="failure")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[T], U]) -> "Failure[U]":
        return Failure(self.message)


Result = Success[T] | Failure[T]


def success(data: T) -> Success[T]:
    return Success(data)


def failure(message: str) -> Failure[T]:
    return Failure(str(message))


__all__ = [
    "Success",
    "Failure",
    "Result",
    "success",
    "failure",
]
