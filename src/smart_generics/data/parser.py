"""JSON deserialization helpers."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

import httpx

from ..core.errors import ParseError
from ..result import Failure, Result, Success

T = TypeVar("T")

FromJson = Callable[[Mapping[str, Any]], T]
JsonObject = dict[str, Any]


def parse_data(payload: Mapping[str, Any], converter: FromJson[T]) -> T:
    """Build a ``T`` from a decoded JSON object using ``converter``."""

    return converter(payload)


def parse_many(payloads: Iterable[Mapping[str, Any]], converter: FromJson[T]) -> list[T]:
    return [converter(payload) for payload in payloads]


def parse_json(raw: str | bytes, converter: FromJson[T]) -> T:
    """Decode JSON text whose root is an object, then convert it."""

    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise ParseError("payload is not valid JSON", cause="decode") from exc
    return converter(_ensure_object(payload))


def parse_response(response: httpx.Response, converter: FromJson[T]) -> T:
    """Convert the JSON body of an already received ``httpx.Response``."""

    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseError(
            "response body is not valid JSON",
            http_status=response.status_code,
            cause="decode",
        ) from exc
    return converter(_ensure_object(payload, http_status=response.status_code))


def try_parse_data(payload: Mapping[str, Any], converter: FromJson[T]) -> Result[T]:
    """Like ``parse_data`` but reports converter failures as a ``Failure``."""

    try:
        return Success(converter(payload))
    except (KeyError, TypeError, ValueError, ParseError) as exc:
        return Failure(f"{type(exc).__name__}: {exc}")


def _ensure_object(payload: object, *, http_status: int | None = None) -> JsonObject:
    if not isinstance(payload, dict):
        raise ParseError(
            "JSON root must be an object",
            http_status=http_status,
            cause="shape",
        )
    if any(not isinstance(key, str) for key in payload):
        raise ParseError(
            "JSON object keys must be strings",
            http_status=http_status,
            cause="shape",
        )
    return payload


__all__ = [
    "FromJson",
    "parse_data",
    "parse_many",
    "parse_json",
    "parse_response",
    "try_parse_data",
]
