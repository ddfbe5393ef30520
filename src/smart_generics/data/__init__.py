"""Stateless data helpers: parsing, casting, sorting."""

from .comparator import sort_by
from .parser import FromJson, parse_data, parse_json, parse_many, parse_response, try_parse_data
from .type_utils import is_not_null, try_cast

__all__ = [
    "FromJson",
    "parse_data",
    "parse_many",
    "parse_json",
    "parse_response",
    "try_parse_data",
    "try_cast",
    "is_not_null",
    "sort_by",
]
