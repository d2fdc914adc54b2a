"""Pagination entities."""

from .requests import (
    DEFAULT_MAX_RESULT_COUNT,
    MAX_MAX_RESULT_COUNT,
    SkipTakeRequest,
    SortField,
    SortOrder,
    parse_sorting,
)
from .responses import PagedResult

__all__ = [
    "DEFAULT_MAX_RESULT_COUNT",
    "MAX_MAX_RESULT_COUNT",
    "SortOrder",
    "SortField",
    "SkipTakeRequest",
    "parse_sorting",
    "PagedResult",
]
