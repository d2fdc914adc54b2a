"""Pagination feature: sorting and skip/take windows."""

from .entities import (
    DEFAULT_MAX_RESULT_COUNT,
    MAX_MAX_RESULT_COUNT,
    PagedResult,
    SkipTakeRequest,
    SortField,
    SortOrder,
    parse_sorting,
)

__all__ = [
    "DEFAULT_MAX_RESULT_COUNT",
    "MAX_MAX_RESULT_COUNT",
    "SortOrder",
    "SortField",
    "SkipTakeRequest",
    "parse_sorting",
    "PagedResult",
]
