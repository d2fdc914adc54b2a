"""Pagination response entities."""

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """A window of items with the total count before paging."""
    
    items: List[T] = field(default_factory=list)
    total_count: int = 0
