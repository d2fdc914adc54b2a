"""Pagination request entities and sorting helpers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional

from ....core.exceptions import ValidationError


DEFAULT_MAX_RESULT_COUNT = 10
MAX_MAX_RESULT_COUNT = 1000


class SortOrder(str, Enum):
    """Sort order enumeration."""
    ASC = "asc"
    DESC = "desc"
    
    def to_sql(self) -> str:
        """Convert to SQL ORDER BY clause."""
        return "ASC" if self == SortOrder.ASC else "DESC"


@dataclass(frozen=True)
class SortField:
    """Sort field specification with validation."""
    
    field: str
    order: SortOrder = SortOrder.ASC
    nulls_last: bool = True
    
    def to_sql(self) -> str:
        """Convert to SQL ORDER BY clause fragment."""
        nulls_clause = "NULLS LAST" if self.nulls_last else "NULLS FIRST"
        return f"{self.field} {self.order.to_sql()} {nulls_clause}"
    
    def __post_init__(self):
        """Validate field name for SQL injection prevention."""
        if not self.field or not self.field.replace("_", "").isalnum():
            raise ValidationError(f"Invalid sort field: {self.field}", field="sorting")


@dataclass(frozen=True)
class SkipTakeRequest:
    """Offset-based window expressed as skip/take."""
    
    skip_count: int = 0
    max_result_count: int = DEFAULT_MAX_RESULT_COUNT
    sort_fields: List[SortField] = field(default_factory=list)
    
    def __post_init__(self):
        """Validate window parameters."""
        if self.skip_count < 0:
            raise ValidationError("skip_count must be >= 0", field="skip_count")
        if self.max_result_count < 1 or self.max_result_count > MAX_MAX_RESULT_COUNT:
            raise ValidationError(
                f"max_result_count must be between 1 and {MAX_MAX_RESULT_COUNT}",
                field="max_result_count",
            )


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


def parse_sorting(
    sorting: Optional[str],
    allowed: Mapping[str, str],
    default: Optional[List[SortField]] = None,
) -> List[SortField]:
    """Parse a sorting expression such as ``"firstName desc, date_of_birth"``.
    
    Field names are matched case-insensitively in either camelCase or
    snake_case against ``allowed``, which maps public names to columns.
    
    Args:
        sorting: Comma separated ``name [asc|desc]`` terms; blank means default
        allowed: Public field name to column name
        default: Sort fields used when ``sorting`` is blank
        
    Returns:
        Sort fields in the requested order
        
    Raises:
        ValidationError: If a field is unknown or a direction is malformed
    """
    if not sorting or not sorting.strip():
        return list(default or [])
    
    lookup: Dict[str, str] = {_normalize(name): column for name, column in allowed.items()}
    result: List[SortField] = []
    
    for term in sorting.split(","):
        parts = term.split()
        if not parts:
            continue
        if len(parts) > 2:
            raise ValidationError(f"Invalid sorting term: '{term.strip()}'", field="sorting")
        
        column = lookup.get(_normalize(parts[0]))
        if column is None:
            raise ValidationError(f"Unknown sort field: '{parts[0]}'", field="sorting")
        
        order = SortOrder.ASC
        if len(parts) == 2:
            try:
                order = SortOrder(parts[1].lower())
            except ValueError:
                raise ValidationError(
                    f"Invalid sort direction: '{parts[1]}'", field="sorting"
                ) from None
        
        result.append(SortField(column, order))
    
    return result or list(default or [])
