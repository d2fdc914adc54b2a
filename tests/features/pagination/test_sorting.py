"""Tests for sorting and skip/take windows."""

import pytest

from clinic_management.core.exceptions import ValidationError
from clinic_management.features.pagination import (
    PagedResult,
    SkipTakeRequest,
    SortField,
    SortOrder,
    parse_sorting,
)


ALLOWED = {"first_name": "first_name", "date_of_birth": "date_of_birth"}


class TestParseSorting:
    """Test parse_sorting."""
    
    def test_camel_and_snake_case_names(self):
        result = parse_sorting("firstName DESC, date_of_birth", ALLOWED)
        
        assert result == [
            SortField("first_name", SortOrder.DESC),
            SortField("date_of_birth", SortOrder.ASC),
        ]
    
    @pytest.mark.parametrize("sorting", [None, "", "   ", " , "])
    def test_blank_uses_default(self, sorting):
        default = [SortField("first_name")]
        assert parse_sorting(sorting, ALLOWED, default=default) == default
    
    @pytest.mark.parametrize("sorting", ["password", "first_name sideways", "first_name asc extra"])
    def test_invalid_terms(self, sorting):
        with pytest.raises(ValidationError) as exc_info:
            parse_sorting(sorting, ALLOWED)
        assert exc_info.value.field == "sorting"


class TestSortField:
    """Test SortField SQL rendering and validation."""
    
    def test_to_sql(self):
        assert SortField("last_name").to_sql() == "last_name ASC NULLS LAST"
        assert SortField("email", SortOrder.DESC, nulls_last=False).to_sql() == "email DESC NULLS FIRST"
    
    @pytest.mark.parametrize("name", ["", "name; DROP TABLE students", "a.b", "x--"])
    def test_rejects_unsafe_identifiers(self, name):
        with pytest.raises(ValidationError):
            SortField(name)


class TestSkipTakeRequest:
    """Test window bounds."""
    
    def test_defaults(self):
        request = SkipTakeRequest()
        assert (request.skip_count, request.max_result_count) == (0, 10)
    
    @pytest.mark.parametrize(
        "kwargs",
        [{"skip_count": -1}, {"max_result_count": 0}, {"max_result_count": 1001}],
    )
    def test_bounds(self, kwargs):
        with pytest.raises(ValidationError):
            SkipTakeRequest(**kwargs)


def test_paged_result_defaults():
    result = PagedResult()
    assert result.items == []
    assert result.total_count == 0
