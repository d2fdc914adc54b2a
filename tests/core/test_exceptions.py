"""Tests for the exception hierarchy and HTTP mapping."""

import pytest

from clinic_management.core.exceptions import (
    AgeRestrictionViolation,
    AuthenticationError,
    BusinessLogicError,
    ClinicError,
    ConnectionError,
    DatabaseError,
    DuplicateEmailViolation,
    EntityNotFoundError,
    InvalidTokenError,
    PermissionDeniedError,
    ValidationError,
    create_error_response,
    get_http_status_code,
)


class TestHttpStatusMapping:
    """Test exception to status code mapping."""
    
    @pytest.mark.parametrize(
        "exception, expected",
        [
            (AgeRestrictionViolation(18), 400),
            (BusinessLogicError("rule broken"), 400),
            (DuplicateEmailViolation("a@example.com"), 409),
            (EntityNotFoundError("Student", "1"), 404),
            (ValidationError("bad", field="first_name"), 422),
            (AuthenticationError("no token"), 401),
            (InvalidTokenError("bad token"), 401),
            (PermissionDeniedError(["students:create"]), 403),
            (DatabaseError("down"), 500),
            (ConnectionError("down"), 500),
            (ClinicError("generic"), 500),
            (RuntimeError("unexpected"), 500),
        ],
    )
    def test_status_codes(self, exception, expected):
        assert get_http_status_code(exception) == expected
    
    def test_subclass_without_own_entry_uses_parent(self):
        class CourseFullViolation(BusinessLogicError):
            pass
        
        assert get_http_status_code(CourseFullViolation("full")) == 400


class TestErrorResponse:
    """Test the JSON error body."""
    
    def test_business_error_body(self):
        body = create_error_response(DuplicateEmailViolation("a@example.com"))
        
        assert body == {
            "error": {
                "code": "Student:DuplicateEmail",
                "message": "A student with email 'a@example.com' already exists",
                "details": {"email": "a@example.com"},
                "type": "DuplicateEmailViolation",
            }
        }
    
    def test_error_code_defaults_to_class_name(self):
        error = EntityNotFoundError("Student", "42")
        
        assert error.error_code == "EntityNotFoundError"
        assert error.details == {"entity_type": "Student", "id": "42"}
