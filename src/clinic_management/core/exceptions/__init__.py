"""Exception hierarchy for clinic-management."""

from .base import ClinicError, create_error_response, get_http_status_code
from .database import ConnectionError, DatabaseError, InvalidSchemaError
from .domain import (
    AgeRestrictionViolation,
    AuthenticationError,
    AuthorizationError,
    BusinessLogicError,
    ConfigurationError,
    DuplicateEmailViolation,
    EntityNotFoundError,
    InvalidTokenError,
    PermissionDeniedError,
    ValidationError,
)
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "ClinicError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    
    # Domain
    "ValidationError",
    "EntityNotFoundError",
    "BusinessLogicError",
    "AgeRestrictionViolation",
    "DuplicateEmailViolation",
    "AuthenticationError",
    "InvalidTokenError",
    "AuthorizationError",
    "PermissionDeniedError",
    "ConfigurationError",
    
    # Database
    "DatabaseError",
    "ConnectionError",
    "InvalidSchemaError",
]
