"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import ClinicError
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


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    BusinessLogicError: 400,
    AgeRestrictionViolation: 400,
    
    # 401 Unauthorized
    AuthenticationError: 401,
    InvalidTokenError: 401,
    
    # 403 Forbidden
    AuthorizationError: 403,
    PermissionDeniedError: 403,
    
    # 404 Not Found
    EntityNotFoundError: 404,
    
    # 409 Conflict
    DuplicateEmailViolation: 409,
    
    # 422 Unprocessable Entity
    ValidationError: 422,
    
    # 500 Internal Server Error
    DatabaseError: 500,
    ConnectionError: 500,
    InvalidSchemaError: 500,
    ConfigurationError: 500,
    
    # Default for ClinicError
    ClinicError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, walking the class hierarchy.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
