"""Domain-specific exceptions for clinic-management.

Business rule violations are raised as typed errors and surfaced to the
caller unchanged; they are never corrected silently.
"""

from typing import Optional

from .base import ClinicError


# Validation Errors
class ValidationError(ClinicError):
    """Raised when an entity field violates its bounds."""
    
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


# Entity Errors
class EntityNotFoundError(ClinicError):
    """Raised when no live (non-deleted) entity exists for an identifier."""
    
    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(
            f"There is no such an entity. Entity type: {entity_type}, id: {entity_id}",
            details={"entity_type": entity_type, "id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


# Business Logic Errors
class BusinessLogicError(ClinicError):
    """Raised when business logic validation fails."""
    pass


class AgeRestrictionViolation(BusinessLogicError):
    """Raised when a student is younger than the minimum age."""
    
    def __init__(self, minimum_age: int):
        super().__init__(
            f"Student must be at least {minimum_age} years old",
            error_code="Student:MustBe18OrOlder",
            details={"minimum_age": minimum_age},
        )
        self.minimum_age = minimum_age


class DuplicateEmailViolation(BusinessLogicError):
    """Raised when another student of the same tenant already uses the email."""
    
    def __init__(self, email: str):
        super().__init__(
            f"A student with email '{email}' already exists",
            error_code="Student:DuplicateEmail",
            details={"email": email},
        )
        self.email = email


# Authentication Errors
class AuthenticationError(ClinicError):
    """Base class for authentication-related errors."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token cannot be validated."""
    pass


# Authorization Errors
class AuthorizationError(ClinicError):
    """Base class for authorization-related errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when user lacks required permissions."""
    
    def __init__(self, missing: list):
        super().__init__(
            f"Permission required: {', '.join(missing)}",
            details={"missing_permissions": missing},
        )
        self.missing = missing


# Configuration Errors
class ConfigurationError(ClinicError):
    """Raised when there's a configuration issue."""
    pass
