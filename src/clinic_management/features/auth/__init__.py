"""Authentication and authorization feature."""

from .dependencies import get_current_user, get_token_validator, require_permissions
from .entities import AuthContext, PermissionDefinition
from .services import TokenValidator

__all__ = [
    "AuthContext",
    "PermissionDefinition",
    "TokenValidator",
    "get_current_user",
    "get_token_validator",
    "require_permissions",
]
