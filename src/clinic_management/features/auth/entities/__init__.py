"""Auth entities."""

from .auth_context import AuthContext
from .permission import PermissionDefinition

__all__ = ["AuthContext", "PermissionDefinition"]
