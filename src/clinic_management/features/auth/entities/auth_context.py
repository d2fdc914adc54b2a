"""Authentication context entity."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional
from uuid import UUID


WILDCARD_ACTION = "*"


@dataclass(frozen=True)
class AuthContext:
    """Authenticated caller with tenant scope and granted permissions.
    
    ``tenant_id`` of ``None`` means the caller acts in the host scope.
    """
    
    user_id: UUID
    tenant_id: Optional[UUID] = None
    username: Optional[str] = None
    permissions: FrozenSet[str] = field(default_factory=frozenset)
    
    def __post_init__(self):
        if not isinstance(self.permissions, frozenset):
            object.__setattr__(self, "permissions", frozenset(self.permissions))
    
    def has_permission(self, permission: str) -> bool:
        """Check if user has specific permission.
        
        A grant of ``resource:*`` satisfies every action on that resource.
        """
        if permission in self.permissions:
            return True
        resource, _, _ = permission.partition(":")
        return f"{resource}:{WILDCARD_ACTION}" in self.permissions
    
    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        """Check if user has any of the specified permissions."""
        return any(self.has_permission(perm) for perm in permissions)
    
    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        """Check if user has all specified permissions."""
        return all(self.has_permission(perm) for perm in permissions)
    
    def missing_permissions(self, permissions: Iterable[str]) -> list:
        """Return the permissions from ``permissions`` the user lacks."""
        return [perm for perm in permissions if not self.has_permission(perm)]
