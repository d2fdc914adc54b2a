"""Tests for AuthContext permission checks and permission definitions."""

from uuid import uuid4

import pytest

from clinic_management.features.auth.entities.auth_context import AuthContext
from clinic_management.features.auth.entities.permission import PermissionDefinition
from clinic_management.features.students.permissions import (
    StudentPermissions,
    get_permission_definitions,
)


class TestAuthContext:
    """Test permission checks."""
    
    def test_exact_permissions(self):
        context = AuthContext(user_id=uuid4(), permissions={"students:read"})
        
        assert isinstance(context.permissions, frozenset)
        assert context.has_permission("students:read")
        assert not context.has_permission("students:create")
        assert context.has_any_permission(["students:create", "students:read"])
        assert not context.has_all_permissions(["students:create", "students:read"])
        assert context.missing_permissions(["students:read", "students:create"]) == ["students:create"]
    
    def test_wildcard_covers_resource_only(self):
        context = AuthContext(user_id=uuid4(), permissions=frozenset({"students:*"}))
        
        assert context.has_all_permissions(["students:read", "students:delete"])
        assert not context.has_permission("courses:read")
    
    def test_is_immutable(self):
        context = AuthContext(user_id=uuid4())
        
        with pytest.raises(AttributeError):
            context.tenant_id = uuid4()


class TestPermissionDefinitions:
    """Test the student permission tree."""
    
    def test_tree_shape(self):
        (root,) = get_permission_definitions()
        
        assert root.code == StudentPermissions.READ
        assert [child.code for child in root.children] == [
            StudentPermissions.CREATE,
            StudentPermissions.UPDATE,
            StudentPermissions.DELETE,
        ]
        assert all(definition.resource == StudentPermissions.GROUP for definition in root.walk())
        assert [definition.action for definition in root.walk()] == [
            "read", "create", "update", "delete",
        ]
    
    def test_invalid_code_is_rejected(self):
        with pytest.raises(ValueError):
            PermissionDefinition(code="Students.Create", display_name="bad")
