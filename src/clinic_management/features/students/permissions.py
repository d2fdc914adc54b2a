"""Permission codes guarding the student endpoints."""

from typing import List

from ..auth.entities.permission import PermissionDefinition


class StudentPermissions:
    """Permission codes in ``resource:action`` format."""
    
    GROUP = "students"
    
    READ = "students:read"
    CREATE = "students:create"
    UPDATE = "students:update"
    DELETE = "students:delete"


def get_permission_definitions() -> List[PermissionDefinition]:
    """Permission tree for seeding an external permission store.
    
    Create, update and delete are children of read; the routes require the
    parent grant together with the child.
    """
    return [
        PermissionDefinition(
            code=StudentPermissions.READ,
            display_name="Students",
            description="View student records",
            children=[
                PermissionDefinition(
                    code=StudentPermissions.CREATE,
                    display_name="Create students",
                ),
                PermissionDefinition(
                    code=StudentPermissions.UPDATE,
                    display_name="Edit students",
                ),
                PermissionDefinition(
                    code=StudentPermissions.DELETE,
                    display_name="Delete students",
                ),
            ],
        )
    ]
