"""Student records feature.

Multi-tenant CRUD for students with age and per-tenant email uniqueness
rules and soft delete.
"""

from .entities import Student, StudentRepository
from .permissions import StudentPermissions, get_permission_definitions
from .repositories import StudentDatabaseRepository
from .services import StudentManager, StudentService

__all__ = [
    "Student",
    "StudentRepository",
    "StudentDatabaseRepository",
    "StudentManager",
    "StudentService",
    "StudentPermissions",
    "get_permission_definitions",
]
