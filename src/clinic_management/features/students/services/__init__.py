"""Student services."""

from .student_manager import StudentManager
from .student_service import StudentService

__all__ = ["StudentManager", "StudentService"]
