"""Student repositories."""

from .student_repository import StudentDatabaseRepository

__all__ = ["StudentDatabaseRepository"]
