"""Student entities."""

from .protocols import StudentRepository
from .student import Student

__all__ = ["Student", "StudentRepository"]
