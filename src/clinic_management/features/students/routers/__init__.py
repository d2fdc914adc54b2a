"""Student routers."""

from .student_router import router

__all__ = ["router"]
