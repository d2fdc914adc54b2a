"""Student API models."""

from .requests import CreateStudentRequest, StudentListRequest, StudentRequestBase, UpdateStudentRequest
from .responses import StudentListResponse, StudentResponse

__all__ = [
    "StudentRequestBase",
    "CreateStudentRequest",
    "UpdateStudentRequest",
    "StudentListRequest",
    "StudentResponse",
    "StudentListResponse",
]
