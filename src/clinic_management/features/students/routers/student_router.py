"""Student router with CRUD endpoints.

Every route requires ``students:read``; writes also require their own
permission. The caller's tenant comes from the auth context.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response, status

from ...auth.dependencies import require_permissions
from ...auth.entities.auth_context import AuthContext
from ..models.requests import CreateStudentRequest, StudentListRequest, UpdateStudentRequest
from ..models.responses import StudentListResponse, StudentResponse
from ..permissions import StudentPermissions
from ..services.student_service import StudentService
from .dependencies import get_student_service


router = APIRouter(
    prefix="/students",
    tags=["Students"],
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Permission denied"},
        422: {"description": "Validation error"},
    }
)


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Get student by ID",
    responses={404: {"description": "Student not found"}},
)
async def get_student(
    student_id: UUID = Path(..., description="Student ID"),
    current_user: AuthContext = Depends(require_permissions(StudentPermissions.READ)),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    """Get a student of the caller's tenant."""
    return await service.get(student_id, current_user.tenant_id)


@router.get(
    "/",
    response_model=StudentListResponse,
    summary="List students",
    description="Filter by name, sort and page the caller's students",
)
async def list_students(
    request: Annotated[StudentListRequest, Query()],
    current_user: AuthContext = Depends(require_permissions(StudentPermissions.READ)),
    service: StudentService = Depends(get_student_service),
) -> StudentListResponse:
    """List students of the caller's tenant."""
    return await service.get_list(request, current_user.tenant_id)


@router.post(
    "/",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create student",
    responses={
        400: {"description": "Student is younger than the minimum age"},
        409: {"description": "Email already used in this tenant"},
    },
)
async def create_student(
    request: CreateStudentRequest,
    current_user: AuthContext = Depends(
        require_permissions(StudentPermissions.READ, StudentPermissions.CREATE)
    ),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    """Create a student in the caller's tenant."""
    return await service.create(request, current_user.tenant_id, current_user.user_id)


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Update student",
    responses={
        400: {"description": "Student is younger than the minimum age"},
        404: {"description": "Student not found"},
        409: {"description": "Email already used in this tenant"},
    },
)
async def update_student(
    request: UpdateStudentRequest,
    student_id: UUID = Path(..., description="Student ID"),
    current_user: AuthContext = Depends(
        require_permissions(StudentPermissions.READ, StudentPermissions.UPDATE)
    ),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    """Update a student of the caller's tenant."""
    return await service.update(
        student_id, request, current_user.tenant_id, current_user.user_id
    )


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete student",
    responses={404: {"description": "Student not found"}},
)
async def delete_student(
    student_id: UUID = Path(..., description="Student ID"),
    current_user: AuthContext = Depends(
        require_permissions(StudentPermissions.READ, StudentPermissions.DELETE)
    ),
    service: StudentService = Depends(get_student_service),
) -> Response:
    """Soft delete a student of the caller's tenant."""
    await service.delete(student_id, current_user.tenant_id, current_user.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
