"""Application service for student records.

Orchestrates the repository and the domain rules, and maps entities to
response models. Authorization happens at the router boundary.
"""

import logging
from typing import List, Optional
from uuid import UUID

from ....core.exceptions import EntityNotFoundError
from ...pagination.entities import SkipTakeRequest, SortField, SortOrder, parse_sorting
from ..entities.protocols import StudentRepository
from ..entities.student import Student
from ..models.requests import CreateStudentRequest, StudentListRequest, UpdateStudentRequest
from ..models.responses import StudentListResponse, StudentResponse
from ..utils.constants import SORTABLE_FIELDS
from .student_manager import StudentManager

logger = logging.getLogger(__name__)

DEFAULT_SORTING = [SortField("last_name"), SortField("first_name")]
TIE_BREAKER = SortField("id", SortOrder.ASC)


class StudentService:
    """Create, read, update and delete students of one tenant at a time."""
    
    def __init__(self, repository: StudentRepository, manager: StudentManager):
        self._repository = repository
        self._manager = manager
    
    async def get(self, student_id: UUID, tenant_id: Optional[UUID]) -> StudentResponse:
        """Get a live student of the tenant.
        
        Raises:
            EntityNotFoundError: If absent, deleted or owned by another tenant
        """
        student = await self._get_entity(student_id, tenant_id)
        return self._to_response(student)
    
    async def get_list(
        self, request: StudentListRequest, tenant_id: Optional[UUID]
    ) -> StudentListResponse:
        """Filter, sort and page the tenant's students."""
        window = SkipTakeRequest(
            skip_count=request.skip_count,
            max_result_count=request.max_result_count,
            sort_fields=self._build_sort_fields(request.sorting),
        )
        
        page = await self._repository.find_paginated(
            tenant_id=tenant_id,
            filter_text=request.filter,
            sort_fields=window.sort_fields,
            skip=window.skip_count,
            take=window.max_result_count,
        )
        
        today = self._manager.clock()
        return StudentListResponse(
            items=[StudentResponse.from_entity(student, today) for student in page.items],
            total_count=page.total_count,
        )
    
    async def create(
        self,
        request: CreateStudentRequest,
        tenant_id: Optional[UUID],
        user_id: Optional[UUID],
    ) -> StudentResponse:
        """Create a student in the tenant after the domain checks pass."""
        student = await self._manager.create(
            first_name=request.first_name,
            last_name=request.last_name,
            date_of_birth=request.date_of_birth,
            email=request.email,
            phone_number=request.phone_number,
            address=request.address,
            tenant_id=tenant_id,
        )
        student.mark_created(user_id)
        
        saved = await self._repository.insert(student)
        logger.info(f"Created student {saved.id} in tenant {tenant_id}")
        return self._to_response(saved)
    
    async def update(
        self,
        student_id: UUID,
        request: UpdateStudentRequest,
        tenant_id: Optional[UUID],
        user_id: Optional[UUID],
    ) -> StudentResponse:
        """Replace the editable fields of a live student."""
        student = await self._get_entity(student_id, tenant_id)
        
        await self._manager.update(
            student,
            first_name=request.first_name,
            last_name=request.last_name,
            date_of_birth=request.date_of_birth,
            email=request.email,
            phone_number=request.phone_number,
            address=request.address,
        )
        student.mark_modified(user_id)
        
        saved = await self._repository.update(student)
        logger.info(f"Updated student {student_id} in tenant {tenant_id}")
        return self._to_response(saved)
    
    async def delete(
        self,
        student_id: UUID,
        tenant_id: Optional[UUID],
        user_id: Optional[UUID],
    ) -> None:
        """Soft delete a live student."""
        student = await self._get_entity(student_id, tenant_id)
        student.mark_deleted(user_id)
        await self._repository.soft_delete(student)
        logger.info(f"Deleted student {student_id} in tenant {tenant_id}")
    
    async def _get_entity(self, student_id: UUID, tenant_id: Optional[UUID]) -> Student:
        student = await self._repository.find_by_id(student_id, tenant_id)
        if student is None:
            raise EntityNotFoundError("Student", str(student_id))
        return student
    
    def _to_response(self, student: Student) -> StudentResponse:
        return StudentResponse.from_entity(student, self._manager.clock())
    
    @staticmethod
    def _build_sort_fields(sorting: Optional[str]) -> List[SortField]:
        sort_fields = parse_sorting(sorting, SORTABLE_FIELDS, default=DEFAULT_SORTING)
        if all(sort_field.field != TIE_BREAKER.field for sort_field in sort_fields):
            sort_fields.append(TIE_BREAKER)
        return sort_fields
