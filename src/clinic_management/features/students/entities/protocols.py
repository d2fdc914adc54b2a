"""Protocol interfaces for student persistence."""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable
from uuid import UUID

from ...pagination.entities import PagedResult, SortField
from .student import Student


@runtime_checkable
class StudentRepository(Protocol):
    """Protocol for student data persistence operations.
    
    Every lookup is scoped to one tenant (``None`` is the host scope) and
    ignores soft-deleted rows.
    """
    
    @abstractmethod
    async def find_by_id(self, student_id: UUID, tenant_id: Optional[UUID]) -> Optional[Student]:
        """Find a live student by ID within a tenant."""
        ...
    
    @abstractmethod
    async def find_by_email(
        self,
        email: str,
        tenant_id: Optional[UUID],
        exclude_id: Optional[UUID] = None,
    ) -> Optional[Student]:
        """Find a live student holding ``email``, optionally ignoring one ID."""
        ...
    
    @abstractmethod
    async def insert(self, student: Student) -> Student:
        """Persist a new student."""
        ...
    
    @abstractmethod
    async def update(self, student: Student) -> Student:
        """Persist field and audit changes of an existing student."""
        ...
    
    @abstractmethod
    async def soft_delete(self, student: Student) -> None:
        """Persist the deletion marker of a student."""
        ...
    
    @abstractmethod
    async def find_paginated(
        self,
        tenant_id: Optional[UUID],
        filter_text: Optional[str],
        sort_fields: List[SortField],
        skip: int,
        take: int,
    ) -> PagedResult[Student]:
        """Return one ordered window of matching students and the total match count."""
        ...
