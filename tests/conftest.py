"""Pytest configuration and fixtures for clinic-management tests."""

import copy
from contextlib import asynccontextmanager
from datetime import date
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest

from clinic_management.features.auth.entities.auth_context import AuthContext
from clinic_management.features.pagination.entities import PagedResult, SortField, SortOrder
from clinic_management.features.students.entities.student import Student
from clinic_management.features.students.permissions import StudentPermissions
from clinic_management.features.students.services.student_manager import StudentManager
from clinic_management.features.students.services.student_service import StudentService


FIXED_TODAY = date(2026, 1, 27)


class InMemoryStudentRepository:
    """Student repository keeping rows in a dict, with the same scoping rules as the database."""
    
    def __init__(self):
        self.rows: Dict[UUID, Student] = {}
    
    def _live(self, tenant_id: Optional[UUID]) -> List[Student]:
        return [
            s for s in self.rows.values()
            if s.tenant_id == tenant_id and not s.is_deleted
        ]
    
    async def find_by_id(self, student_id, tenant_id):
        for student in self._live(tenant_id):
            if student.id == student_id:
                return copy.deepcopy(student)
        return None
    
    async def find_by_email(self, email, tenant_id, exclude_id=None):
        for student in self._live(tenant_id):
            if student.email == email and student.id != exclude_id:
                return copy.deepcopy(student)
        return None
    
    async def insert(self, student):
        self.rows[student.id] = copy.deepcopy(student)
        return copy.deepcopy(student)
    
    async def update(self, student):
        self.rows[student.id] = copy.deepcopy(student)
        return copy.deepcopy(student)
    
    async def soft_delete(self, student):
        self.rows[student.id] = copy.deepcopy(student)
    
    async def find_paginated(self, tenant_id, filter_text, sort_fields: List[SortField], skip, take):
        items = self._filtered(tenant_id, filter_text)
        for sort_field in reversed(sort_fields):
            present = [s for s in items if getattr(s, sort_field.field) is not None]
            missing = [s for s in items if getattr(s, sort_field.field) is None]
            present.sort(
                key=lambda s: getattr(s, sort_field.field),
                reverse=sort_field.order == SortOrder.DESC,
            )
            items = present + missing
        return PagedResult(
            items=[copy.deepcopy(s) for s in items[skip:skip + take]],
            total_count=len(items),
        )
    
    def _filtered(self, tenant_id, filter_text):
        items = self._live(tenant_id)
        if filter_text and filter_text.strip():
            needle = filter_text.lower()
            items = [
                s for s in items
                if needle in s.first_name.lower() or needle in s.last_name.lower()
            ]
        return items


@pytest.fixture
def fixed_today():
    """Reference date used by the manager clock."""
    return FIXED_TODAY


@pytest.fixture
def tenant_id():
    return uuid4()


@pytest.fixture
def other_tenant_id():
    return uuid4()


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def mock_connection():
    """Mock asyncpg connection handed out by ``DatabaseManager.transaction``."""
    connection = AsyncMock()
    connection.fetch = AsyncMock()
    connection.fetchval = AsyncMock()
    return connection


@pytest.fixture
def mock_database(mock_connection):
    """Mock DatabaseManager for repository tests."""
    
    @asynccontextmanager
    async def transaction(**options):
        yield mock_connection
    
    mock_db = AsyncMock()
    mock_db.transaction = MagicMock(side_effect=transaction)
    mock_db.fetchrow = AsyncMock()
    mock_db.execute = AsyncMock()
    return mock_db


@pytest.fixture
def student_repository():
    return InMemoryStudentRepository()


@pytest.fixture
def student_manager(student_repository):
    return StudentManager(student_repository, clock=lambda: FIXED_TODAY)


@pytest.fixture
def student_service(student_repository, student_manager):
    return StudentService(student_repository, student_manager)


@pytest.fixture
def sample_student(tenant_id):
    return Student(
        id=uuid4(),
        first_name="Jane",
        last_name="Doe",
        date_of_birth=date(2000, 6, 15),
        email="jane.doe@example.com",
        phone_number="+1-555-0100",
        address="1 Main St",
        tenant_id=tenant_id,
    )


@pytest.fixture
def full_access_user(tenant_id, user_id):
    """Auth context holding every student permission."""
    return AuthContext(
        user_id=user_id,
        tenant_id=tenant_id,
        username="admin",
        permissions=frozenset({
            StudentPermissions.READ,
            StudentPermissions.CREATE,
            StudentPermissions.UPDATE,
            StudentPermissions.DELETE,
        }),
    )


@pytest.fixture
def read_only_user(tenant_id, user_id):
    return AuthContext(
        user_id=user_id,
        tenant_id=tenant_id,
        username="viewer",
        permissions=frozenset({StudentPermissions.READ}),
    )
