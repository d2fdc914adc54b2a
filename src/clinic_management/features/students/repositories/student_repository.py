"""Student repository implementation on top of the asyncpg DatabaseManager.

SQL text lives in ``utils/queries.py``; this module only binds parameters,
maps rows and translates database failures into domain errors.
"""

import logging
from typing import Any, List, Mapping, Optional, Tuple
from uuid import UUID

import asyncpg

from ....core.exceptions import DatabaseError, DuplicateEmailViolation, EntityNotFoundError
from ....database.connection import DatabaseManager, validate_schema_name
from ...pagination.entities import PagedResult, SortField
from ..entities.student import Student
from ..utils.constants import EMAIL_UNIQUE_INDEX
from ..utils.queries import (
    STUDENT_COUNT,
    STUDENT_GET_BY_EMAIL,
    STUDENT_GET_BY_ID,
    STUDENT_INSERT,
    STUDENT_LIST_PAGINATED,
    STUDENT_LIST_WHERE,
    STUDENT_NAME_FILTER,
    STUDENT_SOFT_DELETE,
    STUDENT_UPDATE,
)

logger = logging.getLogger(__name__)


def build_name_pattern(filter_text: str) -> str:
    """Build an ILIKE ``contains`` pattern with wildcards in the input escaped."""
    escaped = (
        filter_text.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"


class StudentDatabaseRepository:
    """Database repository for students.
    
    Accepts any DatabaseManager and schema name via dependency injection.
    """
    
    def __init__(self, database: DatabaseManager, schema: str = "public"):
        """Initialize with a database manager.
        
        Args:
            database: asyncpg-backed database manager
            schema: Database schema holding the ``students`` table
        """
        self._db = database
        self._schema = validate_schema_name(schema)
    
    async def find_by_id(self, student_id: UUID, tenant_id: Optional[UUID]) -> Optional[Student]:
        """Find a live student by ID within a tenant."""
        query = STUDENT_GET_BY_ID.format(schema=self._schema)
        try:
            row = await self._db.fetchrow(query, student_id, tenant_id)
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to get student {student_id}: {e}")
            raise DatabaseError(f"Failed to get student: {e}") from e
        
        return self._map_row_to_student(row) if row else None
    
    async def find_by_email(
        self,
        email: str,
        tenant_id: Optional[UUID],
        exclude_id: Optional[UUID] = None,
    ) -> Optional[Student]:
        """Find a live student of the tenant holding ``email``."""
        query = STUDENT_GET_BY_EMAIL.format(schema=self._schema)
        try:
            row = await self._db.fetchrow(query, email, tenant_id, exclude_id)
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to look up student by email: {e}")
            raise DatabaseError(f"Failed to look up student by email: {e}") from e
        
        return self._map_row_to_student(row) if row else None
    
    async def insert(self, student: Student) -> Student:
        """Insert a new student row."""
        query = STUDENT_INSERT.format(schema=self._schema)
        params = [
            student.id, student.tenant_id, student.first_name, student.last_name,
            student.date_of_birth, student.email, student.phone_number, student.address,
            student.concurrency_stamp, student.creation_time, student.creator_id,
        ]
        try:
            row = await self._db.fetchrow(query, *params)
        except asyncpg.UniqueViolationError as e:
            raise self._translate_unique_violation(e, student) from e
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to insert student {student.id}: {e}")
            raise DatabaseError(f"Failed to insert student: {e}") from e
        
        logger.info(f"Inserted student {student.id} (tenant {student.tenant_id})")
        return self._map_row_to_student(row)
    
    async def update(self, student: Student) -> Student:
        """Write editable fields, concurrency stamp and modifier audit."""
        query = STUDENT_UPDATE.format(schema=self._schema)
        params = [
            student.id, student.tenant_id, student.first_name, student.last_name,
            student.date_of_birth, student.email, student.phone_number, student.address,
            student.concurrency_stamp, student.last_modification_time, student.last_modifier_id,
        ]
        try:
            row = await self._db.fetchrow(query, *params)
        except asyncpg.UniqueViolationError as e:
            raise self._translate_unique_violation(e, student) from e
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to update student {student.id}: {e}")
            raise DatabaseError(f"Failed to update student: {e}") from e
        
        if row is None:
            raise EntityNotFoundError("Student", str(student.id))
        
        logger.info(f"Updated student {student.id}")
        return self._map_row_to_student(row)
    
    async def soft_delete(self, student: Student) -> None:
        """Persist the deletion marker; the row is kept."""
        query = STUDENT_SOFT_DELETE.format(schema=self._schema)
        try:
            result = await self._db.execute(
                query,
                student.id,
                student.tenant_id,
                student.deleter_id,
                student.deletion_time,
                student.concurrency_stamp,
            )
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to delete student {student.id}: {e}")
            raise DatabaseError(f"Failed to delete student: {e}") from e
        
        # asyncpg returns the command tag, e.g. "UPDATE 1"
        if result and result.split()[-1] == "0":
            raise EntityNotFoundError("Student", str(student.id))
        
        logger.info(f"Soft deleted student {student.id}")
    
    async def find_paginated(
        self,
        tenant_id: Optional[UUID],
        filter_text: Optional[str],
        sort_fields: List[SortField],
        skip: int,
        take: int,
    ) -> PagedResult[Student]:
        """Return one ordered window of matching students and the total count."""
        where, params = self._build_where(tenant_id, filter_text)
        order_by = ", ".join(sort_field.to_sql() for sort_field in sort_fields) or "id ASC"
        
        list_query = STUDENT_LIST_PAGINATED.format(
            schema=self._schema,
            where=where,
            order_by=order_by,
            limit_param=len(params) + 1,
            offset_param=len(params) + 2,
        )
        count_query = STUDENT_COUNT.format(schema=self._schema, where=where)
        
        try:
            # One snapshot for both queries so the total matches the window
            async with self._db.transaction(isolation="repeatable_read", readonly=True) as connection:
                total = await connection.fetchval(count_query, *params)
                rows = await connection.fetch(list_query, *params, take, skip)
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to list students: {e}")
            raise DatabaseError(f"Failed to list students: {e}") from e
        
        return PagedResult(
            items=[self._map_row_to_student(row) for row in rows],
            total_count=total or 0,
        )
    
    @staticmethod
    def _build_where(
        tenant_id: Optional[UUID], filter_text: Optional[str]
    ) -> Tuple[str, List[Any]]:
        where = STUDENT_LIST_WHERE
        params: List[Any] = [tenant_id]
        if filter_text and filter_text.strip():
            where = f"{where} AND {STUDENT_NAME_FILTER}"
            params.append(build_name_pattern(filter_text))
        return where, params
    
    @staticmethod
    def _translate_unique_violation(
        error: asyncpg.UniqueViolationError, student: Student
    ) -> Exception:
        if getattr(error, "constraint_name", None) == EMAIL_UNIQUE_INDEX and student.email:
            logger.info(f"Unique index rejected email for student {student.id}")
            return DuplicateEmailViolation(student.email)
        logger.error(f"Unique violation for student {student.id}: {error}")
        return DatabaseError(f"Unique constraint violated: {error}")
    
    @staticmethod
    def _map_row_to_student(row: Mapping[str, Any]) -> Student:
        """Map a database row to a Student entity."""
        return Student(
            id=row["id"],
            tenant_id=row["tenant_id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            date_of_birth=row["date_of_birth"],
            email=row["email"],
            phone_number=row["phone_number"],
            address=row["address"],
            concurrency_stamp=row["concurrency_stamp"],
            creation_time=row["creation_time"],
            creator_id=row["creator_id"],
            last_modification_time=row["last_modification_time"],
            last_modifier_id=row["last_modifier_id"],
            is_deleted=row["is_deleted"],
            deleter_id=row["deleter_id"],
            deletion_time=row["deletion_time"],
        )
