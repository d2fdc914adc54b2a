"""Domain rules for creating and changing students."""

import logging
from datetime import date
from typing import Callable, Optional
from uuid import UUID

from ....core.exceptions import AgeRestrictionViolation, DuplicateEmailViolation
from ....utils import generate_uuid_v7
from ..entities.protocols import StudentRepository
from ..entities.student import Student
from ..utils import age
from ..utils.constants import MINIMUM_AGE

logger = logging.getLogger(__name__)


class StudentManager:
    """Validates age and per-tenant email uniqueness before a student is built or changed.
    
    The manager never persists; callers hand the returned entity to a
    repository.
    """
    
    def __init__(
        self,
        repository: StudentRepository,
        clock: Callable[[], date] = date.today,
    ):
        self._repository = repository
        self.clock = clock
    
    async def create(
        self,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        email: Optional[str] = None,
        phone_number: Optional[str] = None,
        address: Optional[str] = None,
        tenant_id: Optional[UUID] = None,
    ) -> Student:
        """Build a new, unpersisted student after checking the business rules.
        
        Raises:
            AgeRestrictionViolation: If the student is younger than the minimum age
            DuplicateEmailViolation: If another live student of the tenant holds the email
        """
        self.validate_age(date_of_birth)
        await self._ensure_email_unique(email, tenant_id)
        
        return Student(
            id=generate_uuid_v7(),
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            email=email,
            phone_number=phone_number,
            address=address,
            tenant_id=tenant_id,
        )
    
    async def update(
        self,
        student: Student,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        email: Optional[str] = None,
        phone_number: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Student:
        """Apply new values to ``student`` after checking the business rules.
        
        The student's own email never counts as a duplicate.
        """
        self.validate_age(date_of_birth)
        await self._ensure_email_unique(email, student.tenant_id, exclude_id=student.id)
        
        student.set_first_name(first_name)
        student.set_last_name(last_name)
        student.set_date_of_birth(date_of_birth)
        student.set_email(email)
        student.set_phone_number(phone_number)
        student.set_address(address)
        return student
    
    def validate_age(self, date_of_birth: date) -> None:
        """Raise AgeRestrictionViolation when younger than the minimum age today."""
        if self.calculate_age(date_of_birth, self.clock()) < MINIMUM_AGE:
            raise AgeRestrictionViolation(MINIMUM_AGE)
    
    @staticmethod
    def calculate_age(date_of_birth: date, reference_date: date) -> int:
        """Completed years at ``reference_date``."""
        return age.calculate_age(date_of_birth, reference_date)
    
    async def _ensure_email_unique(
        self,
        email: Optional[str],
        tenant_id: Optional[UUID],
        exclude_id: Optional[UUID] = None,
    ) -> None:
        if email is None or not email.strip():
            return
        
        existing = await self._repository.find_by_email(email, tenant_id, exclude_id)
        if existing is not None:
            logger.debug(f"Email already used by student {existing.id}")
            raise DuplicateEmailViolation(email)
