"""Student domain entity.

The aggregate root of the student records feature. Field bounds are
enforced on construction and on every ``set_*`` call.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from ....core.exceptions import ValidationError
from ....utils import generate_concurrency_stamp, utc_now
from ..utils.constants import (
    MAX_ADDRESS_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_FIRST_NAME_LENGTH,
    MAX_LAST_NAME_LENGTH,
    MAX_PHONE_NUMBER_LENGTH,
)


def _required(value: Optional[str], field_name: str, max_length: int) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    if len(value) > max_length:
        raise ValidationError(
            f"{field_name} must be at most {max_length} characters", field=field_name
        )
    return value


def _optional(value: Optional[str], field_name: str, max_length: int) -> Optional[str]:
    if value is None or not value.strip():
        return None
    if len(value) > max_length:
        raise ValidationError(
            f"{field_name} must be at most {max_length} characters", field=field_name
        )
    return value


@dataclass
class Student:
    """Student record scoped to a tenant (``tenant_id`` of ``None`` is the host)."""
    
    id: UUID
    first_name: str
    last_name: str
    date_of_birth: date
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    tenant_id: Optional[UUID] = None
    
    # Concurrency
    concurrency_stamp: str = field(default_factory=generate_concurrency_stamp)
    
    # Audit fields
    creation_time: datetime = field(default_factory=utc_now)
    creator_id: Optional[UUID] = None
    last_modification_time: Optional[datetime] = None
    last_modifier_id: Optional[UUID] = None
    
    # Soft delete
    is_deleted: bool = False
    deleter_id: Optional[UUID] = None
    deletion_time: Optional[datetime] = None
    
    def __post_init__(self):
        """Validate bounds of every field."""
        self.set_first_name(self.first_name)
        self.set_last_name(self.last_name)
        self.set_date_of_birth(self.date_of_birth)
        self.set_email(self.email)
        self.set_phone_number(self.phone_number)
        self.set_address(self.address)
    
    def set_first_name(self, first_name: str) -> None:
        self.first_name = _required(first_name, "first_name", MAX_FIRST_NAME_LENGTH)
    
    def set_last_name(self, last_name: str) -> None:
        self.last_name = _required(last_name, "last_name", MAX_LAST_NAME_LENGTH)
    
    def set_date_of_birth(self, date_of_birth: date) -> None:
        if not isinstance(date_of_birth, date) or isinstance(date_of_birth, datetime):
            raise ValidationError("date_of_birth must be a calendar date", field="date_of_birth")
        self.date_of_birth = date_of_birth
    
    def set_email(self, email: Optional[str]) -> None:
        """Set email; blank values are stored as ``None``."""
        self.email = _optional(email, "email", MAX_EMAIL_LENGTH)
    
    def set_phone_number(self, phone_number: Optional[str]) -> None:
        self.phone_number = _optional(phone_number, "phone_number", MAX_PHONE_NUMBER_LENGTH)
    
    def set_address(self, address: Optional[str]) -> None:
        self.address = _optional(address, "address", MAX_ADDRESS_LENGTH)
    
    def mark_created(self, creator_id: Optional[UUID], when: Optional[datetime] = None) -> None:
        """Record who created the student."""
        self.creator_id = creator_id
        self.creation_time = when or utc_now()
    
    def mark_modified(self, modifier_id: Optional[UUID], when: Optional[datetime] = None) -> None:
        """Record a modification and issue a new concurrency stamp."""
        self.last_modifier_id = modifier_id
        self.last_modification_time = when or utc_now()
        self.concurrency_stamp = generate_concurrency_stamp()
    
    def mark_deleted(self, deleter_id: Optional[UUID], when: Optional[datetime] = None) -> None:
        """Logically delete the student; the row is kept."""
        self.is_deleted = True
        self.deleter_id = deleter_id
        self.deletion_time = when or utc_now()
        self.concurrency_stamp = generate_concurrency_stamp()
