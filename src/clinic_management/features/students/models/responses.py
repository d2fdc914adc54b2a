"""Student response models."""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ..utils.age import calculate_age


class StudentResponse(BaseModel):
    """Student as exposed to API callers.
    
    Tenant, audit (other than creation time), deletion and concurrency
    fields are never exposed.
    """
    
    id: UUID = Field(..., description="Student ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    date_of_birth: date = Field(..., description="Date of birth")
    age: int = Field(..., description="Age in completed years, derived from date of birth")
    email: Optional[str] = Field(None, description="Email address")
    phone_number: Optional[str] = Field(None, description="Phone number")
    address: Optional[str] = Field(None, description="Postal address")
    creation_time: datetime = Field(..., description="Creation timestamp")
    
    @classmethod
    def from_entity(cls, student, today: Optional[date] = None) -> "StudentResponse":
        """Create response from student entity; age is computed against ``today``."""
        return cls(
            id=student.id,
            first_name=student.first_name,
            last_name=student.last_name,
            date_of_birth=student.date_of_birth,
            age=calculate_age(student.date_of_birth, today or date.today()),
            email=student.email,
            phone_number=student.phone_number,
            address=student.address,
            creation_time=student.creation_time,
        )


class StudentListResponse(BaseModel):
    """One window of students plus the total match count."""
    
    items: List[StudentResponse] = Field(default_factory=list, description="Students in this window")
    total_count: int = Field(..., description="Total matching students before paging")
