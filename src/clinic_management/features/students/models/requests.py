"""Student request models."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from ...pagination.entities import DEFAULT_MAX_RESULT_COUNT, MAX_MAX_RESULT_COUNT
from ..utils.constants import (
    MAX_ADDRESS_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_FIRST_NAME_LENGTH,
    MAX_LAST_NAME_LENGTH,
    MAX_PHONE_NUMBER_LENGTH,
)


class StudentRequestBase(BaseModel):
    """Fields shared by create and update requests."""
    
    first_name: str = Field(..., min_length=1, max_length=MAX_FIRST_NAME_LENGTH, description="First name")
    last_name: str = Field(..., min_length=1, max_length=MAX_LAST_NAME_LENGTH, description="Last name")
    date_of_birth: date = Field(..., description="Date of birth (YYYY-MM-DD)")
    email: Optional[EmailStr] = Field(None, description="Email address, unique within the tenant")
    phone_number: Optional[str] = Field(None, max_length=MAX_PHONE_NUMBER_LENGTH, description="Phone number")
    address: Optional[str] = Field(None, max_length=MAX_ADDRESS_LENGTH, description="Postal address")
    
    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
    
    @field_validator("email", "phone_number", "address", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
    
    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > MAX_EMAIL_LENGTH:
            raise ValueError(f"must be at most {MAX_EMAIL_LENGTH} characters")
        return v
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "first_name": "Jane",
                "last_name": "Doe",
                "date_of_birth": "2000-06-15",
                "email": "jane.doe@example.com",
                "phone_number": "+1-555-0100",
                "address": "1 Main St, Springfield",
            }
        }
    }


class CreateStudentRequest(StudentRequestBase):
    """Request model for creating a student."""
    pass


class UpdateStudentRequest(StudentRequestBase):
    """Request model for replacing a student's editable fields."""
    pass


class StudentListRequest(BaseModel):
    """Query parameters for listing students."""
    
    filter: Optional[str] = Field(None, description="Case-insensitive match on first or last name")
    sorting: Optional[str] = Field(
        None,
        description="Comma separated fields with optional direction, e.g. 'firstName desc, dateOfBirth'",
    )
    skip_count: int = Field(0, ge=0, description="Number of records to skip")
    max_result_count: int = Field(
        DEFAULT_MAX_RESULT_COUNT,
        ge=1,
        le=MAX_MAX_RESULT_COUNT,
        description="Maximum number of records to return",
    )
