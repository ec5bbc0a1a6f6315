import re
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from lodge.schemas.common import CamelModel

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserCreate(CamelModel):
    """Schema for creating a user"""

    email: str = Field(..., max_length=255)
    name: Optional[str] = Field(None, max_length=255)

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not _EMAIL.match(value):
            raise ValueError("Invalid email address")
        return value


class UserResponse(CamelModel):
    """Schema for user response"""

    id: int
    email: str
    name: Optional[str]
    created_at: datetime
    updated_at: datetime
