from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator
from pydantic.alias_generators import to_camel

from lodge.core.validation import parse_date
from lodge.schemas.common import CamelModel


class RoomUpdate(CamelModel):
    """
    Schema for updating a room.

    Only supplied fields change. When period_from is given without
    period_to, the service derives period_to from the lease term.
    """

    rent_amount: Optional[int] = None
    period_from: Optional[date] = None
    period_to: Optional[date] = None

    @field_validator("rent_amount")
    @classmethod
    def rent_not_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("Rent amount must be a valid non-negative number")
        return value

    @field_validator("period_from", "period_to", mode="before")
    @classmethod
    def parse_period(cls, value, info):
        if value is None:
            return None
        return parse_date(value, to_camel(info.field_name))


class RoomResponse(CamelModel):
    """Schema for room response"""

    id: int
    name: str
    rent_amount: int
    period_from: date
    period_to: date
    created_at: datetime
    updated_at: datetime


class RoomTenantResponse(CamelModel):
    """Tenant as listed under its room (no nested room)"""

    id: int
    name: str
    father_name: str
    village_name: str
    tehsil: str
    police_station: str
    district: str
    pincode: str
    state: str
    email: Optional[str]
    aadhar_number: str
    phone_number: str
    father_phone_number: str
    room_id: int
    created_at: datetime
    updated_at: datetime


class RoomDetailResponse(RoomResponse):
    """Room with the tenants occupying it"""

    tenants: list[RoomTenantResponse] = Field(default_factory=list)
