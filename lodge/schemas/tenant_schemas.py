from datetime import date
from typing import Optional

from pydantic import Field, field_validator
from pydantic.alias_generators import to_camel

from lodge.core.validation import (
    digits_only,
    is_valid_aadhar_number,
    is_valid_phone_number,
    is_valid_pincode,
    parse_date,
    unformat_aadhar_number,
)
from lodge.schemas.common import CamelModel
from lodge.schemas.room_schemas import RoomResponse, RoomTenantResponse

REQUIRED_TEXT_FIELDS = (
    "name",
    "father_name",
    "village_name",
    "tehsil",
    "police_station",
    "district",
    "state",
)


def _required(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"Field '{to_camel(field_name)}' is required")
    return value


class TenantFields(CamelModel):
    """
    Every field of a tenant record.

    All fields except email are required and are re-validated on every
    write; updates must resupply the full record.
    """

    name: str = Field(..., max_length=255)
    father_name: str = Field(..., max_length=255)
    village_name: str = Field(..., max_length=255)
    tehsil: str = Field(..., max_length=255)
    police_station: str = Field(..., max_length=255)
    district: str = Field(..., max_length=255)
    pincode: str
    state: str = Field(..., max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    aadhar_number: str
    phone_number: str
    father_phone_number: str

    @field_validator(*REQUIRED_TEXT_FIELDS)
    @classmethod
    def not_blank(cls, value: str, info) -> str:
        return _required(value, info.field_name)

    @field_validator("phone_number", "father_phone_number")
    @classmethod
    def ten_digit_phone(cls, value: str, info) -> str:
        _required(value, info.field_name)
        if not is_valid_phone_number(value):
            raise ValueError(f"{to_camel(info.field_name)} must be 10 digits")
        return digits_only(value)

    @field_validator("aadhar_number")
    @classmethod
    def twelve_digit_aadhar(cls, value: str) -> str:
        _required(value, "aadhar_number")
        if not is_valid_aadhar_number(value):
            raise ValueError("Aadhar number must be 12 digits")
        return digits_only(unformat_aadhar_number(value))

    @field_validator("pincode")
    @classmethod
    def six_digit_pincode(cls, value: str) -> str:
        _required(value, "pincode")
        if not is_valid_pincode(value):
            raise ValueError("Pincode must be 6 digits")
        return digits_only(value)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value


class TenantCreate(TenantFields):
    """
    Schema for creating a tenant in an existing room.

    period_from, when given, restarts the room's lease from that date.
    """

    room_id: int = Field(..., gt=0)
    period_from: Optional[date] = None

    @field_validator("period_from", mode="before")
    @classmethod
    def parse_period_from(cls, value):
        if value is None:
            return None
        return parse_date(value, "periodFrom")


class TenantUpdate(TenantFields):
    """Schema for updating a tenant (full replace, not merge)"""

    pass


class TenantResponse(RoomTenantResponse):
    """Tenant with its room joined"""

    room: RoomResponse


class RoomRegistration(CamelModel):
    """
    Register one or more tenants into a room and set its rent and lease start.

    Applied in a single transaction.
    """

    rent_amount: int
    period_from: date
    tenants: list[TenantFields] = Field(..., min_length=1, max_length=10)

    @field_validator("rent_amount")
    @classmethod
    def rent_not_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Rent amount must be a valid non-negative number")
        return value

    @field_validator("period_from", mode="before")
    @classmethod
    def parse_period_from(cls, value):
        return parse_date(value, "periodFrom")


class RegistrationResponse(CamelModel):
    """Room after registration plus the tenants just created"""

    room: RoomResponse
    tenants: list[RoomTenantResponse]
    count: int
