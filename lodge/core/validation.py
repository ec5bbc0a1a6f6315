"""
Field format rules for tenant records.

The same checks back the registration page and the JSON API; values are
compared after stripping every non-digit character, so "98765 43210" is a
valid phone number and is stored as "9876543210".
"""

import re
from datetime import date, datetime
from typing import Any, Iterable

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")

PHONE_NUMBER_LENGTH = 10
AADHAR_NUMBER_LENGTH = 12
PINCODE_LENGTH = 6


def digits_only(value: str) -> str:
    """Strip every non-digit character"""
    return _NON_DIGITS.sub("", value or "")


def is_valid_phone_number(value: str) -> bool:
    return len(digits_only(value)) == PHONE_NUMBER_LENGTH


def is_valid_aadhar_number(value: str) -> bool:
    return len(digits_only(value)) == AADHAR_NUMBER_LENGTH


def is_valid_pincode(value: str) -> bool:
    return len(digits_only(value)) == PINCODE_LENGTH


def format_aadhar_number(value: str) -> str:
    """
    Group an Aadhar number in blocks of four for display.

    Only the first 12 digits are considered: "123456789012" -> "1234 5678 9012".
    """
    digits = digits_only(value)[:AADHAR_NUMBER_LENGTH]
    return " ".join(digits[i : i + 4] for i in range(0, len(digits), 4))


def unformat_aadhar_number(value: str) -> str:
    """Remove display spacing from an Aadhar number"""
    return _WHITESPACE.sub("", value or "")


def parse_date(value: Any, field: str = "date") -> date:
    """
    Parse a calendar date from a date object or an ISO "YYYY-MM-DD" string.

    A full ISO timestamp ("2024-01-15T00:00:00.000Z") is accepted and its time
    part dropped; anything else after the date is rejected.

    Raises:
        ValueError: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _ISO_DATE.match(text):
            try:
                return date.fromisoformat(text)
            except ValueError:
                pass
            try:
                return datetime.fromisoformat(text).date()
            except ValueError:
                pass
    raise ValueError(f"Invalid date format for {field}")


def describe_errors(errors: Iterable[dict]) -> list[str]:
    """
    Turn pydantic error dicts into messages that name the violated field.

    Handles both request errors raised by FastAPI (loc starts with "body"
    or "path") and errors from calling model_validate directly.
    """
    return [_describe(error) for error in errors]


def _describe(error: dict) -> str:
    loc = tuple(error.get("loc", ()))
    error_type = error.get("type", "")

    if error_type == "json_invalid":
        return "Invalid JSON body"
    if loc[:1] == ("path",):
        name = str(loc[-1]).removesuffix("_id")
        return f"Invalid {name} ID"

    if loc[:1] in (("body",), ("query",)):
        loc = loc[1:]
    if not loc:
        return "Request body is required"

    prefix = ""
    if len(loc) >= 2 and loc[0] == "tenants" and isinstance(loc[1], int):
        prefix = f"Tenant {loc[1] + 1}: "
    field = loc[-1]

    if error_type == "missing":
        return f"{prefix}Field '{field}' is required"
    cause = (error.get("ctx") or {}).get("error")
    if cause is not None:
        return f"{prefix}{cause}"
    if "date" in error_type:
        return f"{prefix}Invalid date format for {field}"
    return f"{prefix}{field}: {error.get('msg', 'invalid value')}"
