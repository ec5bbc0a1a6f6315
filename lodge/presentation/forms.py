"""Parsing of the multi-tenant registration form."""

from typing import Mapping

from lodge.core.validation import unformat_aadhar_number

MAX_TENANT_FORMS = 10

# (field, label, required) in form order
TENANT_FORM_FIELDS: tuple[tuple[str, str, bool], ...] = (
    ("name", "Tenant Name", True),
    ("fatherName", "Father's Name", True),
    ("villageName", "Village", True),
    ("tehsil", "Tehsil", True),
    ("policeStation", "Police Station", True),
    ("district", "District", True),
    ("pincode", "Pincode", True),
    ("state", "State", True),
    ("email", "Email", False),
    ("aadharNumber", "Aadhar Number", True),
    ("phoneNumber", "Phone Number", True),
    ("fatherPhoneNumber", "Father's Phone Number", True),
)


def empty_tenant_form() -> dict[str, str]:
    return {key: "" for key, _, _ in TENANT_FORM_FIELDS}


def clamp_form_count(raw) -> int:
    """Number of tenant blocks on the page, between 1 and MAX_TENANT_FORMS"""
    try:
        count = int(raw)
    except (TypeError, ValueError):
        return 1
    return max(1, min(count, MAX_TENANT_FORMS))


def field_name(index: int, key: str) -> str:
    """HTML input name of one tenant field"""
    return f"tenants-{index}-{key}"


def tenant_forms_from(form: Mapping[str, str], count: int) -> list[dict[str, str]]:
    """Read count tenant blocks from submitted form data"""
    return [
        {key: (form.get(field_name(index, key)) or "").strip() for key, _, _ in TENANT_FORM_FIELDS}
        for index in range(count)
    ]


def registration_payload(
    rent_amount: str, period_from: str, tenant_forms: list[dict[str, str]]
) -> dict:
    """
    Build the RoomRegistration input from form values.

    Aadhar numbers are typed with display spacing and submitted without it.
    """
    tenants = []
    for tenant_form in tenant_forms:
        tenant = dict(tenant_form)
        tenant["aadharNumber"] = unformat_aadhar_number(tenant["aadharNumber"])
        tenants.append(tenant)
    return {
        "rentAmount": rent_amount.strip(),
        "periodFrom": period_from.strip(),
        "tenants": tenants,
    }
