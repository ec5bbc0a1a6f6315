"""Server-rendered administration pages."""

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.orm import Session

from lodge.config import settings
from lodge.core.exceptions import ConflictException, LodgeException, NotFoundException
from lodge.core.lease import lease_end
from lodge.core.validation import describe_errors, format_aadhar_number, parse_date
from lodge.database import get_db
from lodge.models.room import Room
from lodge.presentation.formatting import format_date, format_rupees
from lodge.presentation.forms import (
    MAX_TENANT_FORMS,
    TENANT_FORM_FIELDS,
    clamp_form_count,
    empty_tenant_form,
    field_name,
    registration_payload,
    tenant_forms_from,
)
from lodge.presentation.room_sort import sort_rooms
from lodge.presentation.table_view import COLUMNS, TableView, build_rows, cell_value
from lodge.schemas.tenant_schemas import RoomRegistration
from lodge.services.registration_service import RegistrationService
from lodge.services.room_service import RoomService
from lodge.services.tenant_service import TenantService

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["ddmmyyyy"] = format_date
templates.env.filters["rupees"] = format_rupees
templates.env.filters["aadhar"] = format_aadhar_number
templates.env.globals["field_name"] = field_name
templates.env.globals["app_name"] = settings.APP_NAME

router = APIRouter(default_response_class=HTMLResponse)


def _error_status(exc: LodgeException) -> int:
    if isinstance(exc, NotFoundException):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictException):
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def _period_to_preview(period_from: str) -> Optional[date]:
    try:
        return lease_end(parse_date(period_from, "periodFrom"))
    except ValueError:
        return None


def _render_registration(
    request: Request,
    db: Session,
    *,
    room: Optional[Room],
    rent_amount: str,
    period_from: str,
    tenant_forms: list[dict[str, str]],
    error: Optional[str] = None,
    success: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
):
    room_service = RoomService(db)
    current_tenants = TenantService(db).list_room_tenants(room.id) if room else []
    return templates.TemplateResponse(
        request,
        "tenants.html",
        {
            "rooms": sort_rooms(room_service.list_rooms()),
            "room": room,
            "rent_amount": rent_amount,
            "period_from": period_from,
            "period_to": _period_to_preview(period_from),
            "tenant_forms": tenant_forms,
            "form_fields": TENANT_FORM_FIELDS,
            "current_tenants": current_tenants,
            "error": error,
            "success": success,
        },
        status_code=status_code,
    )


@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    """Landing page"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "room_count": len(RoomService(db).list_rooms()),
            "tenant_count": len(TenantService(db).list_tenants()),
        },
    )


@router.get("/tenants")
def registration_page(
    request: Request,
    room_id: Optional[str] = Query(None),
    count: Optional[str] = Query(None),
    registered: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    """Tenant registration form for one room"""
    room = None
    error = None
    status_code = status.HTTP_200_OK
    if room_id:
        if not room_id.strip().isdigit():
            error = "Invalid room ID"
            status_code = status.HTTP_400_BAD_REQUEST
        else:
            try:
                room = RoomService(db).get_room(int(room_id))
            except NotFoundException as exc:
                error = str(exc)

    success = None
    if registered:
        success = f"{registered} tenant(s) added successfully!"

    return _render_registration(
        request,
        db,
        room=room,
        rent_amount=str(room.rent_amount) if room else "",
        period_from=(room.period_from if room else date.today()).isoformat(),
        tenant_forms=[empty_tenant_form() for _ in range(clamp_form_count(count))],
        error=error,
        success=success,
        status_code=status_code,
    )


@router.post("/tenants")
async def submit_registration(request: Request, db: Session = Depends(get_db)):
    """
    Handle the registration form.

    The "action" button decides what happens: add or remove a tenant block
    (re-render with the typed values kept) or register everyone.
    """
    form = await request.form()
    action = form.get("action", "register")
    count = clamp_form_count(form.get("count"))
    tenant_forms = tenant_forms_from(form, count)
    rent_amount = (form.get("rent_amount") or "").strip()
    period_from = (form.get("period_from") or "").strip()

    room = None
    try:
        room = RoomService(db).get_room(int(form.get("room_id") or 0))
    except (ValueError, NotFoundException):
        room = None

    def render(error=None, status_code=status.HTTP_200_OK):
        return _render_registration(
            request,
            db,
            room=room,
            rent_amount=rent_amount,
            period_from=period_from,
            tenant_forms=tenant_forms,
            error=error,
            status_code=status_code,
        )

    if action == "add":
        if len(tenant_forms) < MAX_TENANT_FORMS:
            tenant_forms.append(empty_tenant_form())
        return render()
    if action.startswith("remove:"):
        index = action.partition(":")[2]
        if len(tenant_forms) > 1 and index.isdigit() and int(index) < len(tenant_forms):
            tenant_forms.pop(int(index))
        return render()

    if room is None:
        return render("Please select a room", status.HTTP_400_BAD_REQUEST)

    try:
        data = RoomRegistration.model_validate(
            registration_payload(rent_amount, period_from, tenant_forms)
        )
    except ValidationError as exc:
        return render(describe_errors(exc.errors())[0], status.HTTP_400_BAD_REQUEST)

    try:
        _, tenants = RegistrationService(db).register(room.id, data)
    except LodgeException as exc:
        return render(str(exc), _error_status(exc))

    return RedirectResponse(
        url=f"/tenants?room_id={room.id}&registered={len(tenants)}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post("/tenants/empty")
async def empty_room_page(request: Request, db: Session = Depends(get_db)):
    """Remove every tenant of the selected room, then return to its page"""
    form = await request.form()
    try:
        room_id = int(form.get("room_id") or 0)
        TenantService(db).empty_room(room_id)
    except (ValueError, NotFoundException):
        return RedirectResponse(url="/tenants", status_code=status.HTTP_303_SEE_OTHER)
    return RedirectResponse(url=f"/tenants?room_id={room_id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/tenants/table")
def tenant_table(
    request: Request,
    columns: Optional[list[str]] = Query(None),
    custom: bool = Query(False),
    simplified: bool = Query(False),
    db: Session = Depends(get_db),
):
    """Printable table of every room and its tenants"""
    view = TableView.from_query(columns, custom=custom, simplified=simplified)
    return templates.TemplateResponse(
        request,
        "tenant_table.html",
        {
            "view": view,
            "all_columns": COLUMNS,
            "rows": build_rows(RoomService(db).list_rooms_with_tenants()),
            "cell": cell_value,
            "today": date.today(),
        },
    )
