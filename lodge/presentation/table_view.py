"""
State and row building for the printable tenant table.

Column visibility and the simplified print layout live in a TableView that
is built from the query string of each request; nothing is stored between
requests.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable, Optional
from urllib.parse import urlencode

from pydantic.alias_generators import to_snake

from lodge.core.validation import format_aadhar_number
from lodge.models.room import Room
from lodge.models.tenant import Tenant
from lodge.presentation.formatting import format_date, format_rupees, is_default_date
from lodge.presentation.room_sort import sort_rooms


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    visible_by_default: bool = True
    room_field: bool = False


COLUMNS: tuple[Column, ...] = (
    Column("name", "Name"),
    Column("fatherName", "Father's Name"),
    Column("phoneNumber", "Mobile No."),
    Column("fatherPhoneNumber", "Father's Mobile"),
    Column("villageName", "Village"),
    Column("tehsil", "Tehsil"),
    Column("policeStation", "Police Station"),
    Column("district", "District"),
    Column("state", "State"),
    Column("pincode", "Pincode", visible_by_default=False),
    Column("aadharNumber", "Aadhar Number"),
    Column("email", "Email", visible_by_default=False),
    Column("rentAmount", "Rent Amount", room_field=True),
    Column("periodFrom", "Period From", visible_by_default=False, room_field=True),
    Column("periodTo", "Period To", room_field=True),
)

COLUMNS_BY_KEY = {column.key: column for column in COLUMNS}

# Columns of the simplified print layout
SIMPLIFIED_COLUMNS = ("name", "phoneNumber", "aadharNumber", "rentAmount", "periodTo")


@dataclass(frozen=True)
class TableView:
    """
    Request-scoped display configuration for the tenant table.

    Attributes:
        visible: Keys of the columns the user has switched on
        simplified: Print layout with a fixed reduced set of columns
    """

    visible: frozenset[str] = field(
        default_factory=lambda: frozenset(c.key for c in COLUMNS if c.visible_by_default)
    )
    simplified: bool = False

    @classmethod
    def from_query(
        cls,
        columns: Optional[Iterable[str]] = None,
        custom: bool = False,
        simplified: bool = False,
    ) -> "TableView":
        """
        Build a view from query parameters.

        Without custom the default columns are shown; with custom exactly the
        listed known columns are shown (possibly none).
        """
        if not custom:
            return cls(simplified=simplified)
        known = frozenset(key for key in (columns or ()) if key in COLUMNS_BY_KEY)
        return cls(visible=known, simplified=simplified)

    def is_visible(self, key: str) -> bool:
        if key not in COLUMNS_BY_KEY:
            return True
        if self.simplified:
            return key in SIMPLIFIED_COLUMNS
        return key in self.visible

    @property
    def columns(self) -> list[Column]:
        """Visible columns in display order"""
        return [column for column in COLUMNS if self.is_visible(column.key)]

    def toggle(self, key: str) -> "TableView":
        """A copy of this view with one column switched on or off"""
        if key not in COLUMNS_BY_KEY:
            return self
        return replace(self, visible=self.visible ^ {key})

    def with_simplified(self, simplified: bool) -> "TableView":
        return replace(self, simplified=simplified)

    def query_string(self) -> str:
        params = [("columns", c.key) for c in COLUMNS if c.key in self.visible]
        params.append(("custom", "1"))
        if self.simplified:
            params.append(("simplified", "1"))
        return urlencode(params)


@dataclass
class RoomRow:
    """One room of the table and the tenants listed under it"""

    room: Room
    tenants: list[Tenant]

    @property
    def person_count(self) -> int:
        return len(self.tenants)


def build_rows(rooms: Iterable[Room]) -> list[RoomRow]:
    """Rooms in floor/number order, each with its tenants in name order"""
    return [RoomRow(room=room, tenants=list(room.tenants)) for room in sort_rooms(rooms)]


def cell_value(
    column: Column, room: Room, tenant: Optional[Tenant], today: Optional[date] = None
) -> str:
    """Text shown in one table cell"""
    if column.key == "rentAmount":
        return format_rupees(room.rent_amount)
    if column.room_field:
        value = getattr(room, to_snake(column.key))
        return "-" if is_default_date(value, today) else format_date(value)

    if tenant is None:
        return "-"
    value = getattr(tenant, to_snake(column.key), None)
    if value in (None, ""):
        return "N/A"
    if column.key == "aadharNumber":
        return format_aadhar_number(value)
    return str(value)
