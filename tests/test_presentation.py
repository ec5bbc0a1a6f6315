from dataclasses import FrozenInstanceError
from datetime import date, timedelta

import pytest

from lodge.models import Room, Tenant
from lodge.presentation.formatting import format_date, format_rupees, is_default_date
from lodge.presentation.forms import (
    MAX_TENANT_FORMS,
    clamp_form_count,
    empty_tenant_form,
    field_name,
    registration_payload,
    tenant_forms_from,
)
from lodge.presentation.room_sort import floor_rank, room_number, sort_rooms
from lodge.presentation.table_view import (
    COLUMNS,
    COLUMNS_BY_KEY,
    SIMPLIFIED_COLUMNS,
    TableView,
    build_rows,
    cell_value,
)

TODAY = date(2024, 6, 15)


class TestRoomSort:
    """Tests for floor/number room ordering"""

    def test_floor_then_number(self):
        assert sort_rooms(["F2", "G1", "S1", "F10", "F1"]) == ["G1", "F1", "F2", "F10", "S1"]

    def test_unknown_floor_last(self):
        assert sort_rooms(["X1", "S2", "G1"]) == ["G1", "S2", "X1"]

    def test_combined_ground_floor_room(self):
        # "G1 + G2 + G3" reads as 123 and still sorts on the ground floor
        assert sort_rooms(["F1", "G1 + G2 + G3"]) == ["G1 + G2 + G3", "F1"]

    def test_label_without_digits(self):
        assert room_number("Hall") == 0
        assert floor_rank("Hall") == 3

    def test_sorts_objects_by_name(self):
        rooms = [Room(name="S1"), Room(name="F1"), Room(name="G2")]
        assert [room.name for room in sort_rooms(rooms)] == ["G2", "F1", "S1"]

    def test_stable_for_equal_keys(self):
        rooms = [Room(name="F1", id=2), Room(name="F01", id=1)]
        assert [room.id for room in sort_rooms(rooms)] == [2, 1]


class TestFormatting:
    """Tests for display formatting"""

    def test_format_date(self):
        assert format_date(date(2024, 1, 5)) == "05/01/2024"
        assert format_date(None) == "N/A"

    def test_format_rupees(self):
        assert format_rupees(4500) == "₹4500"
        assert format_rupees(0) == "-"
        assert format_rupees(None) == "-"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, True),
            (TODAY, True),
            (TODAY - timedelta(days=1), True),
            (TODAY + timedelta(days=1), True),
            (TODAY - timedelta(days=2), False),
            (date(2024, 1, 15), False),
        ],
    )
    def test_is_default_date(self, value, expected):
        assert is_default_date(value, TODAY) is expected


class TestTableView:
    """Tests for column visibility state"""

    def test_defaults(self):
        view = TableView()
        assert not view.is_visible("pincode")
        assert not view.is_visible("email")
        assert not view.is_visible("periodFrom")
        assert view.is_visible("name")
        assert view.is_visible("periodTo")
        assert len(view.columns) == len(COLUMNS) - 3

    def test_unknown_key_visible(self):
        assert TableView().is_visible("somethingElse")

    def test_toggle_returns_new_view(self):
        view = TableView()
        toggled = view.toggle("pincode").toggle("name")
        assert toggled.is_visible("pincode")
        assert not toggled.is_visible("name")
        assert not view.is_visible("pincode")
        assert view.is_visible("name")

    def test_toggle_unknown_key_ignored(self):
        view = TableView()
        assert view.toggle("bogus") == view

    def test_columns_keep_display_order(self):
        view = TableView.from_query(["periodTo", "name", "tehsil"], custom=True)
        assert [column.key for column in view.columns] == ["name", "tehsil", "periodTo"]

    def test_from_query_without_custom_uses_defaults(self):
        assert TableView.from_query(["name"]) == TableView()

    def test_from_query_custom_empty(self):
        assert TableView.from_query(None, custom=True).columns == []

    def test_from_query_drops_unknown_columns(self):
        view = TableView.from_query(["name", "bogus"], custom=True)
        assert view.visible == frozenset({"name"})

    def test_simplified_fixed_columns(self):
        view = TableView.from_query(["email"], custom=True, simplified=True)
        assert [column.key for column in view.columns] == list(SIMPLIFIED_COLUMNS)

    def test_query_string_round_trip(self):
        view = TableView().toggle("email").with_simplified(True)
        assert "custom=1" in view.query_string()
        assert "simplified=1" in view.query_string()
        assert "columns=email" in view.query_string()
        assert "columns=pincode" not in view.query_string()

    def test_view_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            TableView().simplified = True


def make_tenant_model(**fields) -> Tenant:
    values = {
        "name": "Ravi",
        "father_name": "Hari",
        "village_name": "Rampur",
        "tehsil": "Sadar",
        "police_station": "Kotwali",
        "district": "Bareilly",
        "pincode": "243001",
        "state": "Uttar Pradesh",
        "email": None,
        "aadhar_number": "123456789012",
        "phone_number": "9876543210",
        "father_phone_number": "9123456789",
    }
    values.update(fields)
    return Tenant(**values)


class TestCellValue:
    """Tests for table cell text"""

    def setup_method(self):
        self.room = Room(
            name="F1",
            rent_amount=4500,
            period_from=date(2024, 1, 15),
            period_to=date(2024, 12, 15),
        )
        self.tenant = make_tenant_model()

    def cell(self, key, tenant="default"):
        tenant = self.tenant if tenant == "default" else tenant
        return cell_value(COLUMNS_BY_KEY[key], self.room, tenant, TODAY)

    def test_tenant_fields(self):
        assert self.cell("name") == "Ravi"
        assert self.cell("phoneNumber") == "9876543210"

    def test_aadhar_grouped(self):
        assert self.cell("aadharNumber") == "1234 5678 9012"

    def test_missing_value(self):
        assert self.cell("email") == "N/A"

    def test_room_fields(self):
        assert self.cell("rentAmount") == "₹4500"
        assert self.cell("periodFrom") == "15/01/2024"
        assert self.cell("periodTo") == "15/12/2024"

    def test_placeholder_period_shown_as_dash(self):
        self.room.period_to = TODAY
        assert self.cell("periodTo") == "-"

    def test_zero_rent(self):
        self.room.rent_amount = 0
        assert self.cell("rentAmount") == "-"

    def test_room_without_tenants(self):
        assert self.cell("name", tenant=None) == "-"
        assert self.cell("rentAmount", tenant=None) == "₹4500"


class TestBuildRows:
    """Tests for grouping tenants under their rooms"""

    def test_rows_sorted_with_person_count(self):
        f10 = Room(name="F10", tenants=[make_tenant_model(name="A"), make_tenant_model(name="B")])
        g1 = Room(name="G1", tenants=[])
        f2 = Room(name="F2", tenants=[make_tenant_model(name="C")])

        rows = build_rows([f10, g1, f2])

        assert [row.room.name for row in rows] == ["G1", "F2", "F10"]
        assert [row.person_count for row in rows] == [0, 1, 2]


class TestForms:
    """Tests for registration form parsing"""

    @pytest.mark.parametrize(
        "raw, expected",
        [(None, 1), ("", 1), ("abc", 1), ("0", 1), ("3", 3), ("25", MAX_TENANT_FORMS), (4, 4)],
    )
    def test_clamp_form_count(self, raw, expected):
        assert clamp_form_count(raw) == expected

    def test_field_name(self):
        assert field_name(2, "fatherName") == "tenants-2-fatherName"

    def test_tenant_forms_from(self):
        form = {"tenants-0-name": " Ravi ", "tenants-1-name": "Mala", "tenants-1-tehsil": "Sadar"}
        forms = tenant_forms_from(form, 2)
        assert forms[0]["name"] == "Ravi"
        assert forms[0]["tehsil"] == ""
        assert forms[1]["tehsil"] == "Sadar"
        assert set(forms[0]) == set(empty_tenant_form())

    def test_registration_payload_unformats_aadhar(self):
        tenant_form = {**empty_tenant_form(), "aadharNumber": "1234 5678 9012"}
        payload = registration_payload(" 4500 ", "2024-01-15", [tenant_form])
        assert payload["rentAmount"] == "4500"
        assert payload["periodFrom"] == "2024-01-15"
        assert payload["tenants"][0]["aadharNumber"] == "123456789012"
