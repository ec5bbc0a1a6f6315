from datetime import date, datetime

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from lodge.models import Room, Tenant


class TestListRooms:
    """Tests for GET /api/rooms"""

    def test_empty(self, client, db_session):
        response = client.get("/api/rooms")
        assert response.status_code == 200
        assert response.json() == []

    def test_ordered_by_raw_name(self, client, make_room):
        for name in ["S1", "F10", "G1 + G2 + G3", "F2"]:
            make_room(name)

        response = client.get("/api/rooms")
        assert response.status_code == 200
        assert [room["name"] for room in response.json()] == ["F10", "F2", "G1 + G2 + G3", "S1"]

    def test_camel_case_fields(self, client, room):
        data = client.get("/api/rooms").json()[0]
        assert set(data) == {
            "id",
            "name",
            "rentAmount",
            "periodFrom",
            "periodTo",
            "createdAt",
            "updatedAt",
        }
        assert data["rentAmount"] == 0


class TestGetRoom:
    """Tests for GET /api/rooms/{id}"""

    def test_with_tenants_in_name_order(self, client, room, make_tenant):
        make_tenant(room.id, 1, name="Suresh")
        make_tenant(room.id, 2, name="Anil")

        response = client.get(f"/api/rooms/{room.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "F1"
        assert [tenant["name"] for tenant in data["tenants"]] == ["Anil", "Suresh"]
        assert data["tenants"][0]["roomId"] == room.id

    def test_not_found(self, client, db_session):
        response = client.get("/api/rooms/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Room not found"

    def test_invalid_id(self, client, db_session):
        response = client.get("/api/rooms/abc")
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid room ID"


class TestUpdateRoom:
    """Tests for PATCH /api/rooms/{id}"""

    def test_period_to_derived_from_period_from(self, client, room):
        response = client.patch(
            f"/api/rooms/{room.id}", json={"rentAmount": 5000, "periodFrom": "2024-01-15"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["rentAmount"] == 5000
        assert data["periodFrom"] == "2024-01-15"
        assert data["periodTo"] == "2024-12-15"

    def test_month_end_clamped(self, client, room):
        response = client.patch(f"/api/rooms/{room.id}", json={"periodFrom": "2024-03-31"})
        assert response.status_code == 200
        assert response.json()["periodTo"] == "2025-02-28"

    def test_explicit_period_to_kept(self, client, room):
        response = client.patch(
            f"/api/rooms/{room.id}",
            json={"periodFrom": "2024-01-15", "periodTo": "2024-06-30"},
        )
        assert response.status_code == 200
        assert response.json()["periodTo"] == "2024-06-30"

    def test_partial_update_keeps_other_fields(self, client, make_room):
        room = make_room("F2", rent_amount=3000, period_from=date(2024, 1, 1), period_to=date(2024, 12, 1))

        response = client.patch(f"/api/rooms/{room.id}", json={"rentAmount": 3500})
        assert response.status_code == 200
        data = response.json()
        assert data["rentAmount"] == 3500
        assert data["periodFrom"] == "2024-01-01"
        assert data["periodTo"] == "2024-12-01"

    def test_updated_at_bumped(self, client, room):
        created_at = room.created_at
        updated_at = room.updated_at

        data = client.patch(f"/api/rooms/{room.id}", json={"rentAmount": 100}).json()
        assert datetime.fromisoformat(data["createdAt"]) == created_at
        assert datetime.fromisoformat(data["updatedAt"]) >= updated_at

    def test_negative_rent_rejected(self, client, room):
        response = client.patch(f"/api/rooms/{room.id}", json={"rentAmount": -1})
        assert response.status_code == 400
        assert response.json()["detail"] == "Rent amount must be a valid non-negative number"

    def test_invalid_date_rejected(self, client, room):
        response = client.patch(f"/api/rooms/{room.id}", json={"periodFrom": "15/01/2024"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid date format for periodFrom"

    def test_date_with_trailing_text_rejected(self, client, make_room):
        room = make_room("F2", period_from=date(2024, 5, 1), period_to=date(2025, 4, 1))

        response = client.patch(f"/api/rooms/{room.id}", json={"periodFrom": "2024-01-15garbage"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid date format for periodFrom"

        data = client.get(f"/api/rooms/{room.id}").json()
        assert data["periodFrom"] == "2024-05-01"
        assert data["periodTo"] == "2025-04-01"

    def test_timestamp_accepted(self, client, room):
        response = client.patch(
            f"/api/rooms/{room.id}", json={"periodFrom": "2024-01-15T00:00:00.000Z"}
        )
        assert response.status_code == 200
        assert response.json()["periodTo"] == "2024-12-15"

    def test_not_found_writes_nothing(self, client, room):
        response = client.patch("/api/rooms/999", json={"rentAmount": 100})
        assert response.status_code == 404
        assert client.get(f"/api/rooms/{room.id}").json()["rentAmount"] == 0


class TestDeleteRoom:
    """Tests for DELETE /api/rooms/{id}"""

    def test_delete_empty_room(self, client, room):
        response = client.delete(f"/api/rooms/{room.id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Room deleted successfully"}
        assert client.get(f"/api/rooms/{room.id}").status_code == 404

    def test_occupied_room_refused(self, client, room, make_tenant):
        created = make_tenant(room.id)

        response = client.delete(f"/api/rooms/{room.id}")
        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot delete room with active tenants"
        assert client.get(f"/api/rooms/{room.id}").status_code == 200
        tenants = client.get(f"/api/rooms/{room.id}/tenants").json()
        assert [tenant["id"] for tenant in tenants] == [created["id"]]
        assert tenants[0]["updatedAt"] == created["updatedAt"]

    def test_not_found(self, client, db_session):
        assert client.delete("/api/rooms/999").status_code == 404

    def test_invalid_id(self, client, db_session):
        assert client.delete("/api/rooms/x1").status_code == 400

    def test_database_refuses_occupied_delete(self, db_session, room):
        """The foreign key alone keeps tenants from losing their room"""
        tenant = Tenant(room_id=room.id, **{
            "name": "A", "father_name": "B", "village_name": "C", "tehsil": "D",
            "police_station": "E", "district": "F", "pincode": "243001", "state": "G",
            "aadhar_number": "123456789012", "phone_number": "9876543210",
            "father_phone_number": "9123456789",
        })
        db_session.add(tenant)
        db_session.commit()

        with pytest.raises(IntegrityError):
            db_session.execute(delete(Room).where(Room.id == room.id))
            db_session.commit()
        db_session.rollback()


class TestRoomTenants:
    """Tests for GET/DELETE /api/rooms/{id}/tenants"""

    def test_list_in_name_order(self, client, room, make_room, make_tenant):
        other = make_room("F2")
        make_tenant(room.id, 1, name="Zeenat")
        make_tenant(room.id, 2, name="Bharat")
        make_tenant(other.id, 3, name="Arjun")

        response = client.get(f"/api/rooms/{room.id}/tenants")
        assert response.status_code == 200
        assert [tenant["name"] for tenant in response.json()] == ["Bharat", "Zeenat"]

    def test_list_unknown_room_is_empty(self, client, db_session):
        response = client.get("/api/rooms/999/tenants")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_invalid_id(self, client, db_session):
        assert client.get("/api/rooms/abc/tenants").status_code == 400

    def test_empty_room(self, client, room, make_room, make_tenant):
        other = make_room("F2")
        make_tenant(room.id, 1)
        make_tenant(room.id, 2)
        make_tenant(other.id, 3)

        response = client.delete(f"/api/rooms/{room.id}/tenants")
        assert response.status_code == 200
        assert response.json() == {"message": f"Deleted 2 tenant(s) from room {room.id}", "count": 2}
        assert client.get(f"/api/rooms/{room.id}/tenants").json() == []
        assert len(client.get(f"/api/rooms/{other.id}/tenants").json()) == 1

    def test_empty_already_empty_room(self, client, room):
        response = client.delete(f"/api/rooms/{room.id}/tenants")
        assert response.status_code == 200
        assert response.json()["count"] == 0

    def test_empty_unknown_room(self, client, db_session):
        response = client.delete("/api/rooms/999/tenants")
        assert response.status_code == 404
        assert response.json()["detail"] == "Room not found"

    def test_room_deletable_after_emptying(self, client, room, make_tenant):
        make_tenant(room.id)
        client.delete(f"/api/rooms/{room.id}/tenants")
        assert client.delete(f"/api/rooms/{room.id}").status_code == 200
