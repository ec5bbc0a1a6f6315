from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lodge.database import get_db
from lodge.services.registration_service import RegistrationService
from lodge.services.room_service import RoomService
from lodge.services.tenant_service import TenantService
from lodge.schemas.common import DeleteCountResponse, MessageResponse
from lodge.schemas.room_schemas import (
    RoomDetailResponse,
    RoomResponse,
    RoomTenantResponse,
    RoomUpdate,
)
from lodge.schemas.tenant_schemas import RegistrationResponse, RoomRegistration

router = APIRouter()


@router.get("", response_model=list[RoomResponse])
def list_rooms(db: Session = Depends(get_db)):
    """List all rooms ordered by name"""
    return RoomService(db).list_rooms()


@router.get("/{room_id}", response_model=RoomDetailResponse)
def get_room(room_id: int, db: Session = Depends(get_db)):
    """
    Get a room with its tenants.

    - Returns 404 if the room doesn't exist
    """
    return RoomService(db).get_room(room_id)


@router.patch("/{room_id}", response_model=RoomResponse)
def update_room(room_id: int, data: RoomUpdate, db: Session = Depends(get_db)):
    """
    Update rent amount and/or lease period.

    - Only provided fields are updated (partial update)
    - periodTo defaults to periodFrom + 11 months when omitted
    - Returns 404 if the room doesn't exist
    """
    return RoomService(db).update_room(room_id, data)


@router.delete("/{room_id}", response_model=MessageResponse)
def delete_room(room_id: int, db: Session = Depends(get_db)):
    """
    Delete an empty room.

    - Returns 400 while the room still has tenants (empty it first)
    """
    RoomService(db).delete_room(room_id)
    return MessageResponse(message="Room deleted successfully")


@router.get("/{room_id}/tenants", response_model=list[RoomTenantResponse])
def list_room_tenants(room_id: int, db: Session = Depends(get_db)):
    """List the tenants of a room alphabetically"""
    return TenantService(db).list_room_tenants(room_id)


@router.post(
    "/{room_id}/tenants",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_tenants(room_id: int, data: RoomRegistration, db: Session = Depends(get_db)):
    """
    Register tenants into a room and set its rent and lease start.

    - All tenants and the room update succeed together or not at all
    - Returns 404 if the room doesn't exist, 409 on duplicate tenants
    """
    room, tenants = RegistrationService(db).register(room_id, data)
    return {"room": room, "tenants": tenants, "count": len(tenants)}


@router.delete("/{room_id}/tenants", response_model=DeleteCountResponse)
def empty_room(room_id: int, db: Session = Depends(get_db)):
    """
    Remove every tenant of a room, keeping the room itself.

    - Succeeds with count 0 for an already empty room
    - Returns 404 if the room doesn't exist
    """
    count = TenantService(db).empty_room(room_id)
    return DeleteCountResponse(
        message=f"Deleted {count} tenant(s) from room {room_id}", count=count
    )
