import logging
from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lodge.core.constraints import translate_integrity_error
from lodge.core.exceptions import (
    ConflictException,
    NotFoundException,
    RoomOccupiedException,
    ValidationException,
)
from lodge.core.lease import resolve_period
from lodge.models.room import Room
from lodge.repositories.room_repository import RoomRepository
from lodge.schemas.room_schemas import RoomUpdate

logger = logging.getLogger(__name__)


class RoomService:
    """Service for room business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = RoomRepository(db)

    def list_rooms(self) -> list[Room]:
        """All rooms ordered by raw name"""
        return self.repo.get_all()

    def list_rooms_with_tenants(self) -> list[Room]:
        return self.repo.get_all_with_tenants()

    def get_room(self, room_id: int) -> Room:
        """
        Get room with its tenants.

        Raises:
            NotFoundException: If room not found
        """
        room = self.repo.get_with_tenants(room_id)
        if not room:
            raise NotFoundException("Room not found")
        return room

    def update_room(self, room_id: int, data: RoomUpdate) -> Room:
        """
        Update rent and/or lease period.

        period_to is derived from period_from when it is not supplied.
        Fields that are not supplied keep their stored values.

        Raises:
            NotFoundException: If room not found (nothing is written)
        """
        room = self.repo.get_by_id(room_id)
        if not room:
            raise NotFoundException("Room not found")

        period_from, period_to = resolve_period(data.period_from, data.period_to)

        if data.rent_amount is not None:
            room.rent_amount = data.rent_amount
        if period_from is not None:
            room.period_from = period_from
        if period_to is not None:
            room.period_to = period_to

        room = self.repo.update(room)
        logger.info(
            "Updated room %s: rent=%s period=%s..%s",
            room.name,
            room.rent_amount,
            room.period_from,
            room.period_to,
        )
        return room

    def delete_room(self, room_id: int) -> None:
        """
        Delete an empty room.

        Raises:
            NotFoundException: If room not found
            RoomOccupiedException: If the room still has tenants
        """
        room = self.repo.get_with_tenants(room_id)
        if not room:
            raise NotFoundException("Room not found")
        if room.tenants:
            raise RoomOccupiedException()

        name = room.name
        try:
            self.repo.delete(room)
        except IntegrityError as exc:
            # A tenant was added after the occupancy check
            self.db.rollback()
            raise translate_integrity_error(
                exc,
                unique=ConflictException("Room conflicts with existing data"),
                foreign_key=RoomOccupiedException(),
            ) from exc
        logger.info("Deleted room %s", name)

    def create_room(self, name: str) -> Room:
        """
        Create a room by name.

        Raises:
            ValidationException: If the name is blank
            ConflictException: If a room with that name exists
        """
        name = name.strip()
        if not name:
            raise ValidationException("Field 'name' is required")
        try:
            room = self.repo.create(Room(name=name))
        except IntegrityError as exc:
            self.db.rollback()
            raise translate_integrity_error(
                exc,
                unique=ConflictException(f"Room {name} already exists"),
                foreign_key=ConflictException(f"Room {name} could not be created"),
            ) from exc
        logger.info("Created room %s", name)
        return room

    def seed_rooms(self, names: Iterable[str]) -> list[Room]:
        """Create every named room that does not exist yet; returns the new ones"""
        created = []
        for name in names:
            if self.repo.get_by_name(name):
                logger.info("Room %s already exists, skipping", name)
                continue
            created.append(self.create_room(name))
        return created
