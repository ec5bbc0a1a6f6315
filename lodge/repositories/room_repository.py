from sqlalchemy.orm import Session, selectinload
from lodge.models.room import Room


class RoomRepository:
    """Repository for Room model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Room]:
        """Get all rooms ordered by name"""
        return self.db.query(Room).order_by(Room.name.asc()).all()

    def get_all_with_tenants(self) -> list[Room]:
        """Get all rooms with their tenants loaded in one extra query"""
        return (
            self.db.query(Room)
            .options(selectinload(Room.tenants))
            .order_by(Room.name.asc())
            .all()
        )

    def get_by_id(self, room_id: int) -> Room | None:
        return self.db.query(Room).filter(Room.id == room_id).first()

    def get_with_tenants(self, room_id: int) -> Room | None:
        """Get room by ID with its tenants eagerly loaded"""
        return (
            self.db.query(Room)
            .options(selectinload(Room.tenants))
            .filter(Room.id == room_id)
            .first()
        )

    def get_by_name(self, name: str) -> Room | None:
        return self.db.query(Room).filter(Room.name == name).first()

    def exists(self, room_id: int) -> bool:
        return self.db.query(Room.id).filter(Room.id == room_id).first() is not None

    def create(self, room: Room) -> Room:
        """Create new room"""
        self.db.add(room)
        self.db.commit()
        self.db.refresh(room)
        return room

    def update(self, room: Room) -> Room:
        """Update existing room"""
        self.db.commit()
        self.db.refresh(room)
        return room

    def delete(self, room: Room) -> None:
        """Delete room (the database refuses while tenants reference it)"""
        self.db.delete(room)
        self.db.commit()
