"""
Seed the rooms table.

Usage:
    python -m lodge.seed
"""

import logging

from lodge.config import settings
from lodge.core.logging import configure_logging
from lodge.database import SessionLocal
from lodge.services.room_service import RoomService

logger = logging.getLogger(__name__)

GROUND_FLOOR_ROOMS = ["G1 + G2 + G3"]
FIRST_FLOOR_ROOMS = [f"F{number}" for number in range(1, 13)]
SECOND_FLOOR_ROOMS = [f"S{number}" for number in range(1, 7)]

DEFAULT_ROOM_NAMES = GROUND_FLOOR_ROOMS + FIRST_FLOOR_ROOMS + SECOND_FLOOR_ROOMS


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info("Seeding %d rooms", len(DEFAULT_ROOM_NAMES))
    db = SessionLocal()
    try:
        created = RoomService(db).seed_rooms(DEFAULT_ROOM_NAMES)
    finally:
        db.close()
    logger.info("Seeding completed: %d room(s) created", len(created))


if __name__ == "__main__":
    main()
