import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lodge.core.exceptions import NotFoundException
from lodge.core.lease import lease_end
from lodge.models.room import Room
from lodge.models.tenant import Tenant
from lodge.repositories.room_repository import RoomRepository
from lodge.repositories.tenant_repository import TenantRepository
from lodge.schemas.tenant_schemas import RoomRegistration
from lodge.services.tenant_service import apply_tenant_fields, translate_tenant_error

logger = logging.getLogger(__name__)


class RegistrationService:
    """Registers a group of tenants into a room together with its rent and lease"""

    def __init__(self, db: Session):
        self.db = db
        self.room_repo = RoomRepository(db)
        self.tenant_repo = TenantRepository(db)

    def register(self, room_id: int, data: RoomRegistration) -> tuple[Room, list[Tenant]]:
        """
        Set the room's rent and lease start, then create every tenant.

        All writes share one transaction: if any tenant is rejected by the
        database, the room update and the other tenants are rolled back too.

        Args:
            room_id: Room receiving the tenants
            data: Rent, lease start and tenant records (already validated)

        Returns:
            Tuple of (updated room, created tenants)

        Raises:
            NotFoundException: If room not found
            ConflictException: If any tenant duplicates an existing one
        """
        room = self.room_repo.get_by_id(room_id)
        if not room:
            raise NotFoundException("Room not found")

        room.rent_amount = data.rent_amount
        room.period_from = data.period_from
        room.period_to = lease_end(data.period_from)

        tenants = [apply_tenant_fields(Tenant(room_id=room.id), item) for item in data.tenants]
        try:
            self.tenant_repo.create_bulk(tenants)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise translate_tenant_error(exc) from exc

        self.db.refresh(room)
        for tenant in tenants:
            self.db.refresh(tenant)

        logger.info(
            "Registered %d tenant(s) in room %s (rent=%s, period=%s..%s)",
            len(tenants),
            room.name,
            room.rent_amount,
            room.period_from,
            room.period_to,
        )
        return room, tenants
