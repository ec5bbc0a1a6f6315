import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lodge.core.constraints import translate_integrity_error
from lodge.core.exceptions import (
    ConflictException,
    NotFoundException,
    RoomReferenceException,
)
from lodge.core.lease import lease_end
from lodge.models.tenant import Tenant
from lodge.repositories.room_repository import RoomRepository
from lodge.repositories.tenant_repository import TenantRepository
from lodge.schemas.tenant_schemas import TenantCreate, TenantFields, TenantUpdate

logger = logging.getLogger(__name__)

DUPLICATE_TENANT_MESSAGE = "A tenant with this information already exists"


def apply_tenant_fields(tenant: Tenant, data: TenantFields) -> Tenant:
    """Copy every tenant field from a validated schema onto the model"""
    tenant.name = data.name
    tenant.father_name = data.father_name
    tenant.village_name = data.village_name
    tenant.tehsil = data.tehsil
    tenant.police_station = data.police_station
    tenant.district = data.district
    tenant.pincode = data.pincode
    tenant.state = data.state
    tenant.email = data.email
    tenant.aadhar_number = data.aadhar_number
    tenant.phone_number = data.phone_number
    tenant.father_phone_number = data.father_phone_number
    return tenant


def translate_tenant_error(exc: IntegrityError):
    return translate_integrity_error(
        exc,
        unique=ConflictException(DUPLICATE_TENANT_MESSAGE),
        foreign_key=RoomReferenceException(),
    )


class TenantService:
    """Service layer for tenant business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.tenant_repo = TenantRepository(db)
        self.room_repo = RoomRepository(db)

    def list_tenants(self) -> list[Tenant]:
        """All tenants with their rooms, newest first"""
        return self.tenant_repo.get_all()

    def list_room_tenants(self, room_id: int) -> list[Tenant]:
        """
        Tenants of one room ordered by name.

        An unknown room simply has no tenants.
        """
        return self.tenant_repo.get_by_room(room_id)

    def get_tenant(self, tenant_id: int) -> Tenant:
        """
        Get tenant with its room.

        Raises:
            NotFoundException: If tenant not found
        """
        tenant = self.tenant_repo.get_by_id(tenant_id)
        if not tenant:
            raise NotFoundException("Tenant not found")
        return tenant

    def create_tenant(self, data: TenantCreate) -> Tenant:
        """
        Create a tenant in an existing room.

        Room existence is enforced by the foreign key, so a room removed
        concurrently still yields RoomReferenceException and no write.
        When data.period_from is given the room's lease restarts from it
        in the same transaction.

        Raises:
            RoomReferenceException: If the room does not exist
            ConflictException: If the tenant duplicates an existing one
        """
        if data.period_from is not None:
            room = self.room_repo.get_by_id(data.room_id)
            if not room:
                raise RoomReferenceException()
            room.period_from = data.period_from
            room.period_to = lease_end(data.period_from)

        tenant = apply_tenant_fields(Tenant(room_id=data.room_id), data)
        try:
            tenant = self.tenant_repo.create(tenant)
        except IntegrityError as exc:
            self.db.rollback()
            raise translate_tenant_error(exc) from exc

        logger.info("Created tenant %s in room %s", tenant.id, tenant.room_id)
        return tenant

    def update_tenant(self, tenant_id: int, data: TenantUpdate) -> Tenant:
        """
        Replace every field of a tenant.

        Raises:
            NotFoundException: If tenant not found
            ConflictException: If the new values duplicate another tenant
        """
        tenant = self.get_tenant(tenant_id)
        apply_tenant_fields(tenant, data)
        try:
            tenant = self.tenant_repo.update(tenant)
        except IntegrityError as exc:
            self.db.rollback()
            raise translate_tenant_error(exc) from exc

        logger.info("Updated tenant %s", tenant.id)
        return tenant

    def delete_tenant(self, tenant_id: int) -> None:
        """
        Delete a single tenant.

        Raises:
            NotFoundException: If tenant not found
        """
        tenant = self.get_tenant(tenant_id)
        self.tenant_repo.delete(tenant)
        logger.info("Deleted tenant %s", tenant_id)

    def empty_room(self, room_id: int) -> int:
        """
        Delete all tenants of a room.

        Returns:
            Number of tenants removed (0 for an empty room)

        Raises:
            NotFoundException: If room not found
        """
        if not self.room_repo.exists(room_id):
            raise NotFoundException("Room not found")
        count = self.tenant_repo.delete_by_room(room_id)
        logger.info("Emptied room %s: %d tenant(s) removed", room_id, count)
        return count
