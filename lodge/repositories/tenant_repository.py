from sqlalchemy.orm import Session

from lodge.models.tenant import Tenant


class TenantRepository:
    """Repository for Tenant data access"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        self.db.add(tenant)
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def create_bulk(self, tenants: list[Tenant]) -> list[Tenant]:
        """
        Create multiple tenants without committing.
        Caller responsible for commit. Enables atomic batch operations.
        """
        self.db.add_all(tenants)
        self.db.flush()  # Assign IDs and surface constraint errors without committing
        return tenants

    def get_by_id(self, tenant_id: int) -> Tenant | None:
        """Get tenant by ID (room is joined)"""
        return self.db.query(Tenant).filter(Tenant.id == tenant_id).first()

    def get_all(self) -> list[Tenant]:
        """Get all tenants, newest first"""
        return (
            self.db.query(Tenant)
            .order_by(Tenant.created_at.desc(), Tenant.id.desc())
            .all()
        )

    def get_by_room(self, room_id: int) -> list[Tenant]:
        """Get tenants of one room, alphabetical by name"""
        return (
            self.db.query(Tenant)
            .filter(Tenant.room_id == room_id)
            .order_by(Tenant.name.asc(), Tenant.id.asc())
            .all()
        )

    def count(self) -> int:
        return self.db.query(Tenant).count()

    def update(self, tenant: Tenant) -> Tenant:
        """Update a tenant"""
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def delete(self, tenant: Tenant) -> None:
        """Delete a tenant"""
        self.db.delete(tenant)
        self.db.commit()

    def delete_by_room(self, room_id: int) -> int:
        """Delete every tenant of a room and return how many were removed"""
        count = (
            self.db.query(Tenant)
            .filter(Tenant.room_id == room_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count
