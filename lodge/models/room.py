from datetime import date
from sqlalchemy import String, Integer, Date
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from lodge.core.lease import lease_end
from lodge.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from lodge.models.tenant import Tenant


def _default_period_to() -> date:
    return lease_end(date.today())


class Room(Base, TimestampMixin):
    """
    A rentable unit identified by a unique label ("F1", "G1 + G2 + G3").

    Rent and lease period live on the room and are shared by every tenant
    occupying it. period_to is derived from period_from unless set explicitly.
    """

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    rent_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    period_from: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    period_to: Mapped[date] = mapped_column(Date, nullable=False, default=_default_period_to)

    # Relationships
    tenants: Mapped[list["Tenant"]] = relationship(
        "Tenant",
        back_populates="room",
        order_by="Tenant.name",
        passive_deletes="all",  # Occupied rooms are protected by ON DELETE RESTRICT
    )

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, name='{self.name}')>"
