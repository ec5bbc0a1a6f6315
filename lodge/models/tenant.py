from sqlalchemy import String, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from lodge.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from lodge.models.room import Room


class Tenant(Base, TimestampMixin):
    """
    A person registered as an occupant of exactly one room.

    Phone numbers, Aadhar number and pincode are stored as digits only.
    """

    __tablename__ = "tenants"
    __table_args__ = (
        UniqueConstraint("aadhar_number", name="tenants_aadhar_number_key"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    father_name: Mapped[str] = mapped_column(String(255), nullable=False)
    village_name: Mapped[str] = mapped_column(String(255), nullable=False)
    tehsil: Mapped[str] = mapped_column(String(255), nullable=False)
    police_station: Mapped[str] = mapped_column(String(255), nullable=False)
    district: Mapped[str] = mapped_column(String(255), nullable=False)
    pincode: Mapped[str] = mapped_column(String(6), nullable=False)
    state: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    aadhar_number: Mapped[str] = mapped_column(String(12), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(10), nullable=False)
    father_phone_number: Mapped[str] = mapped_column(String(10), nullable=False)
    room_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("rooms.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    room: Mapped["Room"] = relationship("Room", back_populates="tenants", lazy="joined")

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name='{self.name}', room_id={self.room_id})>"
