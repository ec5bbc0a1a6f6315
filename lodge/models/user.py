from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from lodge.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    Staff account reserved for authentication.

    Not linked to rooms or tenants; no credentials are stored yet.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
