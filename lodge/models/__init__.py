"""ORM models. Importing this package registers every table on Base.metadata."""

from lodge.models.base import Base
from lodge.models.room import Room
from lodge.models.tenant import Tenant
from lodge.models.user import User

__all__ = ["Base", "Room", "Tenant", "User"]
