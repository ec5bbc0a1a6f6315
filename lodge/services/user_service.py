from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lodge.core.constraints import translate_integrity_error
from lodge.core.exceptions import ConflictException
from lodge.models.user import User
from lodge.repositories.user_repository import UserRepository
from lodge.schemas.user_schemas import UserCreate


class UserService:
    """Service for user records (authentication is not wired up yet)"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)

    def list_users(self) -> list[User]:
        return self.repo.get_all()

    def create_user(self, data: UserCreate) -> User:
        """
        Create a user.

        Raises:
            ConflictException: If the email is already registered
        """
        try:
            return self.repo.create(User(email=data.email, name=data.name))
        except IntegrityError as exc:
            self.db.rollback()
            raise translate_integrity_error(
                exc,
                unique=ConflictException("A user with this email already exists"),
                foreign_key=ConflictException("User could not be created"),
            ) from exc
