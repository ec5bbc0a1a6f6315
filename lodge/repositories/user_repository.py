from sqlalchemy.orm import Session
from lodge.models.user import User


class UserRepository:
    """Repository for User model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[User]:
        """Get all users, newest first"""
        return self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
