from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lodge.database import get_db
from lodge.services.user_service import UserService
from lodge.schemas.user_schemas import UserCreate, UserResponse

router = APIRouter()


@router.get("", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """List users, newest first"""
    return UserService(db).list_users()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    """Create a user; returns 409 if the email is taken"""
    return UserService(db).create_user(data)
