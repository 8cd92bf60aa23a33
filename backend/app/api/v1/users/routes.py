"""
User profile API - create and update
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.schemas.user import UserCreate, UserResponse, UserUpdate
from backend.app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    """
    Create a user profile

    - **email**: must be unique and well-formed
    - **first_name** / **last_name**: required
    - **phone**, **address**, **city**, **state**, **zip_code**, **country**: optional
    """
    return UserService.create_user(db, payload)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    """Update only the fields sent; explicit null clears an optional field."""
    return UserService.update_user(db, user_id, payload)
