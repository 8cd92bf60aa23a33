"""
User service - create and update contact profiles
"""
from datetime import datetime

from sqlalchemy.orm import Session

from backend.app.core.exceptions import NotFoundError, UniqueConstraintViolationError
from backend.app.core.logging_config import get_logger
from backend.app.models.user import User
from backend.app.schemas.user import UserCreate, UserUpdate
from backend.app.services.persistence import apply_changes, commit_or_raise

logger = get_logger("services.user")


class UserService:
    """Service for user profile operations"""

    @staticmethod
    def get_user(db: Session, user_id: int) -> User | None:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def _email_taken(db: Session, email: str, exclude_id: int | None = None) -> bool:
        query = db.query(User.id).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    @staticmethod
    def create_user(db: Session, user_data: UserCreate) -> User:
        """Create a user. Email must be unique."""
        email = str(user_data.email)
        if UserService._email_taken(db, email):
            raise UniqueConstraintViolationError("email", email)

        new_user = User(**user_data.model_dump())
        db.add(new_user)
        commit_or_raise(db, unique=("email", email))
        db.refresh(new_user)
        logger.info("User created user_id=%s", new_user.id)
        return new_user

    @staticmethod
    def update_user(db: Session, user_id: int, user_data: UserUpdate) -> User:
        """Apply a sparse update. updated_at is always refreshed."""
        user = UserService.get_user(db, user_id)
        if not user:
            logger.warning("User update - not found user_id=%s", user_id)
            raise NotFoundError("User", user_id)

        changes = user_data.changes()
        if "email" in changes:
            changes["email"] = str(changes["email"])
            if UserService._email_taken(db, changes["email"], exclude_id=user_id):
                raise UniqueConstraintViolationError("email", changes["email"])

        apply_changes(user, changes)
        user.updated_at = datetime.utcnow()
        commit_or_raise(db, unique=("email", changes.get("email", user.email)))
        db.refresh(user)
        return user
