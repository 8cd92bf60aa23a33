"""
Persistence helpers shared by the entity services: parent checks, sparse updates,
and translating storage integrity errors into domain errors.
"""
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.exceptions import ForeignKeyViolationError, UniqueConstraintViolationError


def require_parent(db: Session, model, parent_id: int | None, field: str) -> None:
    """Raise ForeignKeyViolationError when a referenced row is missing. None means no reference."""
    if parent_id is None:
        return
    if db.query(model.id).filter(model.id == parent_id).first() is None:
        raise ForeignKeyViolationError(field, parent_id)


def apply_changes(row, changes: dict[str, Any]) -> None:
    for key, value in changes.items():
        setattr(row, key, value)


def commit_or_raise(
    db: Session,
    *,
    unique: tuple[str, str] | None = None,
    foreign_key: tuple[str, int] | None = None,
) -> None:
    """Commit; on IntegrityError roll back and re-raise as the matching domain error."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        message = str(exc.orig).lower()
        if unique and ("unique" in message or "duplicate" in message):
            raise UniqueConstraintViolationError(*unique) from exc
        if foreign_key and "foreign key" in message:
            raise ForeignKeyViolationError(*foreign_key) from exc
        raise
