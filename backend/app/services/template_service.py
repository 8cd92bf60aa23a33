"""
Resume template service - administrative create/update and the active listing
"""
from sqlalchemy.orm import Session

from backend.app.core.exceptions import NotFoundError
from backend.app.core.logging_config import get_logger
from backend.app.models.resume_template import ResumeTemplate
from backend.app.schemas.resume_template import ResumeTemplateCreate, ResumeTemplateUpdate
from backend.app.services.persistence import apply_changes, commit_or_raise

logger = get_logger("services.template")


def create_template(db: Session, payload: ResumeTemplateCreate) -> ResumeTemplate:
    template = ResumeTemplate(**payload.model_dump())
    db.add(template)
    commit_or_raise(db)
    db.refresh(template)
    logger.info("Template created template_id=%s name=%s", template.id, template.name)
    return template


def update_template(db: Session, template_id: int, payload: ResumeTemplateUpdate) -> ResumeTemplate:
    template = get_template(db, template_id)
    if not template:
        raise NotFoundError("Resume template", template_id)
    apply_changes(template, payload.changes())
    commit_or_raise(db)
    db.refresh(template)
    return template


def get_template(db: Session, template_id: int) -> ResumeTemplate | None:
    return db.query(ResumeTemplate).filter(ResumeTemplate.id == template_id).first()


def list_active_templates(db: Session) -> list[ResumeTemplate]:
    """Templates offered in the editor (is_active only)."""
    return (
        db.query(ResumeTemplate)
        .filter(ResumeTemplate.is_active.is_(True))
        .order_by(ResumeTemplate.id.asc())
        .all()
    )
