"""
Resume service - resume CRUD and the application-level cascade to child sections.
"""
from datetime import datetime

from sqlalchemy.orm import Session

from backend.app.core.exceptions import NotFoundError
from backend.app.core.logging_config import get_logger
from backend.app.models.education import Education
from backend.app.models.resume import Resume
from backend.app.models.resume_template import ResumeTemplate
from backend.app.models.skill import Skill
from backend.app.models.user import User
from backend.app.models.work_experience import WorkExperience
from backend.app.schemas.resume import ResumeCreate, ResumeUpdate
from backend.app.services.persistence import apply_changes, commit_or_raise, require_parent

logger = get_logger("services.resume")

# Child tables removed before the resume row itself
CHILD_MODELS = (Skill, Education, WorkExperience)


class ResumeService:
    @staticmethod
    def get_resume(db: Session, resume_id: int) -> Resume | None:
        """Return the resume or None. Absence is not an error here."""
        return db.query(Resume).filter(Resume.id == resume_id).first()

    @staticmethod
    def list_user_resumes(db: Session, user_id: int) -> list[Resume]:
        return db.query(Resume).filter(Resume.user_id == user_id).order_by(Resume.id.asc()).all()

    @staticmethod
    def create_resume(db: Session, payload: ResumeCreate) -> Resume:
        require_parent(db, User, payload.user_id, "user_id")
        require_parent(db, ResumeTemplate, payload.template_id, "template_id")

        resume = Resume(**payload.model_dump())
        db.add(resume)
        commit_or_raise(db, foreign_key=("user_id", payload.user_id))
        db.refresh(resume)
        logger.info("Resume created resume_id=%s user_id=%s", resume.id, resume.user_id)
        return resume

    @staticmethod
    def update_resume(db: Session, resume_id: int, payload: ResumeUpdate) -> Resume:
        """Sparse update; updated_at is touched even when nothing else changes."""
        resume = ResumeService.get_resume(db, resume_id)
        if not resume:
            logger.warning("Resume update - not found resume_id=%s", resume_id)
            raise NotFoundError("Resume", resume_id)

        changes = payload.changes()
        if "template_id" in changes:
            require_parent(db, ResumeTemplate, changes["template_id"], "template_id")

        apply_changes(resume, changes)
        resume.updated_at = datetime.utcnow()
        commit_or_raise(db)
        db.refresh(resume)
        return resume

    @staticmethod
    def delete_resume(db: Session, resume_id: int) -> bool:
        """
        Delete a resume and all of its work experience, education and skill rows.
        Returns False without touching children when the resume does not exist.
        Children go first so an interrupted run leaves only orphans, never a half-deleted parent.
        """
        if ResumeService.get_resume(db, resume_id) is None:
            logger.info("Resume delete - not found resume_id=%s", resume_id)
            return False

        try:
            removed = {}
            for model in CHILD_MODELS:
                removed[model.__tablename__] = (
                    db.query(model)
                    .filter(model.resume_id == resume_id)
                    .delete(synchronize_session=False)
                )
            deleted = (
                db.query(Resume)
                .filter(Resume.id == resume_id)
                .delete(synchronize_session=False)
            )
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Resume delete failed resume_id=%s", resume_id)
            raise

        logger.info("Resume deleted resume_id=%s children=%s", resume_id, removed)
        return deleted > 0
