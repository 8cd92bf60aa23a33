"""
Repositories for the ordered child sections of a resume
(work experience, education, skills). All three share the same contract:
create bound to an existing resume, sparse update, boolean delete,
and listing ordered by order_index (ties by id).
"""
from sqlalchemy.orm import Session

from backend.app.core.exceptions import NotFoundError
from backend.app.core.logging_config import get_logger
from backend.app.models.education import Education
from backend.app.models.resume import Resume
from backend.app.models.skill import Skill
from backend.app.models.work_experience import WorkExperience
from backend.app.schemas.common import PartialUpdate
from backend.app.services.persistence import apply_changes, commit_or_raise, require_parent

logger = get_logger("services.resume_sections")


class ResumeSectionRepository:
    def __init__(self, model, label: str):
        self.model = model
        self.label = label

    def get(self, db: Session, row_id: int):
        return db.query(self.model).filter(self.model.id == row_id).first()

    def create(self, db: Session, payload):
        require_parent(db, Resume, payload.resume_id, "resume_id")
        row = self.model(**payload.model_dump())
        db.add(row)
        commit_or_raise(db, foreign_key=("resume_id", payload.resume_id))
        db.refresh(row)
        logger.info("%s created id=%s resume_id=%s", self.label, row.id, row.resume_id)
        return row

    def update(self, db: Session, row_id: int, payload: PartialUpdate):
        row = self.get(db, row_id)
        if not row:
            logger.warning("%s update - not found id=%s", self.label, row_id)
            raise NotFoundError(self.label, row_id)
        apply_changes(row, payload.changes())
        commit_or_raise(db)
        db.refresh(row)
        return row

    def delete(self, db: Session, row_id: int) -> bool:
        """True when a row was removed, False when none matched."""
        deleted = (
            db.query(self.model)
            .filter(self.model.id == row_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        if deleted:
            logger.info("%s deleted id=%s", self.label, row_id)
        return deleted > 0

    def list_by_resume(self, db: Session, resume_id: int) -> list:
        """Rows of one resume in display order. Empty for unknown resumes."""
        return (
            db.query(self.model)
            .filter(self.model.resume_id == resume_id)
            .order_by(self.model.order_index.asc(), self.model.id.asc())
            .all()
        )


work_experiences = ResumeSectionRepository(WorkExperience, "Work experience")
educations = ResumeSectionRepository(Education, "Education")
skills = ResumeSectionRepository(Skill, "Skill")
