"""
Resume aggregator - composes a resume with its ordered sections, template and owner.
Used by GET /api/resumes/{id}/full and by the document exporter.
"""
from sqlalchemy.orm import Session

from backend.app.core.logging_config import get_logger
from backend.app.schemas.education import EducationResponse
from backend.app.schemas.resume import FullResume, ResumeResponse
from backend.app.schemas.resume_template import ResumeTemplateResponse
from backend.app.schemas.skill import SkillResponse
from backend.app.schemas.user import UserResponse
from backend.app.schemas.work_experience import WorkExperienceResponse
from backend.app.services.resume_sections import educations, skills, work_experiences
from backend.app.services.resume_service import ResumeService
from backend.app.services.template_service import get_template
from backend.app.services.user_service import UserService

logger = get_logger("services.resume_aggregator")


def get_full_resume(db: Session, resume_id: int) -> FullResume | None:
    """
    Fetch the resume and its sections within the session's single transaction.
    Returns None when the resume does not exist. A template_id that no longer
    resolves yields template=None.
    """
    resume = ResumeService.get_resume(db, resume_id)
    if resume is None:
        return None

    template = None
    if resume.template_id is not None:
        template = get_template(db, resume.template_id)
        if template is None:
            logger.warning(
                "Resume references missing template resume_id=%s template_id=%s",
                resume_id,
                resume.template_id,
            )
    user = UserService.get_user(db, resume.user_id)

    return FullResume(
        **ResumeResponse.model_validate(resume).model_dump(),
        work_experiences=[
            WorkExperienceResponse.model_validate(w) for w in work_experiences.list_by_resume(db, resume_id)
        ],
        education=[EducationResponse.model_validate(e) for e in educations.list_by_resume(db, resume_id)],
        skills=[SkillResponse.model_validate(s) for s in skills.list_by_resume(db, resume_id)],
        template=ResumeTemplateResponse.model_validate(template) if template else None,
        user=UserResponse.model_validate(user) if user else None,
    )
