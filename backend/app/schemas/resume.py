"""
Resume schemas, including the full aggregate returned by GET /api/resumes/{id}/full
"""
from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field

from backend.app.schemas.common import PartialUpdate
from backend.app.schemas.education import EducationResponse
from backend.app.schemas.resume_template import ResumeTemplateResponse
from backend.app.schemas.skill import SkillResponse
from backend.app.schemas.user import UserResponse
from backend.app.schemas.work_experience import WorkExperienceResponse


class ResumeCreate(BaseModel):
    """Schema for creating a resume"""
    user_id: int
    title: str
    summary: Optional[str] = None
    template_id: Optional[int] = None
    is_public: bool = False


class ResumeUpdate(PartialUpdate):
    """Schema for a sparse resume update"""
    non_nullable: ClassVar[frozenset[str]] = frozenset({"title", "is_public"})

    title: Optional[str] = None
    summary: Optional[str] = None
    template_id: Optional[int] = None
    is_public: Optional[bool] = None


class ResumeResponse(BaseModel):
    """Schema for resume response"""
    id: int
    user_id: int
    title: str
    summary: Optional[str] = None
    template_id: Optional[int] = None
    is_public: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class FullResume(ResumeResponse):
    """Resume with its ordered child collections, resolved template and owner"""
    work_experiences: List[WorkExperienceResponse] = Field(default_factory=list)
    education: List[EducationResponse] = Field(default_factory=list)
    skills: List[SkillResponse] = Field(default_factory=list)
    template: Optional[ResumeTemplateResponse] = None
    user: Optional[UserResponse] = None
