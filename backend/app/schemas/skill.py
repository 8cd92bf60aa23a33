"""
Skill schemas
"""
from datetime import datetime
from typing import ClassVar, Literal, Optional

from pydantic import BaseModel

from backend.app.schemas.common import PartialUpdate

ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class SkillCreate(BaseModel):
    resume_id: int
    name: str
    category: Optional[str] = None
    proficiency_level: Optional[ProficiencyLevel] = None
    order_index: int = 0


class SkillUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "order_index"})

    name: Optional[str] = None
    category: Optional[str] = None
    proficiency_level: Optional[ProficiencyLevel] = None
    order_index: Optional[int] = None


class SkillResponse(BaseModel):
    id: int
    resume_id: int
    name: str
    category: Optional[str] = None
    proficiency_level: Optional[ProficiencyLevel] = None
    order_index: int
    created_at: datetime

    model_config = {"from_attributes": True}
