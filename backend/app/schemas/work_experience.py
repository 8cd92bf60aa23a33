"""
Work experience schemas
"""
from datetime import date, datetime
from typing import ClassVar, Optional

from pydantic import BaseModel

from backend.app.schemas.common import PartialUpdate


class WorkExperienceCreate(BaseModel):
    """Schema for adding a work experience entry to a resume"""
    resume_id: int
    company_name: str
    job_title: str
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    description: Optional[str] = None
    order_index: int = 0


class WorkExperienceUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"company_name", "job_title", "start_date", "is_current", "order_index"}
    )

    company_name: Optional[str] = None
    job_title: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: Optional[bool] = None
    description: Optional[str] = None
    order_index: Optional[int] = None


class WorkExperienceResponse(BaseModel):
    id: int
    resume_id: int
    company_name: str
    job_title: str
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    is_current: bool
    description: Optional[str] = None
    order_index: int
    created_at: datetime

    model_config = {"from_attributes": True}
