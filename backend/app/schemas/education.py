"""
Education schemas. GPA always leaves the API as a plain float.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Optional

from pydantic import BaseModel, field_validator

from backend.app.schemas.common import PartialUpdate


def _gpa_as_float(value):
    if value is None:
        return None
    if isinstance(value, (Decimal, str)):
        return float(value)
    return value


class EducationCreate(BaseModel):
    """Schema for adding an education entry to a resume"""
    resume_id: int
    institution_name: str
    degree: str
    field_of_study: Optional[str] = None
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    gpa: Optional[float] = None
    description: Optional[str] = None
    order_index: int = 0


class EducationUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"institution_name", "degree", "start_date", "is_current", "order_index"}
    )

    institution_name: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: Optional[bool] = None
    gpa: Optional[float] = None
    description: Optional[str] = None
    order_index: Optional[int] = None


class EducationResponse(BaseModel):
    id: int
    resume_id: int
    institution_name: str
    degree: str
    field_of_study: Optional[str] = None
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    is_current: bool
    gpa: Optional[float] = None
    description: Optional[str] = None
    order_index: int
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("gpa", mode="before")
    @classmethod
    def _coerce_gpa(cls, v):
        """Driver-level Decimal / string representations come back as float."""
        return _gpa_as_float(v)
