"""
Resume template schemas
"""
from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel

from backend.app.schemas.common import PartialUpdate


class ResumeTemplateCreate(BaseModel):
    name: str
    description: Optional[str] = None
    css_styles: str
    html_template: str
    is_active: bool = True


class ResumeTemplateUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "css_styles", "html_template", "is_active"})

    name: Optional[str] = None
    description: Optional[str] = None
    css_styles: Optional[str] = None
    html_template: Optional[str] = None
    is_active: Optional[bool] = None


class ResumeTemplateResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    css_styles: str
    html_template: str
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}
