"""
Resume template API - administrative create/update, active listing for the editor
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.schemas.resume_template import ResumeTemplateCreate, ResumeTemplateResponse, ResumeTemplateUpdate
from backend.app.services import template_service

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[ResumeTemplateResponse])
def list_active_templates(db: Session = Depends(get_db)):
    return template_service.list_active_templates(db)


@router.post("", response_model=ResumeTemplateResponse, status_code=status.HTTP_201_CREATED)
def create_template(payload: ResumeTemplateCreate, db: Session = Depends(get_db)):
    return template_service.create_template(db, payload)


@router.patch("/{template_id}", response_model=ResumeTemplateResponse)
def update_template(template_id: int, payload: ResumeTemplateUpdate, db: Session = Depends(get_db)):
    return template_service.update_template(db, template_id, payload)
