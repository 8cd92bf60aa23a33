"""
Resume API - CRUD, per-user listing and the full aggregate
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.schemas.resume import FullResume, ResumeCreate, ResumeResponse, ResumeUpdate
from backend.app.services.resume_aggregator import get_full_resume
from backend.app.services.resume_service import ResumeService

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("", response_model=list[ResumeResponse])
def list_resumes(user_id: int = Query(...), db: Session = Depends(get_db)):
    """All resumes owned by the user."""
    return ResumeService.list_user_resumes(db, user_id)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def create_resume(payload: ResumeCreate, db: Session = Depends(get_db)):
    return ResumeService.create_resume(db, payload)


@router.get("/{resume_id}", response_model=Optional[ResumeResponse])
def get_resume(resume_id: int, db: Session = Depends(get_db)):
    """Returns null (not 404) when the resume does not exist."""
    return ResumeService.get_resume(db, resume_id)


@router.get("/{resume_id}/full", response_model=Optional[FullResume])
def get_resume_full(resume_id: int, db: Session = Depends(get_db)):
    """Resume with ordered work experience, education, skills, template and owner. Null when missing."""
    return get_full_resume(db, resume_id)


@router.patch("/{resume_id}", response_model=ResumeResponse)
def update_resume(resume_id: int, payload: ResumeUpdate, db: Session = Depends(get_db)):
    return ResumeService.update_resume(db, resume_id, payload)


@router.delete("/{resume_id}", response_model=bool)
def delete_resume(resume_id: int, db: Session = Depends(get_db)):
    """Delete the resume and all its sections. False when nothing matched."""
    return ResumeService.delete_resume(db, resume_id)
