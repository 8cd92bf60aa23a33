"""
Work experience API - entries of one resume, listed in display order
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.schemas.work_experience import WorkExperienceCreate, WorkExperienceUpdate, WorkExperienceResponse
from backend.app.services.resume_sections import work_experiences

router = APIRouter(prefix="/work-experiences", tags=["work-experiences"])


@router.get("", response_model=list[WorkExperienceResponse])
def list_work_experiences(resume_id: int = Query(...), db: Session = Depends(get_db)):
    """Ordered by order_index ascending. Empty list for unknown resumes."""
    return work_experiences.list_by_resume(db, resume_id)


@router.post("", response_model=WorkExperienceResponse, status_code=status.HTTP_201_CREATED)
def create_work_experience(payload: WorkExperienceCreate, db: Session = Depends(get_db)):
    return work_experiences.create(db, payload)


@router.patch("/{entry_id}", response_model=WorkExperienceResponse)
def update_work_experience(entry_id: int, payload: WorkExperienceUpdate, db: Session = Depends(get_db)):
    return work_experiences.update(db, entry_id, payload)


@router.delete("/{entry_id}", response_model=bool)
def delete_work_experience(entry_id: int, db: Session = Depends(get_db)):
    return work_experiences.delete(db, entry_id)
