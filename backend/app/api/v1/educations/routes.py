"""
Education API - entries of one resume, listed in display order
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.schemas.education import EducationCreate, EducationUpdate, EducationResponse
from backend.app.services.resume_sections import educations

router = APIRouter(prefix="/educations", tags=["educations"])


@router.get("", response_model=list[EducationResponse])
def list_educations(resume_id: int = Query(...), db: Session = Depends(get_db)):
    """Ordered by order_index ascending; gpa is returned as a number. Empty list for unknown resumes."""
    return educations.list_by_resume(db, resume_id)


@router.post("", response_model=EducationResponse, status_code=status.HTTP_201_CREATED)
def create_education(payload: EducationCreate, db: Session = Depends(get_db)):
    return educations.create(db, payload)


@router.patch("/{entry_id}", response_model=EducationResponse)
def update_education(entry_id: int, payload: EducationUpdate, db: Session = Depends(get_db)):
    return educations.update(db, entry_id, payload)


@router.delete("/{entry_id}", response_model=bool)
def delete_education(entry_id: int, db: Session = Depends(get_db)):
    return educations.delete(db, entry_id)
