"""
Skills API - entries of one resume, listed in display order
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.schemas.skill import SkillCreate, SkillUpdate, SkillResponse
from backend.app.services.resume_sections import skills

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=list[SkillResponse])
def list_skills(resume_id: int = Query(...), db: Session = Depends(get_db)):
    """Ordered by order_index ascending. Empty list for unknown resumes."""
    return skills.list_by_resume(db, resume_id)


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
def create_skill(payload: SkillCreate, db: Session = Depends(get_db)):
    return skills.create(db, payload)


@router.patch("/{entry_id}", response_model=SkillResponse)
def update_skill(entry_id: int, payload: SkillUpdate, db: Session = Depends(get_db)):
    return skills.update(db, entry_id, payload)


@router.delete("/{entry_id}", response_model=bool)
def delete_skill(entry_id: int, db: Session = Depends(get_db)):
    """True when the skill existed and was removed."""
    return skills.delete(db, entry_id)
