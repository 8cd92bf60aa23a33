"""
Skill - ordered child rows of a resume
"""
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String

from backend.app.db.base import Base

PROFICIENCY_LEVELS = ("beginner", "intermediate", "advanced", "expert")
_LEVELS_SQL = ", ".join(f"'{level}'" for level in PROFICIENCY_LEVELS)


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(Integer, ForeignKey("resumes.id"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=True)
    proficiency_level = Column(String(20), nullable=True)
    order_index = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint(
            f"proficiency_level IS NULL OR proficiency_level IN ({_LEVELS_SQL})",
            name="ck_skills_proficiency_level",
        ),
    )
