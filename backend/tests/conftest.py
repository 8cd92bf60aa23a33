"""
Pytest fixtures for Resume Builder API tests.
Uses in-memory SQLite shared through StaticPool; tables are created and dropped per test.
"""
import os
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from backend.app.db.base import Base
from backend.main import app
from backend.app.core.dependencies import get_db
from backend.app.models.education import Education
from backend.app.models.resume import Resume
from backend.app.models.resume_template import ResumeTemplate
from backend.app.models.skill import Skill
from backend.app.models.user import User
from backend.app.models.work_experience import WorkExperience

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import backend.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal
# main.py imports engine directly; patch so startup uses our engine
import backend.main as main_module
main_module.engine = engine


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """TestClient bound to the per-test database."""
    return TestClient(app)


@pytest.fixture
def test_user(db_session):
    """Create a test user with full contact details."""
    user = User(
        email="john.doe@example.com",
        first_name="John",
        last_name="Doe",
        phone="+1-555-123-4567",
        address="123 Main St",
        city="San Francisco",
        state="CA",
        zip_code="94102",
        country="USA",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_template(db_session):
    template = ResumeTemplate(
        name="Professional Template",
        description="A clean professional template",
        css_styles="body { font-family: Arial; }",
        html_template=(
            "<html><body><h1>{{user.first_name}} {{user.last_name}}</h1>"
            "<p>{{user.email}} | {{user.phone}}</p>"
            "<h2>{{resume.title}}</h2><p>{{resume.summary}}</p></body></html>"
        ),
        is_active=True,
    )
    db_session.add(template)
    db_session.commit()
    db_session.refresh(template)
    return template


@pytest.fixture
def test_resume(db_session, test_user):
    """Resume without a template."""
    resume = Resume(
        user_id=test_user.id,
        title="Senior Software Engineer",
        summary="Experienced engineer with 5+ years in full-stack development",
    )
    db_session.add(resume)
    db_session.commit()
    db_session.refresh(resume)
    return resume


@pytest.fixture
def populated_resume(db_session, test_resume):
    """test_resume with two entries in each section, inserted out of display order."""
    db_session.add_all([
        WorkExperience(
            resume_id=test_resume.id,
            company_name="StartUp Inc",
            job_title="Software Engineer",
            location="Remote",
            start_date=date(2018, 6, 1),
            end_date=date(2019, 12, 31),
            description="Built internal tools",
            order_index=1,
        ),
        WorkExperience(
            resume_id=test_resume.id,
            company_name="Tech Corp",
            job_title="Senior Software Engineer",
            location="San Francisco, CA",
            start_date=date(2020, 1, 1),
            is_current=True,
            description="Developed web applications",
            order_index=0,
        ),
        Education(
            resume_id=test_resume.id,
            institution_name="Community College",
            degree="Associate",
            start_date=date(2010, 9, 1),
            end_date=date(2012, 6, 1),
            order_index=1,
        ),
        Education(
            resume_id=test_resume.id,
            institution_name="Stanford University",
            degree="Bachelor of Science",
            field_of_study="Computer Science",
            start_date=date(2012, 9, 1),
            end_date=date(2016, 6, 1),
            gpa=3.8,
            order_index=0,
        ),
        Skill(resume_id=test_resume.id, name="Docker", order_index=1),
        Skill(
            resume_id=test_resume.id,
            name="Python",
            category="Languages",
            proficiency_level="expert",
            order_index=0,
        ),
    ])
    db_session.commit()
    return test_resume
