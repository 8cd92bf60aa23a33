from backend.app.models.user import User
from backend.app.models.resume_template import ResumeTemplate
from backend.app.models.resume import Resume
from backend.app.models.work_experience import WorkExperience
from backend.app.models.education import Education
from backend.app.models.skill import Skill
