"""
Document exporter - turns a resume aggregate into downloadable markup / PDF.

Markup selection: the resume's template html if it has one, otherwise the built-in
Jinja2 default (templates/default_resume.html). Stored template markup is never
evaluated as Jinja2; it only gets literal {{user.*}} / {{resume.*}} placeholder
substitution. The PDF is laid out from the text of the substituted markup.
"""
import html
import re
from datetime import date
from typing import NamedTuple

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader
from sqlalchemy.orm import Session

from backend.app.core.config import DEFAULT_TEMPLATE_FILE, DEFAULT_TEMPLATE_NAME, PDF_MEDIA_TYPE, TEMPLATES_DIR
from backend.app.core.exceptions import NotFoundError
from backend.app.core.logging_config import get_logger
from backend.app.schemas.resume import FullResume
from backend.app.schemas.skill import SkillResponse
from backend.app.services.pdf_generator import text_to_pdf_bytes
from backend.app.services.resume_aggregator import get_full_resume

logger = get_logger("services.document")

USER_PLACEHOLDER_FIELDS = ("first_name", "last_name", "email", "phone", "address", "city", "state", "zip_code")
RESUME_PLACEHOLDER_FIELDS = ("title", "summary")

_env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), autoescape=True)


class GeneratedDocument(NamedTuple):
    filename: str
    content: bytes
    media_type: str


def _format_month(value: date | None) -> str:
    """'Jan 2020' style; None renders as 'Present'."""
    if value is None:
        return "Present"
    return value.strftime("%b %Y")


_env.filters["month"] = _format_month


def _group_skills(skills: list[SkillResponse]) -> dict[str, list[SkillResponse]]:
    """Skills grouped by category, keeping display order; uncategorised go under 'Other'."""
    groups: dict[str, list[SkillResponse]] = {}
    for skill in skills:
        groups.setdefault(skill.category or "Other", []).append(skill)
    return groups


def placeholder_values(full: FullResume) -> dict[str, str]:
    """Literal placeholder -> HTML-escaped value. Missing values become empty strings."""
    values = {}
    user = full.user
    for field in USER_PLACEHOLDER_FIELDS:
        raw = getattr(user, field, None) if user else None
        values["{{user.%s}}" % field] = html.escape(raw or "")
    for field in RESUME_PLACEHOLDER_FIELDS:
        values["{{resume.%s}}" % field] = html.escape(getattr(full, field) or "")
    return values


def substitute_placeholders(markup: str, full: FullResume) -> str:
    for placeholder, value in placeholder_values(full).items():
        markup = markup.replace(placeholder, value)
    return markup


def render_default_markup(full: FullResume) -> str:
    template = _env.get_template(DEFAULT_TEMPLATE_FILE)
    return template.render(
        user=full.user,
        resume=full,
        work_experiences=full.work_experiences,
        education=full.education,
        skill_groups=_group_skills(full.skills),
    )


def render_markup(full: FullResume) -> str:
    if full.template is not None and full.template.html_template.strip():
        return substitute_placeholders(full.template.html_template, full)
    return render_default_markup(full)


def markup_to_text(markup: str) -> str:
    """Visible text of the markup, one non-empty line per block, whitespace collapsed."""
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup(["style", "script", "head"]):
        tag.decompose()
    lines = (" ".join(line.split()) for line in soup.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)


def document_filename(title: str | None) -> str:
    """Resume title with whitespace runs as '_', restricted to a header-safe charset."""
    name = re.sub(r"\s+", "_", (title or "").strip())
    name = re.sub(r"[^A-Za-z0-9_.-]", "", name)
    return f"{name or 'Resume'}.pdf"


def _load(db: Session, resume_id: int) -> FullResume:
    full = get_full_resume(db, resume_id)
    if full is None:
        logger.warning("Document export - resume not found resume_id=%s", resume_id)
        raise NotFoundError("Resume", resume_id)
    return full


def render_document_html(db: Session, resume_id: int) -> str:
    """Substituted markup for the preview pane. Raises NotFoundError for unknown resumes."""
    return render_markup(_load(db, resume_id))


def generate_document(db: Session, resume_id: int) -> GeneratedDocument:
    """Render the resume to PDF bytes. Raises NotFoundError for unknown resumes."""
    full = _load(db, resume_id)
    text = markup_to_text(render_markup(full))
    author = " ".join(filter(None, [full.user.first_name, full.user.last_name])) if full.user else None
    content = text_to_pdf_bytes(text, title=full.title, author=author, draw_title=False)
    logger.info(
        "Document generated resume_id=%s template=%s bytes=%d",
        resume_id,
        full.template.name if full.template else DEFAULT_TEMPLATE_NAME,
        len(content),
    )
    return GeneratedDocument(document_filename(full.title), content, PDF_MEDIA_TYPE)
