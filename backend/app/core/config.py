"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: backend/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "ResumeBuilder"
    app_version: str = "1.0.0"
    port: int = 8001

    # Database
    database_url: str = "sqlite:///./resume_builder.db"
    sql_echo: bool = False

    # HTTP
    cors_allow_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, document export) ---

TEMPLATES_DIR: Path = _BASE_DIR / "templates"
DEFAULT_TEMPLATE_FILE: str = "default_resume.html"
DEFAULT_TEMPLATE_NAME: str = "Default Template"

PDF_MEDIA_TYPE: str = "application/pdf"
PDF_DEFAULT_TITLE: str = "Resume"
PDF_LINE_HEIGHT: int = 14
PDF_FONT_SIZE_TITLE: int = 14
PDF_FONT_SIZE_BODY: int = 10
PDF_TITLE_FONT: str = "Helvetica-Bold"
PDF_BODY_FONT: str = "Helvetica"
