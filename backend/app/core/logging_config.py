"""
Logging setup. Every application logger lives under the "resume_builder" namespace
so its level can be tuned independently of uvicorn and SQLAlchemy.
"""
import logging
import sys

from backend.app.core.config import settings

ROOT_LOGGER_NAME = "resume_builder"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the application logger. Safe to call more than once."""
    level_val = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    app_logger.setLevel(level_val)
    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        app_logger.addHandler(handler)
    app_logger.propagate = False

    # SQL statements only when explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.sql_echo else logging.WARNING)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, e.g. get_logger("services.resume")."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
