"""
FastAPI application entry point
"""
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api.v1.documents.routes import router as documents_router
from backend.app.api.v1.educations.routes import router as educations_router
from backend.app.api.v1.resumes.routes import router as resumes_router
from backend.app.api.v1.skills.routes import router as skills_router
from backend.app.api.v1.templates.routes import router as templates_router
from backend.app.api.v1.users.routes import router as users_router
from backend.app.api.v1.work_experiences.routes import router as work_experiences_router
from backend.app.core.config import settings
from backend.app.core.exceptions import ResumeBuilderError
from backend.app.core.logging_config import get_logger, setup_logging
from backend.app.db.base import Base
from backend.app.db.session import engine

# Import models so they register with Base.metadata
import backend.app.models  # noqa: F401

setup_logging()
logger = get_logger("main")

# Create database tables
try:
    Base.metadata.create_all(bind=engine)
except Exception as e:
    logger.error("Database error: %s", e)

# Initialize FastAPI app
app = FastAPI(
    title="Resume Builder API",
    description="Resume builder: profiles, resumes, sections, templates and PDF export",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResumeBuilderError)
async def resume_builder_error_handler(request: Request, exc: ResumeBuilderError):
    """Translate domain errors into JSON responses with their status code."""
    logger.warning(
        "Request failed %s %s status=%s error=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include routers
app.include_router(users_router, prefix="/api")
app.include_router(resumes_router, prefix="/api")
app.include_router(work_experiences_router, prefix="/api")
app.include_router(educations_router, prefix="/api")
app.include_router(skills_router, prefix="/api")
app.include_router(templates_router, prefix="/api")
app.include_router(documents_router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": "Resume Builder API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "ok", "timestamp": datetime.utcnow().isoformat() + "Z"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
