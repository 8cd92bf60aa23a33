"""
Document API - PDF download and HTML preview of a resume
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.services.document_service import generate_document, render_document_html

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("/{resume_id}/pdf")
def download_pdf(resume_id: int, db: Session = Depends(get_db)):
    """Rendered resume as a PDF attachment. 404 when the resume does not exist."""
    document = generate_document(db, resume_id)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )


@router.get("/{resume_id}/preview", response_class=HTMLResponse)
def preview_html(resume_id: int, db: Session = Depends(get_db)):
    """Substituted template markup the PDF is produced from."""
    return HTMLResponse(render_document_html(db, resume_id))
