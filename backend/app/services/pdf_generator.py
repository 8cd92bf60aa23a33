"""
Generate PDF from plain text. Used by the document exporter.
"""
from io import BytesIO

from reportlab.lib.pagesizes import letter
from reportlab.lib.units import inch
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from backend.app.core.config import (
    PDF_BODY_FONT,
    PDF_DEFAULT_TITLE,
    PDF_FONT_SIZE_BODY,
    PDF_FONT_SIZE_TITLE,
    PDF_LINE_HEIGHT,
    PDF_TITLE_FONT,
)
from backend.app.core.logging_config import get_logger

logger = get_logger("services.pdf_generator")


def wrap_text(text: str, max_width: float) -> list[str]:
    """
    Split text into lines that fit max_width points in the body font.
    Line breaks are kept; blank lines stay as empty strings.
    """
    lines = []
    for line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        lines.extend(simpleSplit(line, PDF_BODY_FONT, PDF_FONT_SIZE_BODY, max_width) or [""])
    return lines


def text_to_pdf_bytes(
    text: str,
    title: str | None = None,
    author: str | None = None,
    draw_title: bool = True,
) -> bytes:
    """
    Generate a PDF from plain text. Preserves line breaks, wraps long lines to the
    printable width, starts a new page when the current one is full.
    The title is always set as document metadata; draw_title also prints it as a heading.
    Returns PDF file content as bytes.
    """
    title_val = title or PDF_DEFAULT_TITLE
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    c.setTitle(title_val)
    if author:
        c.setAuthor(author)
    width, height = letter
    margin = inch
    x, y = margin, height - margin
    if draw_title:
        c.setFont(PDF_TITLE_FONT, PDF_FONT_SIZE_TITLE)
        c.drawString(x, y, title_val[:80])
        y -= PDF_LINE_HEIGHT * 1.5
    c.setFont(PDF_BODY_FONT, PDF_FONT_SIZE_BODY)
    body = (text or "").strip()
    if body:
        for chunk in wrap_text(body, width - 2 * margin):
            if y < margin + PDF_LINE_HEIGHT:
                c.showPage()
                c.setFont(PDF_BODY_FONT, PDF_FONT_SIZE_BODY)
                y = height - margin
            c.drawString(x, y, chunk)
            y -= PDF_LINE_HEIGHT
    else:
        c.drawString(x, y, "(No content)")
    c.save()
    pdf = buffer.getvalue()
    logger.debug("PDF rendered title=%s bytes=%d", title_val[:40], len(pdf))
    return pdf
