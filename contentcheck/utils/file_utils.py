import io
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from docx import Document as DocxDocument
from pdfminer.high_level import extract_pages
from pdfminer.layout import LTTextContainer

from contentcheck.config import ALLOWED_EXTENSIONS

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MEDIA_TYPE = "application/msword"

SUPPORTED_MEDIA_TYPES = {PDF_MEDIA_TYPE, DOCX_MEDIA_TYPE, DOC_MEDIA_TYPE}

EXTENSION_MEDIA_TYPES = {
    "pdf": PDF_MEDIA_TYPE,
    "docx": DOCX_MEDIA_TYPE,
    "doc": DOC_MEDIA_TYPE,
}


class ExtractionError(ValueError):
    """Raised when no plain text can be recovered from an uploaded document."""


@dataclass
class Document:
    content: bytes
    media_type: str
    filename: Optional[str] = None


def allowed_file(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def resolve_media_type(content_type: Optional[str], filename: Optional[str]) -> str:
    """Prefer the declared content type; fall back to the file extension
    when the browser sent nothing useful."""
    if content_type and content_type != "application/octet-stream":
        return content_type.split(";", 1)[0].strip().lower()
    if filename and "." in filename:
        ext = filename.rsplit(".", 1)[1].lower()
        return EXTENSION_MEDIA_TYPES.get(ext, content_type or "")
    return content_type or ""


def count_words(text: str) -> int:
    return len(text.split())


def join_pages(pages: Iterable[str]) -> str:
    """Concatenate page texts in the given order, one newline after each page."""
    return "".join(f"{page}\n" for page in pages)


def _page_text(page) -> str:
    fragments = []
    for element in page:
        if isinstance(element, LTTextContainer):
            fragment = " ".join(element.get_text().split())
            if fragment:
                fragments.append(fragment)
    return " ".join(fragments)


def extract_pdf_pages(content: bytes) -> List[str]:
    # extract_pages yields pages in document order starting at page 1
    return [_page_text(page) for page in extract_pages(io.BytesIO(content))]


def extract_word_text(content: bytes) -> str:
    doc = DocxDocument(io.BytesIO(content))
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                parts.append(cell.text)
    return "\n".join(parts)


def extract_text(document: Document) -> str:
    """
    Extract plain text from an uploaded document.

    PDF pages are joined in page order, one line per page. Word documents
    yield their raw paragraph and table text with formatting dropped.

    Raises:
        ExtractionError: unsupported format, unreadable content, or no text.
    """
    media_type = document.media_type
    if media_type not in SUPPORTED_MEDIA_TYPES:
        raise ExtractionError("unsupported format")
    if not document.content.strip():
        raise ExtractionError("empty result")

    try:
        if media_type == PDF_MEDIA_TYPE:
            pages = extract_pdf_pages(document.content)
            logger.info(f"Extracted {len(pages)} page(s) from {document.filename or 'PDF upload'}")
            text = join_pages(pages)
        else:
            text = extract_word_text(document.content)
    except Exception as e:
        logger.warning(f"Failed to read {document.filename or media_type}: {e}")
        raise ExtractionError("unreadable document") from e

    text = text.strip()
    if not text:
        raise ExtractionError("empty result")

    logger.info(f"Extracted {len(text)} characters ({count_words(text)} words)")
    return text
