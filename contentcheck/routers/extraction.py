from fastapi import APIRouter, UploadFile, File, HTTPException
import asyncio
import logging

from contentcheck.config import IDEAL_MAX_WORDS, IDEAL_MIN_WORDS, MAX_UPLOAD_BYTES
from contentcheck.schemas.detection_schemas import ExtractionResponse
from contentcheck.utils.file_utils import (
    Document, ExtractionError,
    allowed_file, count_words, extract_text, resolve_media_type,
)

router = APIRouter(tags=["extraction"])
logger = logging.getLogger(__name__)


@router.post("/extract-text", response_model=ExtractionResponse)
async def extract_uploaded_text(file: UploadFile = File(...)):
    if not file.filename or not allowed_file(file.filename):
        raise HTTPException(
            status_code=400,
            detail="Please upload a PDF or Word document (.pdf, .doc, or .docx)",
        )

    raw = await file.read()
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {MAX_UPLOAD_BYTES} bytes.")

    document = Document(
        content=raw,
        media_type=resolve_media_type(file.content_type, file.filename),
        filename=file.filename,
    )
    logger.info(f"Extracting text from {file.filename} ({document.media_type}, {len(raw)} bytes)")

    try:
        text = await asyncio.to_thread(extract_text, document)
    except ExtractionError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Could not extract text from {file.filename}: {e}",
        )

    word_count = count_words(text)
    return {
        "filename": file.filename,
        "media_type": document.media_type,
        "text": text,
        "word_count": word_count,
        "ideal_length": IDEAL_MIN_WORDS <= word_count <= IDEAL_MAX_WORDS,
    }
