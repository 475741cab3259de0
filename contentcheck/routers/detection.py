from fastapi import APIRouter, Depends, HTTPException
import logging

from contentcheck.config import MIN_WORD_COUNT, USE_MOCK_DATA
from contentcheck.dependencies.provider import get_eden_client
from contentcheck.schemas.detection_schemas import (
    AIDetectionRequest, AIDetectionResponse,
    PlagiarismDetectionRequest, PlagiarismResponse,
    SampleText,
)
from contentcheck.utils.detection import detect_ai_content, detect_plagiarism
from contentcheck.utils.eden_client import EdenAIClient
from contentcheck.utils.errors import DetectionError, NoResponse, QuotaExhausted, RemoteRejected
from contentcheck.utils.file_utils import count_words

router = APIRouter(tags=["detection"])
logger = logging.getLogger(__name__)

TOO_SHORT_MSG = f"Please enter at least {MIN_WORD_COUNT} words for accurate analysis."

SAMPLE_TITLE = "The Impact of Artificial Intelligence on Society"
SAMPLE_TEXT = (
    "Artificial intelligence (AI) is transforming the way we work, learn, and communicate. "
    "From voice assistants and recommendation systems to autonomous vehicles and medical diagnostics, "
    "AI technologies are becoming increasingly integrated into our daily lives. These systems analyze "
    "vast amounts of data to identify patterns, make predictions, and automate tasks that once required "
    "human intelligence.\n\n"
    "While AI offers tremendous benefits in efficiency and innovation, it also raises important questions "
    "about privacy, bias, accountability, and the future of work. As these technologies continue to evolve, "
    "society faces the challenge of harnessing their potential while addressing ethical concerns and "
    "ensuring that AI development benefits humanity as a whole.\n\n"
    "The development of responsible AI requires collaboration among technologists, policymakers, "
    "ethicists, and the broader public to establish guidelines, standards, and regulations that align "
    "with human values and societal goals."
)


def _check_length(text: str):
    if count_words(text) < MIN_WORD_COUNT:
        raise HTTPException(status_code=400, detail=TOO_SHORT_MSG)


def _to_http_error(exc: DetectionError) -> HTTPException:
    if isinstance(exc, QuotaExhausted):
        status = 402
    elif isinstance(exc, RemoteRejected):
        status = exc.status if 400 <= exc.status < 500 else 502
    elif isinstance(exc, NoResponse):
        status = 504
    else:
        # InvalidCredential, LocalFailure
        status = 500
    logger.warning(f"{type(exc).__name__} -> HTTP {status}: {exc.message}")
    return HTTPException(status_code=status, detail=exc.message)


@router.post("/ai-detection", response_model=AIDetectionResponse)
async def ai_detection(
    body: AIDetectionRequest,
    client: EdenAIClient = Depends(get_eden_client),
):
    _check_length(body.text)
    use_mock = USE_MOCK_DATA if body.use_mock is None else body.use_mock
    try:
        return await detect_ai_content(body.text, use_mock=use_mock, client=client)
    except DetectionError as e:
        raise _to_http_error(e)


@router.post("/plagiarism-detection", response_model=PlagiarismResponse)
async def plagiarism_detection(
    body: PlagiarismDetectionRequest,
    client: EdenAIClient = Depends(get_eden_client),
):
    _check_length(body.text)
    use_mock = USE_MOCK_DATA if body.use_mock is None else body.use_mock
    try:
        return await detect_plagiarism(body.text, body.title, use_mock=use_mock, client=client)
    except DetectionError as e:
        raise _to_http_error(e)


@router.get("/plagiarism-detection/sample", response_model=SampleText)
async def plagiarism_sample():
    return {"title": SAMPLE_TITLE, "text": SAMPLE_TEXT}
