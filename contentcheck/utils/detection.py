"""
Entry points used by the routers.

Each call either returns a normalized Eden AI result or raises one
DetectionError. With use_mock the result is synthetic and no credential
or network access is needed.
"""
import logging
import random
from typing import Dict, Optional

from contentcheck.config import EDEN_AI_API_KEY
from contentcheck.utils.eden_client import (
    DetectionCapability,
    DetectionRequest,
    EdenAIClient,
    build_payload,
    normalize_response,
    validate_api_key,
)
from contentcheck.utils.errors import InvalidCredential
from contentcheck.utils.mock_data import mock_result

logger = logging.getLogger(__name__)


async def _detect(
    request: DetectionRequest,
    use_mock: bool,
    client: Optional[EdenAIClient],
    rng: Optional[random.Random],
) -> Dict:
    if use_mock:
        logger.info(f"Using mock {request.capability.value} data")
        return mock_result(request.capability, request.text, rng)

    api_key = client.api_key if client is not None else EDEN_AI_API_KEY
    if not validate_api_key(api_key):
        raise InvalidCredential()

    client = client or EdenAIClient(api_key)
    raw = await client.call(request.capability, build_payload(request))
    return normalize_response(request.capability, raw)


async def detect_ai_content(
    text: str,
    use_mock: bool = False,
    client: Optional[EdenAIClient] = None,
    rng: Optional[random.Random] = None,
) -> Dict:
    request = DetectionRequest(DetectionCapability.AI_DETECTION, text)
    return await _detect(request, use_mock, client, rng)


async def detect_plagiarism(
    text: str,
    title: str = "",
    use_mock: bool = False,
    client: Optional[EdenAIClient] = None,
    rng: Optional[random.Random] = None,
) -> Dict:
    request = DetectionRequest(DetectionCapability.PLAGIARISM_DETECTION, text, title)
    return await _detect(request, use_mock, client, rng)
