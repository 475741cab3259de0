import asyncio
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import requests

from contentcheck.config import (
    AI_DETECTION_PROVIDER,
    EDEN_AI_BASE_URL,
    EDEN_AI_TIMEOUT,
    PLAGIARISM_PROVIDER,
)
from contentcheck.utils.errors import RemoteRejected, classify_error

logger = logging.getLogger(__name__)


class DetectionCapability(str, Enum):
    AI_DETECTION = "ai-detection"
    PLAGIARISM_DETECTION = "plagiarism-detection"


ENDPOINTS = {
    DetectionCapability.AI_DETECTION: "/v2/text/ai_detection",
    DetectionCapability.PLAGIARISM_DETECTION: "/v2/text/plagia_detection",
}

PROVIDERS = {
    DetectionCapability.AI_DETECTION: AI_DETECTION_PROVIDER,
    DetectionCapability.PLAGIARISM_DETECTION: PLAGIARISM_PROVIDER,
}

SCORE_KEYS = {
    DetectionCapability.AI_DETECTION: "ai_score",
    DetectionCapability.PLAGIARISM_DETECTION: "plagia_score",
}


@dataclass
class DetectionRequest:
    capability: DetectionCapability
    text: str
    title: Optional[str] = None


def validate_api_key(api_key: Optional[str]) -> bool:
    """True when the key is a non-blank string. Only presence and length are logged."""
    is_valid = isinstance(api_key, str) and len(api_key.strip()) > 0
    if is_valid:
        logger.info(f"API key present (length {len(api_key)})")
    else:
        state = "key exists but is blank" if api_key else "key is missing"
        length = len(api_key) if isinstance(api_key, str) else 0
        logger.error(f"API key validation failed: {state} (length {length})")
    return is_valid


def build_payload(request: DetectionRequest) -> Dict:
    if request.capability is DetectionCapability.PLAGIARISM_DETECTION:
        return {
            "providers": PLAGIARISM_PROVIDER,
            "text": request.text,
            "title": request.title or "",
        }
    return {
        "providers": AI_DETECTION_PROVIDER,
        "text": request.text,
        "fallback_providers": "",
    }


def empty_provider_result(capability: DetectionCapability) -> Dict:
    return {SCORE_KEYS[capability]: 0, "items": [], "cost": 0}


def _provider_failure_message(provider: str, record: Dict) -> str:
    error = record.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    return f"Provider '{provider}' failed to process the text"


def normalize_response(capability: DetectionCapability, raw: Dict) -> Dict:
    """
    Make sure the capability's provider key is always present in a result.

    Eden AI answers 200 even when the provider itself failed; such a record
    (status "fail") and any body that is not a JSON object raise RemoteRejected.
    """
    provider = PROVIDERS[capability]
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        logger.error(f"Unexpected response body from provider: {raw!r}")
        raise RemoteRejected(200, f"API Error (200): {json.dumps(raw)}")

    result = dict(raw)
    record = result.get(provider)
    if record is None:
        logger.warning(f"Provider '{provider}' missing from response, using empty result")
        result[provider] = empty_provider_result(capability)
    elif not isinstance(record, dict):
        raise RemoteRejected(200, f"API Error (200): {json.dumps(raw)}")
    elif record.get("status") == "fail":
        message = _provider_failure_message(provider, record)
        logger.error(f"Provider '{provider}' reported failure: {message}")
        raise RemoteRejected(200, message)
    return result


def _make_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({
        "Content-Type": "application/json",
        "Accept": "application/json",
    })
    return s


class EdenAIClient:
    """
    Single-shot client for the Eden AI text endpoints.

    No retries. Any failure is handed to classify_error(), so callers only
    ever see a DetectionError subclass.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = EDEN_AI_BASE_URL,
        timeout: float = EDEN_AI_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or None
        self.session = session or _make_session()

    def endpoint(self, capability: DetectionCapability) -> str:
        return f"{self.base_url}{ENDPOINTS[capability]}"

    def _post(self, url: str, payload: Dict) -> Dict:
        r = self.session.post(
            url,
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )
        r.raise_for_status()
        return r.json()

    async def call(self, capability: DetectionCapability, payload: Dict) -> Dict:
        url = self.endpoint(capability)
        logger.info(f"POST {url} ({len(payload.get('text', ''))} chars)")
        try:
            return await asyncio.to_thread(self._post, url, payload)
        except Exception as e:
            classify_error(e)

    def __repr__(self) -> str:
        return f"EdenAIClient(base_url='{self.base_url}')"
