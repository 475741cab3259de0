# contentcheck/dependencies/provider.py

from contentcheck.config import EDEN_AI_API_KEY, EDEN_AI_BASE_URL, EDEN_AI_TIMEOUT
from contentcheck.utils.eden_client import EdenAIClient


def get_eden_client() -> EdenAIClient:
    # Overridden in tests through app.dependency_overrides
    return EdenAIClient(EDEN_AI_API_KEY, base_url=EDEN_AI_BASE_URL, timeout=EDEN_AI_TIMEOUT)
