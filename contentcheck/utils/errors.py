"""
Provider failure taxonomy.

Eden AI providers disagree on the shape of their error bodies, so every
failure of a provider call goes through classify_error() and comes out as
exactly one DetectionError subclass with a message that can be shown to
the user as-is.
"""
import json
import logging
from typing import Any, NoReturn, Optional

import requests

logger = logging.getLogger(__name__)

QUOTA_EXHAUSTED_MSG = (
    "API credits exhausted. The demo is currently unavailable "
    "due to reaching API usage limits."
)
INVALID_CREDENTIAL_MSG = "Invalid API key. Please check your EDEN_AI_API_KEY environment variable."
NO_RESPONSE_MSG = "No response received from server. Please check your network connection."

# Checked in this order; the first truthy key wins
ERROR_BODY_KEYS = ("message", "error", "detail")
NO_CREDITS_KEY = "No more credits"


class DetectionError(Exception):
    """Base class for every error raised by a detection call."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCredential(DetectionError):
    def __init__(self, message: str = INVALID_CREDENTIAL_MSG):
        super().__init__(message)


class QuotaExhausted(DetectionError):
    def __init__(self, message: str = QUOTA_EXHAUSTED_MSG):
        super().__init__(message)


class RemoteRejected(DetectionError):
    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


class NoResponse(DetectionError):
    def __init__(self, message: str = NO_RESPONSE_MSG):
        super().__init__(message)


class LocalFailure(DetectionError):
    pass


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _as_message(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def _stringify_body(body: Any) -> str:
    if body is None or body == "":
        return "Unknown error"
    return json.dumps(body)


def classify_error(exc: Exception) -> NoReturn:
    """
    Translate a failed provider call into a DetectionError and raise it.

    Order matters:
      1. HTTP 402                         -> QuotaExhausted
      2. JSON object body with message / error / detail / "No more credits"
                                          -> RemoteRejected (or QuotaExhausted)
      3. any other response               -> RemoteRejected with the raw body
      4. request sent, nothing came back  -> NoResponse
      5. anything else                    -> LocalFailure
    """
    response: Optional[requests.Response] = getattr(exc, "response", None)

    if isinstance(exc, requests.RequestException) and response is not None:
        status = response.status_code
        body = _response_body(response)
        logger.error(f"Provider returned HTTP {status}: {body!r}")

        if status == 402:
            raise QuotaExhausted() from exc

        if isinstance(body, dict):
            for key in ERROR_BODY_KEYS:
                if body.get(key):
                    raise RemoteRejected(status, _as_message(body[key])) from exc
            if body.get(NO_CREDITS_KEY):
                raise QuotaExhausted() from exc

        raise RemoteRejected(status, f"API Error ({status}): {_stringify_body(body)}") from exc

    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        logger.error(f"No response from provider: {exc}")
        raise NoResponse() from exc

    logger.error(f"Provider request failed before a response: {exc}")
    raise LocalFailure(f"Error: {str(exc) or 'Unknown error occurred'}") from exc
