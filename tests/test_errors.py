"""
Tests for provider failure classification.
"""

import pytest
import requests

from contentcheck.utils.errors import (
    NO_RESPONSE_MSG,
    QUOTA_EXHAUSTED_MSG,
    LocalFailure,
    NoResponse,
    QuotaExhausted,
    RemoteRejected,
    classify_error,
)


class TestResponseReceived:

    @pytest.mark.parametrize("body", [
        None,
        {"message": "ignored"},
        {"error": "ignored"},
        "Payment Required",
    ])
    def test_402_is_quota_exhausted_regardless_of_body(self, http_error, body):
        with pytest.raises(QuotaExhausted) as exc_info:
            classify_error(http_error(402, body))
        assert str(exc_info.value) == QUOTA_EXHAUSTED_MSG

    @pytest.mark.parametrize("body, expected", [
        ({"message": "X"}, "X"),
        ({"error": "Y"}, "Y"),
        ({"detail": "Z"}, "Z"),
        ({"message": "X", "error": "Y", "detail": "Z"}, "X"),
        ({"error": "Y", "detail": "Z"}, "Y"),
        ({"message": "X", "detail": "Z"}, "X"),
        ({"detail": "Z", "No more credits": True}, "Z"),
        ({"message": "", "error": "Y"}, "Y"),
    ])
    def test_error_key_priority(self, http_error, body, expected):
        with pytest.raises(RemoteRejected) as exc_info:
            classify_error(http_error(400, body))
        assert exc_info.value.message == expected
        assert exc_info.value.status == 400

    def test_no_more_credits_key_maps_to_quota_message(self, http_error):
        with pytest.raises(QuotaExhausted) as exc_info:
            classify_error(http_error(403, {"No more credits": "please top up"}))
        assert str(exc_info.value) == QUOTA_EXHAUSTED_MSG

    def test_structured_error_value_is_json_encoded(self, http_error):
        with pytest.raises(RemoteRejected) as exc_info:
            classify_error(http_error(400, {"error": {"type": "validation", "code": 7}}))
        assert exc_info.value.message == '{"type": "validation", "code": 7}'

    def test_unrecognized_body_is_stringified(self, http_error):
        with pytest.raises(RemoteRejected) as exc_info:
            classify_error(http_error(500, {"foo": "bar"}))
        assert exc_info.value.status == 500
        assert exc_info.value.message == 'API Error (500): {"foo": "bar"}'

    def test_plain_text_body(self, http_error):
        with pytest.raises(RemoteRejected) as exc_info:
            classify_error(http_error(502, "Bad gateway"))
        assert exc_info.value.message == 'API Error (502): "Bad gateway"'

    def test_empty_body(self, http_error):
        with pytest.raises(RemoteRejected) as exc_info:
            classify_error(http_error(503))
        assert exc_info.value.message == "API Error (503): Unknown error"


class TestNoResponse:

    @pytest.mark.parametrize("exc", [
        requests.ConnectionError("connection refused"),
        requests.Timeout("read timed out"),
        requests.exceptions.ConnectTimeout("connect timed out"),
    ])
    def test_transport_failures(self, exc):
        with pytest.raises(NoResponse) as exc_info:
            classify_error(exc)
        assert str(exc_info.value) == NO_RESPONSE_MSG
        assert exc_info.value.__cause__ is exc


class TestLocalFailure:

    def test_local_exception(self):
        with pytest.raises(LocalFailure) as exc_info:
            classify_error(TypeError("Object of type bytes is not JSON serializable"))
        assert exc_info.value.message == "Error: Object of type bytes is not JSON serializable"

    def test_invalid_url(self):
        with pytest.raises(LocalFailure):
            classify_error(requests.exceptions.MissingSchema("No scheme supplied"))

    def test_exception_without_message(self):
        with pytest.raises(LocalFailure) as exc_info:
            classify_error(RuntimeError())
        assert exc_info.value.message == "Error: Unknown error occurred"
