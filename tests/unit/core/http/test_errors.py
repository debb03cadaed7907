"""Unit tests for HTTP error payload mapping."""

from __future__ import annotations

from core.exceptions import (
    ConfigurationError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    ValidationError,
)
from core.http.errors import format_provider_error, to_http_exception


def test_validation_error_maps_to_400():
    exc = to_http_exception(ValidationError("Prompt cannot be empty", field="prompt"))

    assert exc.status_code == 400
    assert exc.detail["error"] == "validation_error"
    assert exc.detail["context"]["field"] == "prompt"


def test_not_found_maps_to_404():
    exc = to_http_exception(NotFoundError("Chat abc not found", resource="chat"))

    assert exc.status_code == 404


def test_rate_limit_maps_to_429_with_retry_after_header():
    exc = to_http_exception(RateLimitError("slow down", retry_after=20, provider="gemini"))

    assert exc.status_code == 429
    assert exc.headers == {"Retry-After": "20"}


def test_provider_error_maps_to_502_with_status_and_body():
    exc = to_http_exception(
        ProviderError("API Request failed with status 503: busy", provider="gemini", status_code=503, body="busy")
    )

    assert exc.status_code == 502
    assert exc.detail["context"]["status_code"] == 503
    assert exc.detail["context"]["body"] == "busy"


def test_configuration_error_maps_to_500():
    exc = to_http_exception(ConfigurationError("missing key", key="GOOGLE_API_KEY"))

    assert exc.status_code == 500


def test_provider_error_body_is_truncated():
    payload = format_provider_error(ProviderError("boom", provider="gemini", body="x" * 5000))

    assert len(payload["context"]["body"]) == 2000
