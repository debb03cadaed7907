"""Transport defaults shared by every Gemini endpoint."""

from __future__ import annotations

import os

DEFAULT_BASE_URL = os.getenv(
    "GEMINI_API_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
)
API_KEY_HEADER = "x-goog-api-key"

# Request timeout in seconds; TTS responses for long texts are slow
DEFAULT_TIMEOUT = 60.0

# Backoff: delay(attempt) = 2**attempt * RETRY_BASE_DELAY + uniform(0, RETRY_MAX_JITTER)
MAX_RETRIES = 3
RETRY_BASE_DELAY = 1.0
RETRY_MAX_JITTER = 1.0

__all__ = [
    "DEFAULT_BASE_URL",
    "API_KEY_HEADER",
    "DEFAULT_TIMEOUT",
    "MAX_RETRIES",
    "RETRY_BASE_DELAY",
    "RETRY_MAX_JITTER",
]
