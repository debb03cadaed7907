"""HTTP transport primitives for the Gemini endpoints."""

from .cancellation import CancellationToken
from .client import GeminiHttpClient
from .retry import RetryPolicy, retry_async

__all__ = ["CancellationToken", "GeminiHttpClient", "RetryPolicy", "retry_async"]
