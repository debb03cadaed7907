"""Retrying JSON-over-HTTPS client for the Gemini REST endpoints.

This is a pure transport primitive: it knows nothing about candidates,
predictions or audio parts. Every generator in ``core.providers`` sends its
request body through :meth:`GeminiHttpClient.invoke`.

Failure tiers:
    - 2xx: JSON body returned
    - 429: retried with backoff, ``RateLimitError`` once retries are exhausted
    - transport failure (connect/read errors, timeouts): retried with backoff,
      ``ProviderTransportError`` once retries are exhausted
    - any other status: ``ProviderError`` immediately, carrying status and body
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from config import http as http_config
from core.config import Settings
from core.exceptions import ProviderError, ProviderTransportError, RateLimitError

from .cancellation import CancellationToken
from .retry import RetryPolicy, retry_async

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], httpx.AsyncClient]

_BODY_PREVIEW_LIMIT = 500


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, (RateLimitError, ProviderTransportError))


def _parse_retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("retry-after")
    if value and value.strip().isdigit():
        return int(value.strip())
    return None


class GeminiHttpClient:
    """POST JSON payloads with retry on 429 and transport failures."""

    provider_name = "gemini"

    def __init__(
        self,
        *,
        api_key: str,
        timeout: float = http_config.DEFAULT_TIMEOUT,
        policy: RetryPolicy | None = None,
        client_factory: ClientFactory | None = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.policy = policy or RetryPolicy()
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=self.timeout))
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "GeminiHttpClient":
        policy = RetryPolicy(
            max_retries=settings.max_retries,
            base_delay=settings.retry_base_delay,
            max_jitter=settings.retry_max_jitter,
        )
        return cls(api_key=settings.api_key, timeout=settings.timeout, policy=policy, **kwargs)

    async def invoke(
        self,
        url: str,
        body: Dict[str, Any],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """POST ``body`` to ``url`` and return the parsed JSON response."""

        async def _attempt(attempt: int) -> Dict[str, Any]:
            return await self._post_once(url, body, attempt=attempt)

        return await retry_async(
            _attempt,
            policy=self.policy,
            is_retryable=_is_retryable,
            cancellation=cancellation,
            sleep=self._sleep,
            description=f"POST {_endpoint_label(url)}",
        )

    async def _post_once(self, url: str, body: Dict[str, Any], *, attempt: int) -> Dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            http_config.API_KEY_HEADER: self.api_key,
        }

        logger.debug("POST %s (attempt %d)", _endpoint_label(url), attempt + 1)
        try:
            async with self._client_factory() as client:
                response = await client.post(url, json=body, headers=headers)
        except httpx.TransportError as exc:
            raise ProviderTransportError(
                f"Gemini request failed: {exc.__class__.__name__}: {exc}",
                provider=self.provider_name,
                original_error=exc,
            ) from exc

        if response.status_code == 429:
            raise RateLimitError(
                "Gemini rate limit exceeded",
                retry_after=_parse_retry_after(response),
                provider=self.provider_name,
                body=response.text,
            )

        if not response.is_success:
            error_text = response.text
            logger.error(
                "Gemini API error: %s - %s",
                response.status_code,
                error_text[:_BODY_PREVIEW_LIMIT],
            )
            raise ProviderError(
                f"API Request failed with status {response.status_code}: {error_text}",
                provider=self.provider_name,
                status_code=response.status_code,
                body=error_text,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError(
                "Gemini returned a non-JSON response body",
                provider=self.provider_name,
                original_error=exc,
                status_code=response.status_code,
                body=response.text,
            ) from exc

        if not isinstance(payload, dict):
            raise ProviderError(
                "Gemini returned an unexpected JSON document",
                provider=self.provider_name,
                status_code=response.status_code,
                body=response.text,
            )
        return payload


def _endpoint_label(url: str) -> str:
    """Return the ``models/<model>:<method>`` tail of a Gemini URL."""

    marker = "/models/"
    index = url.find(marker)
    return url[index + 1:] if index >= 0 else url


__all__ = ["ClientFactory", "GeminiHttpClient"]
