"""Assemble the Gemini HTTP client and providers from settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from core.config import Settings, load_settings
from core.exceptions import ConfigurationError
from core.http.client import GeminiHttpClient
from core.providers.image.gemini import GeminiImageProvider
from core.providers.text.gemini import GeminiTextProvider
from core.providers.tts.gemini import GeminiTTSProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeminiClients:
    """One shared transport plus the three providers built on it."""

    settings: Settings
    http: GeminiHttpClient
    text: GeminiTextProvider
    image: GeminiImageProvider
    tts: GeminiTTSProvider


def _mask(value: str) -> str:
    return f"{value[:6]}...{value[-4:]}" if len(value) > 12 else "***"


def build_gemini_clients(settings: Settings | None = None, **http_kwargs: Any) -> GeminiClients:
    """Build the providers; ``http_kwargs`` are forwarded to :class:`GeminiHttpClient`."""

    resolved = settings or load_settings()
    if not resolved.api_key:
        raise ConfigurationError("GOOGLE_API_KEY is not configured", key="GOOGLE_API_KEY")

    http = GeminiHttpClient.from_settings(resolved, **http_kwargs)
    logger.info(
        "Gemini clients initialised (key=%s, text=%s, tts=%s, image=%s, max_retries=%d)",
        _mask(resolved.api_key),
        resolved.text_model,
        resolved.tts_model,
        resolved.image_model,
        resolved.max_retries,
    )
    return GeminiClients(
        settings=resolved,
        http=http,
        text=GeminiTextProvider.from_settings(resolved, http),
        image=GeminiImageProvider.from_settings(resolved, http),
        tts=GeminiTTSProvider.from_settings(resolved, http),
    )


@lru_cache(maxsize=1)
def get_gemini_clients() -> GeminiClients:
    """Return the process-wide clients built from the environment."""

    return build_gemini_clients()


__all__ = ["GeminiClients", "build_gemini_clients", "get_gemini_clients"]
