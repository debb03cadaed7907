"""Minimal environment variable loading and settings dataclass.

Domain-specific defaults live in config/ subdirectories:
- Transport/retry: config.http
- Text + study generation, modes and personas: config.text
- Image: config.image
- TTS: config.tts

This module only assembles those defaults (plus environment overrides) into a
frozen :class:`Settings` object. Providers and the HTTP client receive it
explicitly at construction time instead of reading module globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import api_keys
from config import http as http_config
from config import image as image_config
from config import text as text_config
from config import tts as tts_config
from config.environment import ENVIRONMENT, IS_DEVELOPMENT, IS_PRODUCTION, IS_TEST, get_node_env
from core.utils.env import get_env, get_env_float, get_env_int


@dataclass(frozen=True)
class Settings:
    """Dependency injection wrapper for Gemini access settings."""

    api_key: str = ""
    base_url: str = http_config.DEFAULT_BASE_URL
    text_model: str = text_config.DEFAULT_MODEL
    tts_model: str = tts_config.DEFAULT_MODEL
    image_model: str = image_config.DEFAULT_MODEL
    timeout: float = http_config.DEFAULT_TIMEOUT
    max_retries: int = http_config.MAX_RETRIES
    retry_base_delay: float = http_config.RETRY_BASE_DELAY
    retry_max_jitter: float = http_config.RETRY_MAX_JITTER
    environment: str = ENVIRONMENT

    def endpoint(self, model: str, method: str) -> str:
        """Return the REST endpoint for ``model`` and ``method`` (e.g. ``predict``)."""

        return f"{self.base_url.rstrip('/')}/models/{model}:{method}"

    @property
    def text_url(self) -> str:
        return self.endpoint(self.text_model, "generateContent")

    @property
    def tts_url(self) -> str:
        return self.endpoint(self.tts_model, "generateContent")

    @property
    def image_url(self) -> str:
        return self.endpoint(self.image_model, "predict")


def load_settings() -> Settings:
    """Build :class:`Settings` from the current environment."""

    return Settings(
        api_key=api_keys.load_api_keys()["google"],
        base_url=get_env("GEMINI_API_BASE_URL", default=http_config.DEFAULT_BASE_URL)
        or http_config.DEFAULT_BASE_URL,
        text_model=get_env("GEMINI_TEXT_MODEL", default=text_config.DEFAULT_MODEL)
        or text_config.DEFAULT_MODEL,
        tts_model=get_env("GEMINI_TTS_MODEL", default=tts_config.DEFAULT_MODEL)
        or tts_config.DEFAULT_MODEL,
        image_model=get_env("GEMINI_IMAGE_MODEL", default=image_config.DEFAULT_MODEL)
        or image_config.DEFAULT_MODEL,
        timeout=get_env_float("GEMINI_HTTP_TIMEOUT", http_config.DEFAULT_TIMEOUT),
        max_retries=get_env_int("GEMINI_MAX_RETRIES", http_config.MAX_RETRIES),
        retry_base_delay=get_env_float("GEMINI_RETRY_BASE_DELAY", http_config.RETRY_BASE_DELAY),
        retry_max_jitter=get_env_float("GEMINI_RETRY_MAX_JITTER", http_config.RETRY_MAX_JITTER),
        environment=get_node_env(),
    )


__all__ = [
    "ENVIRONMENT",
    "IS_DEVELOPMENT",
    "IS_PRODUCTION",
    "IS_TEST",
    "Settings",
    "load_settings",
]
