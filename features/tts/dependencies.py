"""Dependency helpers for the TTS feature."""

from __future__ import annotations

from core.clients import get_gemini_clients

from .service import TTSService


def get_tts_service() -> TTSService:
    """Return a :class:`TTSService` wired to the shared Gemini TTS provider."""

    return TTSService(provider=get_gemini_clients().tts)


__all__ = ["get_tts_service"]
