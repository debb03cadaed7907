"""High-level orchestration for text-to-speech operations."""

from __future__ import annotations

import logging
from typing import Optional

from config import tts as tts_config
from core.exceptions import ValidationError
from core.http.cancellation import CancellationToken
from core.providers.tts_base import BaseTTSProvider, SpeechAudio
from features.chat.schemas import ChatSettings

logger = logging.getLogger(__name__)


def resolve_voice(voice: str | None) -> str:
    """Return a prebuilt voice name, defaulting when none is given."""

    if not voice:
        return tts_config.DEFAULT_VOICE
    for candidate in tts_config.AVAILABLE_VOICES:
        if candidate.lower() == voice.strip().lower():
            return candidate
    raise ValidationError(f"Unknown voice: {voice}", field="voice")


class TTSService:
    """Validate input and hand it to the TTS provider."""

    def __init__(self, *, provider: BaseTTSProvider) -> None:
        self._provider = provider

    async def synthesize(
        self,
        text: str,
        voice: str | None = None,
        *,
        settings: ChatSettings | None = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[SpeechAudio]:
        """Speak ``text``; an explicit ``voice`` wins over the user's ``settings.voice``."""

        if not text or not text.strip():
            raise ValidationError("Text cannot be empty", field="text")

        voice_name = resolve_voice(voice or (settings.voice if settings else None))
        audio = await self._provider.synthesize(text, voice_name, cancellation=cancellation)
        if audio is None:
            logger.warning("TTS produced no audio (voice=%s, chars=%d)", voice_name, len(text))
        else:
            logger.info("TTS produced %.2fs of audio (voice=%s)", audio.duration_seconds, voice_name)
        return audio


__all__ = ["TTSService", "resolve_voice"]
