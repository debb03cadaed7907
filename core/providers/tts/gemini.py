"""Gemini text-to-speech provider returning WAV clips."""

from __future__ import annotations

import binascii
import logging
import struct
import wave
from typing import Any, Dict, Optional

from config import tts as tts_config
from core.audio import encode_wav, parse_sample_rate, pcm16_from_base64
from core.config import Settings
from core.exceptions import ValidationError
from core.http.cancellation import CancellationToken
from core.http.client import GeminiHttpClient
from core.providers.text.gemini.requests import build_contents
from core.providers.text.gemini.responses import extract_inline_data
from core.providers.tts_base import BaseTTSProvider, SpeechAudio

logger = logging.getLogger(__name__)


def build_speech_payload(text: str, voice: str, *, model: str | None = None) -> Dict[str, Any]:
    """Return the body requesting AUDIO output spoken by ``voice``."""

    payload: Dict[str, Any] = {
        "contents": build_contents(tts_config.SPEECH_PROMPT_TEMPLATE.format(text=text)),
        "generationConfig": {
            "responseModalities": ["AUDIO"],
            "speechConfig": {
                "voiceConfig": {
                    "prebuiltVoiceConfig": {"voiceName": voice},
                },
            },
        },
    }
    if model:
        payload["model"] = model
    return payload


class GeminiTTSProvider(BaseTTSProvider):
    """Synthesize speech via ``models/<tts-model>:generateContent``.

    The API answers with base64 PCM16 (``audio/L16;rate=<N>``); the provider
    wraps it in a WAV container. Missing or malformed audio yields ``None``.
    """

    provider_name = "gemini"

    def __init__(
        self,
        client: GeminiHttpClient,
        *,
        url: str,
        model: str = tts_config.DEFAULT_MODEL,
        default_voice: str = tts_config.DEFAULT_VOICE,
    ) -> None:
        self.client = client
        self.url = url
        self.model = model
        self.default_voice = default_voice

    @classmethod
    def from_settings(cls, settings: Settings, client: GeminiHttpClient) -> "GeminiTTSProvider":
        return cls(client, url=settings.tts_url, model=settings.tts_model)

    async def synthesize(
        self,
        text: str,
        voice: str | None = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[SpeechAudio]:
        if not text or not text.strip():
            raise ValidationError("Text cannot be empty", field="text")

        voice_name = voice or self.default_voice
        logger.info("Gemini TTS request (model=%s, voice=%s, chars=%d)", self.model, voice_name, len(text))

        result = await self.client.invoke(
            self.url,
            build_speech_payload(text, voice_name, model=self.model),
            cancellation=cancellation,
        )

        data, mime_type = extract_inline_data(result)
        if not data or not mime_type or not mime_type.startswith(tts_config.PCM_MIME_PREFIX):
            logger.warning("Gemini TTS returned no PCM audio (mime_type=%s)", mime_type)
            return None

        sample_rate = parse_sample_rate(mime_type)
        if not 0 < sample_rate <= tts_config.MAX_SAMPLE_RATE:
            logger.warning("Gemini TTS reported unusable sample rate %d", sample_rate)
            return None

        try:
            audio = pcm16_from_base64(data, sample_rate)
        except (binascii.Error, ValueError) as exc:
            logger.warning("Gemini TTS audio payload could not be decoded: %s", exc)
            return None

        logger.debug(
            "Gemini TTS decoded %d samples at %d Hz (%.2fs)",
            len(audio),
            audio.sample_rate,
            audio.duration_seconds,
        )
        try:
            wav_bytes = encode_wav(audio.samples, audio.sample_rate)
        except (wave.Error, struct.error) as exc:
            logger.warning("Gemini TTS audio could not be wrapped as WAV: %s", exc)
            return None

        return SpeechAudio(
            data=wav_bytes,
            sample_rate=audio.sample_rate,
            voice=voice_name,
            model=self.model,
        )


__all__ = ["GeminiTTSProvider", "build_speech_payload"]
