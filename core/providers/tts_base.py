"""Shared types and base class for text-to-speech providers."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.audio.wav import WAV_HEADER_SIZE
from core.http.cancellation import CancellationToken


@dataclass(frozen=True, slots=True)
class SpeechAudio:
    """Playable WAV clip returned by providers.

    The caller owns the clip and any file written through :meth:`save`.
    """

    data: bytes
    sample_rate: int
    voice: str
    model: str
    mime_type: str = "audio/wav"

    @property
    def duration_seconds(self) -> float:
        # 2 bytes per mono sample
        return max(len(self.data) - WAV_HEADER_SIZE, 0) / 2 / self.sample_rate if self.sample_rate else 0.0

    def as_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{base64.b64encode(self.data).decode('ascii')}"

    def save(self, path: str | Path) -> Path:
        target = Path(path)
        target.write_bytes(self.data)
        return target


class BaseTTSProvider(ABC):
    """Base interface for text-to-speech providers."""

    provider_name: str = "tts"

    @abstractmethod
    async def synthesize(
        self,
        text: str,
        voice: str | None = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[SpeechAudio]:
        """Return a playable clip, or ``None`` when no usable audio came back."""


__all__ = ["BaseTTSProvider", "SpeechAudio"]
