"""Signed 16-bit little-endian PCM helpers."""

from __future__ import annotations

import base64
import logging
import re
import sys
from array import array
from dataclasses import dataclass
from typing import Iterable

from config import tts as tts_config

logger = logging.getLogger(__name__)

_RATE_PATTERN = re.compile(r"rate=(\d+)")


@dataclass(frozen=True, slots=True)
class AudioBuffer:
    """Mono signed 16-bit samples plus their sample rate (Hz)."""

    samples: tuple[int, ...]
    sample_rate: int = tts_config.DEFAULT_SAMPLE_RATE

    @property
    def duration_seconds(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return len(self.samples) / self.sample_rate

    def __len__(self) -> int:
        return len(self.samples)


def parse_sample_rate(mime_type: str | None, default: int = tts_config.DEFAULT_SAMPLE_RATE) -> int:
    """Extract ``rate=<N>`` from a MIME type such as ``audio/L16;rate=24000``."""

    if not mime_type:
        return default
    match = _RATE_PATTERN.search(mime_type)
    if not match:
        return default
    return int(match.group(1))


def decode_pcm16(raw: bytes) -> tuple[int, ...]:
    """Reinterpret ``raw`` as little-endian int16 samples.

    A trailing odd byte cannot form a sample and is dropped.
    """

    if len(raw) % 2:
        logger.warning("PCM payload has odd length %d; dropping trailing byte", len(raw))
        raw = raw[:-1]
    samples = array("h")
    samples.frombytes(raw)
    if sys.byteorder == "big":
        samples.byteswap()
    return tuple(samples)


def encode_pcm16(samples: Iterable[int]) -> bytes:
    """Return ``samples`` as little-endian int16 bytes."""

    packed = array("h", samples)
    if sys.byteorder == "big":
        packed.byteswap()
    return packed.tobytes()


def pcm16_from_base64(data: str, sample_rate: int = tts_config.DEFAULT_SAMPLE_RATE) -> AudioBuffer:
    """Decode a base64 PCM16 payload into an :class:`AudioBuffer`.

    Raises ``binascii.Error`` (a ``ValueError``) on malformed base64.
    """

    raw = base64.b64decode(data, validate=True)
    return AudioBuffer(samples=decode_pcm16(raw), sample_rate=sample_rate)


__all__ = [
    "AudioBuffer",
    "decode_pcm16",
    "encode_pcm16",
    "parse_sample_rate",
    "pcm16_from_base64",
]
