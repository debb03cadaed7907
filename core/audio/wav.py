"""Minimal RIFF/WAVE container for mono PCM16 audio.

Layout written by :func:`encode_wav` (all integers little-endian)::

    0   "RIFF"            12  "fmt "          36  "data"
    4   36 + data size    16  16 (fmt size)   40  data size
    8   "WAVE"            20  1 (PCM)         44  samples...
                          22  1 (channels)
                          24  sample rate
                          28  byte rate
                          32  block align (2)
                          34  bits per sample (16)
"""

from __future__ import annotations

import io
import wave
from typing import Sequence

from config import tts as tts_config

from .pcm import AudioBuffer, decode_pcm16, encode_pcm16

WAV_HEADER_SIZE = 44


def encode_wav(samples: Sequence[int], sample_rate: int) -> bytes:
    """Wrap mono int16 ``samples`` in a 44-byte-header WAV container."""

    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_file:
        wav_file.setnchannels(tts_config.NUM_CHANNELS)
        wav_file.setsampwidth(tts_config.SAMPLE_WIDTH)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(encode_pcm16(samples))
    return buffer.getvalue()


def decode_wav(data: bytes) -> AudioBuffer:
    """Read a mono PCM16 WAV container back into an :class:`AudioBuffer`."""

    with wave.open(io.BytesIO(data), "rb") as wav_file:
        if wav_file.getnchannels() != tts_config.NUM_CHANNELS:
            raise ValueError(f"Expected mono audio, got {wav_file.getnchannels()} channels")
        if wav_file.getsampwidth() != tts_config.SAMPLE_WIDTH:
            raise ValueError(f"Expected 16-bit samples, got {wav_file.getsampwidth() * 8}-bit")
        sample_rate = wav_file.getframerate()
        frames = wav_file.readframes(wav_file.getnframes())
    return AudioBuffer(samples=decode_pcm16(frames), sample_rate=sample_rate)


__all__ = ["WAV_HEADER_SIZE", "decode_wav", "encode_wav"]
