"""Gemini text-to-speech configuration."""

from __future__ import annotations

import os
from typing import List

# Model defaults
DEFAULT_MODEL = os.getenv("GEMINI_TTS_MODEL", "gemini-2.5-flash-preview-tts")

# Voice settings (prebuilt Gemini voices)
DEFAULT_VOICE = "Kore"
AVAILABLE_VOICES: List[str] = ["Kore", "Puck", "Charon", "Fenrir", "Aoede", "Leda", "Orus", "Zephyr"]

# Wrapper that keeps the model from answering instead of reading aloud
SPEECH_PROMPT_TEMPLATE = 'Say clearly: "{text}"'

# Raw PCM returned by the API: audio/L16;codec=pcm;rate=24000
PCM_MIME_PREFIX = "audio/L16"
DEFAULT_SAMPLE_RATE = 24000
# WAV header stores rate and byte rate as uint32
MAX_SAMPLE_RATE = 0xFFFFFFFF // 2
NUM_CHANNELS = 1
SAMPLE_WIDTH = 2

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_VOICE",
    "AVAILABLE_VOICES",
    "SPEECH_PROMPT_TEMPLATE",
    "PCM_MIME_PREFIX",
    "DEFAULT_SAMPLE_RATE",
    "MAX_SAMPLE_RATE",
    "NUM_CHANNELS",
    "SAMPLE_WIDTH",
]
