"""Gemini generation providers.

Each provider receives a shared :class:`core.http.GeminiHttpClient` and the
endpoint it talks to. Build the full set from settings with
:func:`core.clients.gemini.build_gemini_clients`.
"""

from .base import BaseImageProvider, BaseTextProvider
from .image import GeminiImageProvider
from .text import GeminiTextProvider
from .tts import GeminiTTSProvider
from .tts_base import BaseTTSProvider, SpeechAudio

__all__ = [
    "BaseImageProvider",
    "BaseTTSProvider",
    "BaseTextProvider",
    "GeminiImageProvider",
    "GeminiTTSProvider",
    "GeminiTextProvider",
    "SpeechAudio",
]
