"""Text-to-speech feature: Gemini speech rendered as WAV."""

from .routes import router
from .service import TTSService

__all__ = ["TTSService", "router"]
