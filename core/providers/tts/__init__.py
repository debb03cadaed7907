"""Text-to-speech provider implementations."""

from .gemini import GeminiTTSProvider

__all__ = ["GeminiTTSProvider"]
