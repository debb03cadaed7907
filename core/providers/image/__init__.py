"""Image provider implementations."""

from .gemini import GeminiImageProvider

__all__ = ["GeminiImageProvider"]
