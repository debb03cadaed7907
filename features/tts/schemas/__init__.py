"""Pydantic schemas for the TTS feature."""

from .requests import TTSGenerateRequest

__all__ = ["TTSGenerateRequest"]
