"""Pydantic schemas for the image feature."""

from .requests import ImageGenerationRequest
from .responses import ImageGenerationResponse

__all__ = ["ImageGenerationRequest", "ImageGenerationResponse"]
