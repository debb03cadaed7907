"""Request payloads accepted by the image routes."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ImageGenerationRequest(BaseModel):
    prompt: str = Field(..., description="Text description of the image to generate")


__all__ = ["ImageGenerationRequest"]
