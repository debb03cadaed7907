"""Response payloads returned by the image routes."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ImageGenerationResponse(BaseModel):
    image_url: Optional[str] = Field(
        default=None,
        description="PNG data URI, null when the model returned no image",
    )

__all__ = ["ImageGenerationResponse"]
