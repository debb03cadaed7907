"""Business logic for image generation."""

from __future__ import annotations

import logging
from typing import Optional

from core.exceptions import ValidationError
from core.http.cancellation import CancellationToken
from core.providers.base import BaseImageProvider

logger = logging.getLogger(__name__)


class ImageService:
    """Validate prompts and forward them to the image provider."""

    def __init__(self, *, provider: BaseImageProvider) -> None:
        self._provider = provider

    async def generate_image(
        self,
        prompt: str,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[str]:
        """Return a PNG data URI, or ``None`` when no image came back."""

        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty", field="prompt")

        image_url = await self._provider.generate(prompt.strip(), cancellation=cancellation)
        if image_url is None:
            logger.warning("Image generation produced no image for prompt '%s'", _preview(prompt))
        return image_url


def _preview(prompt: str, limit: int = 120) -> str:
    text = prompt.strip().replace("\n", " ")
    return text[:limit] + ("..." if len(text) > limit else "")


__all__ = ["ImageService"]
