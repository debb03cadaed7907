"""Google Imagen image generation provider."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from config import image as image_config
from core.config import Settings
from core.exceptions import ValidationError
from core.http.cancellation import CancellationToken
from core.http.client import GeminiHttpClient
from core.providers.base import BaseImageProvider

logger = logging.getLogger(__name__)


def build_image_payload(prompt: str) -> Dict[str, Any]:
    """Return the ``:predict`` body requesting exactly one image."""

    return {
        "instances": [{"prompt": prompt}],
        "parameters": {"sampleCount": image_config.SAMPLE_COUNT},
    }


def extract_image_data_uri(payload: Dict[str, Any]) -> Optional[str]:
    """Return ``predictions[0].bytesBase64Encoded`` as a PNG data URI."""

    predictions = payload.get("predictions")
    if not isinstance(predictions, list) or not predictions:
        return None
    prediction = predictions[0]
    if not isinstance(prediction, dict):
        return None
    encoded = prediction.get("bytesBase64Encoded")
    if not isinstance(encoded, str) or not encoded:
        return None
    return f"data:{image_config.OUTPUT_MIME_TYPE};base64,{encoded}"


class GeminiImageProvider(BaseImageProvider):
    """Generate images with Imagen through ``models/<model>:predict``.

    Best effort: a response without image bytes yields ``None``, not an error.
    """

    provider_name = "gemini"

    def __init__(self, client: GeminiHttpClient, *, url: str, model: str | None = None) -> None:
        self.client = client
        self.url = url
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings, client: GeminiHttpClient) -> "GeminiImageProvider":
        return cls(client, url=settings.image_url, model=settings.image_model)

    async def generate(
        self,
        prompt: str,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[str]:
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty", field="prompt")

        logger.info("Generating Imagen image with model=%s", self.model)
        result = await self.client.invoke(
            self.url, build_image_payload(prompt), cancellation=cancellation
        )

        data_uri = extract_image_data_uri(result)
        if data_uri is None:
            logger.warning(
                "Imagen response missing image data (keys=%s)", sorted(result.keys())
            )
        return data_uri


__all__ = ["GeminiImageProvider", "build_image_payload", "extract_image_data_uri"]
