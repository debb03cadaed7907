"""Image generation HTTP routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from core.exceptions import ServiceError
from core.http.errors import to_http_exception
from core.pydantic_schemas import ApiResponse, ok
from features.image.dependencies import get_image_service
from features.image.schemas import ImageGenerationRequest, ImageGenerationResponse
from features.image.service import ImageService

router = APIRouter(prefix="/image", tags=["image"])
logger = logging.getLogger(__name__)


@router.post("/generate", response_model=ApiResponse[ImageGenerationResponse])
async def generate_image(
    request: ImageGenerationRequest,
    service: ImageService = Depends(get_image_service),
) -> ApiResponse:
    """Generate an image from a text prompt."""

    logger.info("POST /image/generate received (prompt_length=%d)", len(request.prompt))

    try:
        image_url = await service.generate_image(request.prompt)
    except ServiceError as exc:
        logger.error("Error in /image/generate: %s", exc)
        raise to_http_exception(exc) from exc

    message = "Image generated" if image_url else "No image was returned"
    return ok(message, data=ImageGenerationResponse(image_url=image_url))
