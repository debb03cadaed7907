"""REST routes exposing text-to-speech functionality."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from core.exceptions import ServiceError
from core.http.errors import to_http_exception
from features.tts.dependencies import get_tts_service
from features.tts.schemas import TTSGenerateRequest
from features.tts.service import TTSService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tts", tags=["TTS"])


@router.post(
    "/generate",
    summary="Generate speech from text",
    response_class=Response,
    responses={200: {"content": {"audio/wav": {}}}, 204: {"description": "No audio returned"}},
)
async def generate_tts_endpoint(
    request: TTSGenerateRequest,
    service: TTSService = Depends(get_tts_service),
) -> Response:
    """Return the synthesised clip as ``audio/wav``."""

    try:
        audio = await service.synthesize(request.text, request.voice, settings=request.settings)
    except ServiceError as exc:
        logger.error("TTS error: %s", exc)
        raise to_http_exception(exc) from exc

    if audio is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return Response(
        content=audio.data,
        media_type=audio.mime_type,
        headers={
            "X-Sample-Rate": str(audio.sample_rate),
            "X-Voice": audio.voice,
        },
    )
