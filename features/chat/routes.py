"""HTTP routes for chat, study material and chat history."""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import APIRouter, Depends, Query

from config.text import HISTORY_LIMIT
from core.exceptions import ServiceError
from core.http.errors import to_http_exception
from core.pydantic_schemas import ApiResponse, ok
from features.chat.dependencies import get_chat_service
from features.chat.schemas import (
    ChatHistoryResponse,
    ChatImageRequest,
    ChatRecord,
    ChatTextRequest,
    StudyRequest,
)
from features.chat.service import ChatService

router = APIRouter(prefix="/chat", tags=["chat"])
logger = logging.getLogger(__name__)


def _fail(route: str, exc: ServiceError) -> Exception:
    logger.error("Error in %s: %s", route, exc)
    return to_http_exception(exc)


@router.post("/text", response_model=ApiResponse[ChatRecord])
async def send_text(
    request: ChatTextRequest,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse:
    """Send a chat message using the selected persona and mode."""

    logger.info(
        "POST /chat/text received (user_id=%s, mode=%s, persona=%s)",
        request.user_id,
        request.settings.active_mode,
        request.settings.persona,
    )
    try:
        record = await service.send_message(
            user_id=request.user_id,
            prompt=request.prompt,
            settings=request.settings,
        )
    except ServiceError as exc:
        raise _fail("/chat/text", exc) from exc

    return ok("Chat response generated", data=record)


@router.post("/study", response_model=ApiResponse[ChatRecord])
async def generate_study(
    request: StudyRequest,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse:
    """Generate flashcards or quiz questions for a topic."""

    logger.info("POST /chat/study received (user_id=%s)", request.user_id)
    try:
        record = await service.generate_study_material(
            user_id=request.user_id,
            prompt=request.prompt,
            settings=request.settings,
        )
    except ServiceError as exc:
        raise _fail("/chat/study", exc) from exc

    return ok(record.ai, data=record)


@router.post("/image", response_model=ApiResponse[ChatRecord])
async def generate_image(
    request: ChatImageRequest,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse:
    """Generate an image and add it to the user's chat history."""

    logger.info("POST /chat/image received (user_id=%s)", request.user_id)
    try:
        record = await service.generate_image(user_id=request.user_id, prompt=request.prompt)
    except ServiceError as exc:
        raise _fail("/chat/image", exc) from exc

    if record is None:
        return ok("No image was returned", data=None)
    return ok("Image generated", data=record)


@router.get("/history/{user_id}", response_model=ApiResponse[ChatHistoryResponse])
async def list_history(
    user_id: str,
    limit: int = Query(default=HISTORY_LIMIT, ge=1),
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse:
    """Return the user's most recent chats, newest first."""

    try:
        records = await service.list_history(user_id, limit=limit)
    except ServiceError as exc:
        raise _fail("/chat/history", exc) from exc

    return ok(
        f"{len(records)} chats",
        data=ChatHistoryResponse(user_id=user_id, records=records),
        meta={"limit": limit},
    )


@router.post("/history/{user_id}/{chat_id}/favorite", response_model=ApiResponse[ChatRecord])
async def toggle_favorite(
    user_id: str,
    chat_id: str,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse:
    """Flip the favourite flag on a stored chat."""

    try:
        record = await service.toggle_favorite(user_id, chat_id)
    except ServiceError as exc:
        raise _fail("/chat/history/favorite", exc) from exc

    return ok("Favourite updated", data=record)


@router.delete("/history/{user_id}/{chat_id}", response_model=ApiResponse[Dict[str, str]])
async def delete_chat(
    user_id: str,
    chat_id: str,
    service: ChatService = Depends(get_chat_service),
) -> ApiResponse:
    """Remove a stored chat from the user's history."""

    try:
        await service.delete_chat(user_id, chat_id)
    except ServiceError as exc:
        raise _fail("/chat/history/delete", exc) from exc

    return ok("Chat deleted", data={"id": chat_id})
