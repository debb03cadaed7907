"""Business logic for chat and study-material generation."""

from __future__ import annotations

import logging
from typing import List, Optional

from config import text as text_config
from core.exceptions import ConfigurationError, DatabaseError, ValidationError
from core.http.cancellation import CancellationToken
from core.providers.base import BaseImageProvider, BaseTextProvider
from features.chat.repositories import ChatHistoryRepository
from features.chat.schemas import ChatRecord, ChatSettings

logger = logging.getLogger(__name__)

STUDY_SUCCESS_TEXT = "Study materials generated successfully."
STUDY_FAILURE_TEXT = "Failed to parse structured response. Please refine your request."
IMAGE_SUCCESS_TEXT = "AI Image Generated"
IMAGE_MODE = "Image Gen"


def validate_settings(settings: ChatSettings) -> ChatSettings:
    """Reject unknown modes/personas and out-of-range creativity."""

    if settings.active_mode not in text_config.MODES:
        raise ValidationError(f"Unknown mode: {settings.active_mode}", field="settings.active_mode")
    if settings.persona not in text_config.PERSONAS:
        raise ValidationError(f"Unknown persona: {settings.persona}", field="settings.persona")
    if not text_config.MIN_TEMPERATURE <= settings.creativity <= text_config.MAX_TEMPERATURE:
        raise ValidationError(
            f"Creativity must be between {text_config.MIN_TEMPERATURE} and {text_config.MAX_TEMPERATURE}",
            field="settings.creativity",
        )
    return settings


def _require_prompt(prompt: str) -> str:
    trimmed = (prompt or "").strip()
    if not trimmed:
        raise ValidationError("Prompt cannot be empty", field="prompt")
    return trimmed


class ChatService:
    """Compose persona/mode prompts, call the text provider, persist records."""

    def __init__(
        self,
        *,
        provider: BaseTextProvider,
        repository: ChatHistoryRepository,
        image_provider: BaseImageProvider | None = None,
    ) -> None:
        self._provider = provider
        self._repository = repository
        self._image_provider = image_provider

    async def send_message(
        self,
        *,
        user_id: str,
        prompt: str,
        settings: ChatSettings | None = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> ChatRecord:
        """Generate a free-text reply; Deep Search mode turns on web grounding."""

        settings = validate_settings(settings or ChatSettings())
        query = _require_prompt(prompt)
        mode = text_config.MODES[settings.active_mode]

        result = await self._provider.generate(
            query,
            text_config.build_chat_system_prompt(settings.active_mode, settings.persona),
            use_grounding=mode.grounding,
            temperature=settings.creativity,
            cancellation=cancellation,
        )

        record = ChatRecord(
            user_id=user_id,
            user=query,
            ai=result.text,
            mode=settings.active_mode,
            persona=settings.persona,
            sources=result.sources,
        )
        return await self._persist(record)

    async def generate_study_material(
        self,
        *,
        user_id: str,
        prompt: str,
        settings: ChatSettings | None = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> ChatRecord:
        """Generate flashcards or quiz questions for ``prompt``."""

        settings = validate_settings(settings or ChatSettings())
        query = _require_prompt(prompt)

        items = await self._provider.generate_structured(
            query,
            text_config.build_study_system_prompt(query),
            temperature=settings.creativity,
            cancellation=cancellation,
        )
        failed = any(item.is_error for item in items)

        record = ChatRecord(
            user_id=user_id,
            user=query,
            ai=STUDY_FAILURE_TEXT if failed else STUDY_SUCCESS_TEXT,
            mode=settings.active_mode,
            persona=settings.persona,
            is_structured_study=True,
            structured_data=items,
        )
        return await self._persist(record)

    async def generate_image(
        self,
        *,
        user_id: str,
        prompt: str,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[ChatRecord]:
        """Generate an image and record it; returns ``None`` when no image came back."""

        if self._image_provider is None:
            raise ConfigurationError("Image provider is not configured", key="image_provider")
        query = _require_prompt(prompt)

        image_url = await self._image_provider.generate(query, cancellation=cancellation)
        if image_url is None:
            logger.warning("No image returned for user %s; nothing recorded", user_id)
            return None

        record = ChatRecord(
            user_id=user_id,
            user=query,
            ai=IMAGE_SUCCESS_TEXT,
            mode=IMAGE_MODE,
            is_image=True,
            image_url=image_url,
        )
        return await self._persist(record)

    async def list_history(self, user_id: str, limit: int = text_config.HISTORY_LIMIT) -> List[ChatRecord]:
        if limit <= 0:
            raise ValidationError("limit must be positive", field="limit")
        return await self._repository.list_recent(user_id, limit=limit)

    async def toggle_favorite(self, user_id: str, chat_id: str) -> ChatRecord:
        record = await self._repository.get(user_id, chat_id)
        updated = await self._repository.set_favorite(user_id, chat_id, not record.is_favorite)
        logger.info("Chat %s favourite=%s (user=%s)", chat_id, updated.is_favorite, user_id)
        return updated

    async def delete_chat(self, user_id: str, chat_id: str) -> None:
        await self._repository.delete(user_id, chat_id)
        logger.info("Chat %s deleted (user=%s)", chat_id, user_id)

    async def _persist(self, record: ChatRecord) -> ChatRecord:
        # A storage failure must not lose the generated reply
        try:
            return await self._repository.save(record)
        except DatabaseError as exc:
            logger.error("Failed to save chat %s for user %s: %s", record.id, record.user_id, exc)
            return record


__all__ = [
    "ChatService",
    "IMAGE_MODE",
    "IMAGE_SUCCESS_TEXT",
    "STUDY_FAILURE_TEXT",
    "STUDY_SUCCESS_TEXT",
    "validate_settings",
]
