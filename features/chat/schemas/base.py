"""Core chat data models shared by the service, repository and routes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from config.text import DEFAULT_MODE, DEFAULT_PERSONA, DEFAULT_TEMPERATURE
from config.tts import DEFAULT_VOICE
from core.pydantic_schemas import Source, StudyItem


def _new_chat_id() -> str:
    return uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ChatSettings(BaseModel):
    """User-selected generation settings passed with every request."""

    model_config = ConfigDict(populate_by_name=True)

    persona: str = DEFAULT_PERSONA
    creativity: float = Field(default=DEFAULT_TEMPERATURE, description="Mapped to temperature")
    active_mode: str = Field(default=DEFAULT_MODE, alias="activeMode")
    voice: str = DEFAULT_VOICE


class ChatRecord(BaseModel):
    """One persisted exchange between the user and PopKing AI."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=_new_chat_id)
    user_id: str = Field(alias="userId")
    user: str
    ai: str
    mode: str
    persona: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)
    is_favorite: bool = Field(default=False, alias="isFavorite")
    sources: List[Source] = Field(default_factory=list)
    is_image: bool = Field(default=False, alias="isImage")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    is_structured_study: bool = Field(default=False, alias="isStructuredStudy")
    structured_data: Optional[List[StudyItem]] = Field(default=None, alias="structuredData")


__all__ = ["ChatRecord", "ChatSettings"]
