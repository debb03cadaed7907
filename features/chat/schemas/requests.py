"""Request payloads accepted by the chat routes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import ChatSettings


class ChatTextRequest(BaseModel):
    """Free-text chat message."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId", min_length=1)
    prompt: str
    settings: ChatSettings = Field(default_factory=ChatSettings)


class StudyRequest(ChatTextRequest):
    """Request for flashcards or quiz questions on a topic."""


class ChatImageRequest(BaseModel):
    """Image prompt recorded in the user's chat history."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId", min_length=1)
    prompt: str


__all__ = ["ChatImageRequest", "ChatTextRequest", "StudyRequest"]
