"""Dependency helpers for the chat feature."""

from __future__ import annotations

from functools import lru_cache

from core.clients import get_gemini_clients

from .repositories import ChatHistoryRepository, InMemoryChatHistoryRepository
from .service import ChatService


@lru_cache(maxsize=1)
def _history_repository_singleton() -> InMemoryChatHistoryRepository:
    return InMemoryChatHistoryRepository()


def get_history_repository() -> ChatHistoryRepository:
    """Return the process-wide chat history repository."""

    return _history_repository_singleton()


def get_chat_service() -> ChatService:
    """Return a :class:`ChatService` wired to the shared Gemini provider."""

    clients = get_gemini_clients()
    return ChatService(
        provider=clients.text,
        repository=get_history_repository(),
        image_provider=clients.image,
    )


__all__ = ["get_chat_service", "get_history_repository"]
