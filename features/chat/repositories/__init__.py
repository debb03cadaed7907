"""Chat history persistence."""

from .chat_history import ChatHistoryRepository, InMemoryChatHistoryRepository

__all__ = ["ChatHistoryRepository", "InMemoryChatHistoryRepository"]
