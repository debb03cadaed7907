"""Repository contract for chat records keyed by user id.

The hosting application decides where records live (a managed document
store in production). The in-memory implementation backs local runs and
tests.
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Dict, List, Protocol, runtime_checkable

from config.text import HISTORY_LIMIT
from core.exceptions import NotFoundError
from features.chat.schemas import ChatRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class ChatHistoryRepository(Protocol):
    """Persist chat records and list them back per user."""

    async def save(self, record: ChatRecord) -> ChatRecord:
        ...

    async def list_recent(self, user_id: str, limit: int = HISTORY_LIMIT) -> List[ChatRecord]:
        ...

    async def get(self, user_id: str, chat_id: str) -> ChatRecord:
        ...

    async def set_favorite(self, user_id: str, chat_id: str, is_favorite: bool) -> ChatRecord:
        ...

    async def delete(self, user_id: str, chat_id: str) -> None:
        ...


class InMemoryChatHistoryRepository:
    """Process-local repository; records are lost on restart."""

    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, ChatRecord]] = defaultdict(dict)
        self._lock = asyncio.Lock()

    async def save(self, record: ChatRecord) -> ChatRecord:
        async with self._lock:
            self._records[record.user_id][record.id] = record
        logger.debug("Saved chat %s for user %s", record.id, record.user_id)
        return record

    async def list_recent(self, user_id: str, limit: int = HISTORY_LIMIT) -> List[ChatRecord]:
        async with self._lock:
            # Newest insert first so equal timestamps keep that order
            records = list(reversed(self._records.get(user_id, {}).values()))
        records.sort(key=lambda record: record.timestamp, reverse=True)
        return records[: max(limit, 0)]

    async def get(self, user_id: str, chat_id: str) -> ChatRecord:
        async with self._lock:
            record = self._records.get(user_id, {}).get(chat_id)
        if record is None:
            raise NotFoundError(f"Chat {chat_id} not found", resource="chat")
        return record

    async def set_favorite(self, user_id: str, chat_id: str, is_favorite: bool) -> ChatRecord:
        async with self._lock:
            record = self._records.get(user_id, {}).get(chat_id)
            if record is None:
                raise NotFoundError(f"Chat {chat_id} not found", resource="chat")
            updated = record.model_copy(update={"is_favorite": is_favorite})
            self._records[user_id][chat_id] = updated
        return updated

    async def delete(self, user_id: str, chat_id: str) -> None:
        async with self._lock:
            if self._records.get(user_id, {}).pop(chat_id, None) is None:
                raise NotFoundError(f"Chat {chat_id} not found", resource="chat")
        logger.debug("Deleted chat %s for user %s", chat_id, user_id)


__all__ = ["ChatHistoryRepository", "InMemoryChatHistoryRepository"]
