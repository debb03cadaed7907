"""Response payloads returned by the chat routes."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .base import ChatRecord


class ChatHistoryResponse(BaseModel):
    """Most recent chat records for a user, newest first."""

    user_id: str
    records: List[ChatRecord]


__all__ = ["ChatHistoryResponse"]
