"""Pydantic schemas for the chat feature."""

from .base import ChatRecord, ChatSettings
from .requests import ChatImageRequest, ChatTextRequest, StudyRequest
from .responses import ChatHistoryResponse

__all__ = [
    "ChatHistoryResponse",
    "ChatImageRequest",
    "ChatRecord",
    "ChatSettings",
    "ChatTextRequest",
    "StudyRequest",
]
