"""Chat feature: persona/mode chat, study material and history."""

from .routes import router
from .service import ChatService

__all__ = ["ChatService", "router"]
