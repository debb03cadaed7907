"""Client assembly for external AI services."""

from .gemini import GeminiClients, build_gemini_clients, get_gemini_clients

__all__ = ["GeminiClients", "build_gemini_clients", "get_gemini_clients"]
