"""Dependency helpers for the image feature."""

from __future__ import annotations

from core.clients import get_gemini_clients

from .service import ImageService


def get_image_service() -> ImageService:
    """Return an :class:`ImageService` wired to the shared Imagen provider."""

    return ImageService(provider=get_gemini_clients().image)


__all__ = ["get_image_service"]
