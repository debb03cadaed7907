"""Image feature: Imagen prompt-to-PNG generation."""

from .routes import router
from .service import ImageService

__all__ = ["ImageService", "router"]
