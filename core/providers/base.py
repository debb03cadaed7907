"""Base Provider Interfaces - Abstract Contracts for the generation providers
This module defines the abstract base classes that provider implementations
must follow so that feature services can be exercised with stub providers.

Degradation contract:
    - Hard failures (non-2xx other than 429, exhausted retries) raise
      ``ProviderError`` subclasses.
    - Well-formed but unusable responses return a typed fallback value:
      diagnostic text, an error-tagged study item, ``None`` image or audio.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.http.cancellation import CancellationToken
from core.pydantic_schemas import StudyItem, TextGenerationResult


class BaseTextProvider(ABC):
    """Base interface for free-text and structured study generation."""

    provider_name: str = "text"

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        *,
        use_grounding: bool = False,
        temperature: float | None = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> TextGenerationResult:
        """Generate a free-text answer, optionally grounded on web search."""

    @abstractmethod
    async def generate_structured(
        self,
        prompt: str,
        system_instruction: str | None = None,
        *,
        temperature: float | None = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> List[StudyItem]:
        """Generate flashcards/quiz items; never raises on malformed output."""


class BaseImageProvider(ABC):
    """Base interface for image generation providers."""

    provider_name: str = "image"

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[str]:
        """Return a ``data:image/png;base64,...`` URI or ``None``."""


__all__ = ["BaseImageProvider", "BaseTextProvider"]
