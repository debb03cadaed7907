"""Gemini text provider: free-text chat and structured study content."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from config import text as text_config
from core.config import Settings
from core.exceptions import ValidationError
from core.http.cancellation import CancellationToken
from core.http.client import GeminiHttpClient
from core.providers.base import BaseTextProvider
from core.pydantic_schemas import StudyItem, TextGenerationResult

from .requests import build_structured_payload, build_text_payload
from .responses import extract_candidate_text, extract_sources

logger = logging.getLogger(__name__)

_STUDY_ITEMS = TypeAdapter(List[StudyItem])


def study_error_item(detail: str | None = None) -> StudyItem:
    """Return the single error-tagged item used when parsing fails."""

    if detail:
        logger.debug("Study item fallback reason: %s", detail)
    return StudyItem(
        type="error",
        question=text_config.STUDY_ERROR_QUESTION,
        answer=text_config.STUDY_ERROR_ANSWER,
    )


def parse_study_items(raw: str | None) -> List[StudyItem]:
    """Parse JSON ``raw`` into study items, falling back to one error item."""

    if not raw:
        logger.warning("Gemini structured generation returned no text")
        return [study_error_item("empty response")]

    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Gemini structured generation returned invalid JSON: %s", exc)
        return [study_error_item(str(exc))]

    if isinstance(data, dict):
        data = [data]

    try:
        return _STUDY_ITEMS.validate_python(data)
    except PydanticValidationError as exc:
        logger.warning(
            "Gemini structured generation did not match the study item shape (%d errors)",
            exc.error_count(),
        )
        return [study_error_item(str(exc))]


class GeminiTextProvider(BaseTextProvider):
    """Generate text and study items through ``models/<model>:generateContent``."""

    provider_name = "gemini"

    def __init__(self, client: GeminiHttpClient, *, url: str, model: str | None = None) -> None:
        self.client = client
        self.url = url
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings, client: GeminiHttpClient) -> "GeminiTextProvider":
        return cls(client, url=settings.text_url, model=settings.text_model)

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        *,
        use_grounding: bool = False,
        temperature: float | None = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> TextGenerationResult:
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty", field="prompt")

        payload = build_text_payload(
            prompt,
            system_instruction,
            use_grounding=use_grounding,
            temperature=temperature,
        )
        logger.info(
            "Gemini text generation (model=%s, grounding=%s, temperature=%s)",
            self.model,
            use_grounding,
            temperature,
        )

        result = await self.client.invoke(self.url, payload, cancellation=cancellation)

        text = extract_candidate_text(result)
        if text is None:
            logger.warning("Gemini text generation returned no candidate text: %s", _preview(result))
            return TextGenerationResult(
                text=text_config.FALLBACK_TEXT,
                sources=[],
                model=self.model,
                is_fallback=True,
            )

        sources = extract_sources(result)
        if sources:
            logger.debug("Gemini grounding returned %d sources", len(sources))
        return TextGenerationResult(text=text, sources=sources, model=self.model)

    async def generate_structured(
        self,
        prompt: str,
        system_instruction: str | None = None,
        *,
        temperature: float | None = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> List[StudyItem]:
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty", field="prompt")

        payload = build_structured_payload(prompt, system_instruction, temperature=temperature)
        logger.info("Gemini structured generation (model=%s)", self.model)

        result = await self.client.invoke(self.url, payload, cancellation=cancellation)
        return parse_study_items(extract_candidate_text(result))


def _preview(payload: Any, limit: int = 300) -> str:
    text = json.dumps(payload, default=str)
    return text if len(text) <= limit else text[:limit] + "..."


__all__ = ["GeminiTextProvider", "parse_study_items", "study_error_item"]
