"""Deterministic provider stubs for service and route tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from core.providers.base import BaseImageProvider, BaseTextProvider
from core.providers.tts_base import BaseTTSProvider, SpeechAudio
from core.pydantic_schemas import Source, StudyItem, TextGenerationResult


class StubTextProvider(BaseTextProvider):
    provider_name = "stub-text"

    def __init__(
        self,
        *,
        text: str = "Stub reply",
        sources: Optional[List[Source]] = None,
        items: Optional[List[StudyItem]] = None,
    ) -> None:
        self.text = text
        self.sources = sources or []
        self.items = items or [StudyItem(type="flashcard", question="Q", answer="A")]
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, prompt, system_instruction=None, *, use_grounding=False, temperature=None, cancellation=None):
        self.calls.append(
            {
                "kind": "text",
                "prompt": prompt,
                "system_instruction": system_instruction,
                "use_grounding": use_grounding,
                "temperature": temperature,
            }
        )
        return TextGenerationResult(text=self.text, sources=self.sources, model="stub")

    async def generate_structured(self, prompt, system_instruction=None, *, temperature=None, cancellation=None):
        self.calls.append(
            {
                "kind": "structured",
                "prompt": prompt,
                "system_instruction": system_instruction,
                "temperature": temperature,
            }
        )
        return list(self.items)


class StubImageProvider(BaseImageProvider):
    provider_name = "stub-image"

    def __init__(self, result: Optional[str] = "data:image/png;base64,QUJD") -> None:
        self.result = result
        self.prompts: List[str] = []

    async def generate(self, prompt, *, cancellation=None):
        self.prompts.append(prompt)
        return self.result


class StubTTSProvider(BaseTTSProvider):
    provider_name = "stub-tts"

    def __init__(self, audio: Optional[SpeechAudio] = None) -> None:
        self.audio = audio
        self.calls: List[Dict[str, Any]] = []

    async def synthesize(self, text, voice=None, *, cancellation=None):
        self.calls.append({"text": text, "voice": voice})
        return self.audio


class RaisingTextProvider(StubTextProvider):
    """Text provider that fails every call with ``error``."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    async def generate(self, prompt, system_instruction=None, *, use_grounding=False, temperature=None, cancellation=None):
        raise self.error

    async def generate_structured(self, prompt, system_instruction=None, *, temperature=None, cancellation=None):
        raise self.error
