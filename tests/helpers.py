"""Shared fakes for Gemini HTTP tests."""

from __future__ import annotations

import base64
from typing import Any, Callable, Dict, Iterable, List

import httpx

from core.audio import encode_pcm16

Handler = Callable[[httpx.Request], Any]


class RecordingSleep:
    """Stand-in for ``asyncio.sleep`` that records requested delays."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class MockGemini:
    """Route every request through ``handler`` and remember what was sent."""

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        return self.handler(request)


def sequence(*responses: Any) -> Handler:
    """Return a handler replaying ``responses`` in order, repeating the last.

    Exception instances are raised instead of returned. Each call gets a
    fresh copy of the response so one template can be replayed.
    """

    remaining = list(responses)

    def _handler(request: httpx.Request) -> httpx.Response:
        item = remaining.pop(0) if len(remaining) > 1 else remaining[0]
        if isinstance(item, Exception):
            raise item
        return httpx.Response(item.status_code, headers=item.headers, content=item.content)

    return _handler


def candidate_payload(text: str | None = None, **candidate_fields: Any) -> Dict[str, Any]:
    """Build a ``generateContent`` response with a single text candidate."""

    candidate: Dict[str, Any] = {"content": {"parts": [{"text": text}] if text is not None else []}}
    candidate.update(candidate_fields)
    return {"candidates": [candidate]}


def audio_payload(samples: Iterable[int], mime_type: str) -> Dict[str, Any]:
    """Build a TTS response carrying ``samples`` as base64 PCM16."""

    data = base64.b64encode(encode_pcm16(samples)).decode("ascii")
    return {
        "candidates": [
            {"content": {"parts": [{"inlineData": {"mimeType": mime_type, "data": data}}]}}
        ]
    }
