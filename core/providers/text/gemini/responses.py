"""Helpers that pull text, sources and inline data out of Gemini responses.

All helpers tolerate missing or oddly-typed keys and return ``None``/empty
values instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from core.pydantic_schemas import Source

logger = logging.getLogger(__name__)


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def first_candidate(payload: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    candidate = _first(payload.get("candidates"))
    return candidate if isinstance(candidate, dict) else None


def first_part(payload: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    candidate = first_candidate(payload)
    if candidate is None:
        return None
    content = candidate.get("content")
    if not isinstance(content, dict):
        return None
    part = _first(content.get("parts"))
    return part if isinstance(part, dict) else None


def extract_candidate_text(payload: Mapping[str, Any]) -> Optional[str]:
    """Return ``candidates[0].content.parts[0].text`` when it is a non-empty string."""

    part = first_part(payload)
    if part is None:
        return None
    text = part.get("text")
    if isinstance(text, str) and text:
        return text
    return None


def extract_sources(payload: Mapping[str, Any]) -> List[Source]:
    """Return grounding citations in backend order.

    Attributions missing either ``web.uri`` or ``web.title`` are dropped.
    """

    candidate = first_candidate(payload)
    if candidate is None:
        return []
    metadata = candidate.get("groundingMetadata")
    if not isinstance(metadata, dict):
        return []
    attributions = metadata.get("groundingAttributions")
    if not isinstance(attributions, list):
        return []

    sources: List[Source] = []
    for attribution in attributions:
        web = attribution.get("web") if isinstance(attribution, dict) else None
        if not isinstance(web, dict):
            continue
        uri = web.get("uri")
        title = web.get("title")
        if isinstance(uri, str) and uri and isinstance(title, str) and title:
            sources.append(Source(uri=uri, title=title))
        else:
            logger.debug("Skipping incomplete grounding attribution: %s", web)
    return sources


def extract_inline_data(payload: Mapping[str, Any]) -> tuple[Optional[str], Optional[str]]:
    """Return ``(data, mimeType)`` from the first part's ``inlineData``."""

    part = first_part(payload)
    if part is None:
        return None, None
    inline = part.get("inlineData")
    if not isinstance(inline, dict):
        return None, None
    data = inline.get("data")
    mime_type = inline.get("mimeType")
    return (
        data if isinstance(data, str) and data else None,
        mime_type if isinstance(mime_type, str) and mime_type else None,
    )


__all__ = [
    "extract_candidate_text",
    "extract_inline_data",
    "extract_sources",
    "first_candidate",
    "first_part",
]
