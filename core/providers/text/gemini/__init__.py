"""Gemini text and structured-output provider."""

from .provider import GeminiTextProvider, parse_study_items, study_error_item
from .requests import STUDY_ITEMS_SCHEMA, build_structured_payload, build_text_payload

__all__ = [
    "GeminiTextProvider",
    "STUDY_ITEMS_SCHEMA",
    "build_structured_payload",
    "build_text_payload",
    "parse_study_items",
    "study_error_item",
]
