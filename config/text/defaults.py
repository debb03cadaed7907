"""Text and structured generation defaults."""

from __future__ import annotations

import os

# Model defaults
DEFAULT_MODEL = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash-preview-09-2025")

# Generation defaults ("creativity" in the chat settings)
DEFAULT_TEMPERATURE = 0.7
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 1.0

# Web-search grounding tool declaration
GOOGLE_SEARCH_TOOL = {"google_search": {}}

# Returned when the backend answered 2xx without any candidate text
FALLBACK_TEXT = "Error: Could not generate a response. Please check the API status."

# Error item returned when structured output cannot be parsed
STUDY_ERROR_QUESTION = "Error generating study material."
STUDY_ERROR_ANSWER = "Please try again with a clearer prompt."

# Default chat history page size
HISTORY_LIMIT = 50

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "MIN_TEMPERATURE",
    "MAX_TEMPERATURE",
    "GOOGLE_SEARCH_TOOL",
    "FALLBACK_TEXT",
    "STUDY_ERROR_QUESTION",
    "STUDY_ERROR_ANSWER",
    "HISTORY_LIMIT",
]
