"""Request body builders for the Gemini ``generateContent`` endpoint."""

from __future__ import annotations

from typing import Any, Dict, List

from config import text as text_config

# Gemini OpenAPI-subset schema for flashcard / quiz items
STUDY_ITEMS_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "description": "A list of structured study items (flashcards or quiz questions).",
    "items": {
        "type": "OBJECT",
        "properties": {
            "type": {"type": "STRING", "enum": ["flashcard", "quiz"]},
            "question": {"type": "STRING"},
            "answer": {"type": "STRING"},
            "options": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
                "description": (
                    "Only used for quiz type. Contains 3 incorrect options and 1 correct one "
                    "(which is the 'answer' field)."
                ),
            },
        },
        "required": ["type", "question", "answer"],
    },
}


def build_contents(text: str) -> List[Dict[str, Any]]:
    return [{"parts": [{"text": text}]}]


def build_text_payload(
    prompt: str,
    system_instruction: str | None = None,
    *,
    use_grounding: bool = False,
    temperature: float | None = None,
) -> Dict[str, Any]:
    """Return the body for a free-text request.

    ``tools`` is only present when grounding is enabled and
    ``generationConfig`` only when a temperature is supplied.
    """

    payload: Dict[str, Any] = {"contents": build_contents(prompt)}
    if system_instruction:
        payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
    if temperature is not None:
        payload["generationConfig"] = {"temperature": temperature}
    if use_grounding:
        payload["tools"] = [dict(text_config.GOOGLE_SEARCH_TOOL)]
    return payload


def build_structured_payload(
    prompt: str,
    system_instruction: str | None = None,
    *,
    temperature: float | None = None,
) -> Dict[str, Any]:
    """Return the body for a JSON-constrained study-items request."""

    payload = build_text_payload(prompt, system_instruction, temperature=temperature)
    generation_config = payload.setdefault("generationConfig", {})
    generation_config["responseMimeType"] = "application/json"
    generation_config["responseSchema"] = STUDY_ITEMS_SCHEMA
    return payload


__all__ = [
    "STUDY_ITEMS_SCHEMA",
    "build_contents",
    "build_structured_payload",
    "build_text_payload",
]
