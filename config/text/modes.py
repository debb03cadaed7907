"""Chat modes, personas and the system prompts built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class ChatMode:
    """Display metadata for a chat mode."""

    name: str
    description: str
    grounding: bool = False


MODES: Dict[str, ChatMode] = {
    "QUICK_CHAT": ChatMode("Quick Chat", "Casual conversation and fast answers."),
    "DEEP_SEARCH": ChatMode(
        "Deep Search",
        "Research, web grounding, and detailed explanations.",
        grounding=True,
    ),
    "CREATIVE": ChatMode("Creative Mode", "Brainstorming, stories, and art ideas."),
    "STUDY": ChatMode("Study Mode", "Summarize, quiz, and learning aids."),
    "CODE": ChatMode("Code Mode", "Coding assistance, debugging, and samples."),
    "LIFE_COACH": ChatMode("Life Coach", "Personal advice and motivational guidance."),
}

PERSONAS: Dict[str, str] = {
    "FRIENDLY": "A friendly and helpful companion who uses positive and encouraging language.",
    "MOTIVATIONAL": "A high-energy, motivational coach focused on inspiring action and goal achievement.",
    "STRICT_TUTOR": "A strict but fair academic tutor who focuses on accuracy, clarity, and precision.",
    "FUNNY": "A humorous and witty AI that includes light jokes and playful language in every response.",
    "CREATIVE": "An imaginative and descriptive storyteller and idea generator.",
    "ANALYTICAL": "A concise and highly analytical expert who provides structured, objective findings.",
}

DEFAULT_MODE = "QUICK_CHAT"
DEFAULT_PERSONA = "FRIENDLY"

CHAT_SYSTEM_PROMPT = (
    "You are PopKing AI, currently operating in the {mode_name}. "
    "Your persona is set to: {persona}. Follow the persona and the mode rules strictly."
)

STUDY_SYSTEM_PROMPT = (
    "You are PopKing AI, acting as a Study Assistant. Based on the user's request: "
    '"{query}", generate a set of 5-8 flashcards or 3-5 quiz questions formatted as a JSON array.'
)


def build_chat_system_prompt(mode: str, persona: str) -> str:
    """Return the persona/mode system instruction for free-text chat."""

    return CHAT_SYSTEM_PROMPT.format(mode_name=MODES[mode].name, persona=PERSONAS[persona])


def build_study_system_prompt(query: str) -> str:
    """Return the study-assistant system instruction for ``query``."""

    return STUDY_SYSTEM_PROMPT.format(query=query)


__all__ = [
    "ChatMode",
    "MODES",
    "PERSONAS",
    "DEFAULT_MODE",
    "DEFAULT_PERSONA",
    "CHAT_SYSTEM_PROMPT",
    "STUDY_SYSTEM_PROMPT",
    "build_chat_system_prompt",
    "build_study_system_prompt",
]
