"""Common pydantic data models shared across the application."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

StudyItemType = Literal["flashcard", "quiz", "error"]


class Source(BaseModel):
    """A web citation attached to a grounded answer."""

    uri: str
    title: str

    model_config = ConfigDict(frozen=True)


class TextGenerationResult(BaseModel):
    """Generated text plus grounding sources in backend order."""

    text: str
    sources: List[Source] = Field(default_factory=list)
    model: Optional[str] = None
    is_fallback: bool = False


class StudyItem(BaseModel):
    """One flashcard or quiz question produced by structured generation.

    ``options`` is expected to hold the answer plus three distractors for quiz
    items; the count is a convention of the producer and is not validated.
    """

    type: StudyItemType
    question: str
    answer: str
    options: Optional[List[str]] = None

    @property
    def is_error(self) -> bool:
        return self.type == "error"


__all__ = ["Source", "StudyItem", "StudyItemType", "TextGenerationResult"]
