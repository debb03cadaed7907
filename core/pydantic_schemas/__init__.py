"""Public pydantic schema exports."""

from .api_envelope import ApiResponse, error, ok
from .common import Source, StudyItem, StudyItemType, TextGenerationResult

__all__ = [
    "ApiResponse",
    "error",
    "ok",
    "Source",
    "StudyItem",
    "StudyItemType",
    "TextGenerationResult",
]
