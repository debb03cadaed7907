"""Pydantic request models for the TTS feature."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from features.chat.schemas import ChatSettings


class TTSGenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Text to synthesise into speech")
    voice: Optional[str] = Field(default=None, description="Prebuilt voice name, e.g. Kore")
    settings: Optional[ChatSettings] = Field(default=None, description="User settings; supplies the voice when none is given")


__all__ = ["TTSGenerateRequest"]
