"""Imagen generation defaults."""

from __future__ import annotations

import os

DEFAULT_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "imagen-4.0-generate-001")

# Callers always request exactly one image
SAMPLE_COUNT = 1
OUTPUT_MIME_TYPE = "image/png"

__all__ = [
    "DEFAULT_MODEL",
    "SAMPLE_COUNT",
    "OUTPUT_MIME_TYPE",
]
