"""API key loading for external providers."""

from __future__ import annotations

import os
from typing import Dict


def load_api_keys() -> Dict[str, str]:
    """Load API keys from the environment with sensible defaults."""

    return {
        # Gemini / Imagen share one Google AI Studio key
        "google": os.getenv("GOOGLE_API_KEY", "") or os.getenv("GEMINI_API_KEY", ""),
    }


API_KEYS = load_api_keys()

GOOGLE_API_KEY = API_KEYS["google"]

__all__ = [
    "API_KEYS",
    "GOOGLE_API_KEY",
    "load_api_keys",
]
