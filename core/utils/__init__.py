"""Utility helpers shared across core packages.

Kept limited to environment helpers so that importing :mod:`core.utils` never
pulls in feature modules (which themselves import :mod:`core.config`).
"""

from .env import get_env, get_env_float, get_env_int, get_node_env, is_local, is_production

__all__ = [
    "get_env",
    "get_env_float",
    "get_env_int",
    "get_node_env",
    "is_local",
    "is_production",
]
