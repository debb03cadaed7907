"""Text generation configuration aggregation."""

from . import defaults, modes
from .defaults import *  # noqa: F401,F403
from .modes import *  # noqa: F401,F403

__all__ = [
    *defaults.__all__,
    *modes.__all__,
]
