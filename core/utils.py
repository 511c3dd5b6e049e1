import math
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2), which
    would shift scores that land exactly on a half point.
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float, max_score: float = 100) -> float:
    """Clip a score into [0, max_score]."""
    if value < 0 or value > max_score:
        logger.debug(f"Score out of range: {value}, clipping to [0, {max_score}]")
    return max(0, min(max_score, value))


def normalize_text(value: Optional[str]) -> str:
    """Lower-case free text; None becomes the empty string."""
    if not value:
        return ""
    return str(value).lower()
