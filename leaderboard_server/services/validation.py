"""Validation of submitted leaderboard names and scores."""

import math
import re
from typing import Any, Optional

MAX_NAME_LEN = 14
MAX_SCORE = 10_000_000

NAME_PATTERN = re.compile(r"[A-Za-z0-9 _-]+")


def normalize_name(raw: Any) -> str:
    """Return the trimmed name, or an empty string for non-string input."""
    if not isinstance(raw, str):
        return ""
    return raw.strip()


def is_valid_name(raw: Any) -> bool:
    """Check a name: a string of 1-14 allowed characters once trimmed."""
    if not isinstance(raw, str):
        return False
    trimmed = raw.strip()
    if not trimmed or len(trimmed) > MAX_NAME_LEN:
        return False
    return NAME_PATTERN.fullmatch(trimmed) is not None


def coerce_score(raw: Any) -> Optional[int]:
    """
    Coerce a submitted score to an integer.
    
    Accepts ints, integral floats and numeric strings ("42", "42.0", "4.2e1").
    Booleans, None, blank strings, non-finite and fractional values give None.
    
    Returns:
        The integer score, or None if it cannot be coerced
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            raw = float(text)
        except ValueError:
            return None
    if isinstance(raw, float):
        if not math.isfinite(raw) or not raw.is_integer():
            return None
        return int(raw)
    return None


def is_valid_score(raw: Any) -> bool:
    """Check a score: coerces to an integer within [0, MAX_SCORE]."""
    score = coerce_score(raw)
    return score is not None and 0 <= score <= MAX_SCORE
