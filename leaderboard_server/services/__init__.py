from .score_store import ScoreStore, LEADERBOARD_CAPACITY
from .rate_limiter import RateLimiter, client_id
from .static_files import StaticFiles, content_type, sanitize_path
from .validation import (
    MAX_NAME_LEN,
    MAX_SCORE,
    coerce_score,
    is_valid_name,
    is_valid_score,
    normalize_name,
)

__all__ = [
    "ScoreStore",
    "LEADERBOARD_CAPACITY",
    "RateLimiter",
    "client_id",
    "StaticFiles",
    "content_type",
    "sanitize_path",
    "MAX_NAME_LEN",
    "MAX_SCORE",
    "coerce_score",
    "is_valid_name",
    "is_valid_score",
    "normalize_name",
]
