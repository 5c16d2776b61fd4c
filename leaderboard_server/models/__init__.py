from .score import ScoreEntry, SubmitResult, ErrorBody

__all__ = [
    "ScoreEntry",
    "SubmitResult",
    "ErrorBody",
]
