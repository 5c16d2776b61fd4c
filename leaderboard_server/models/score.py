"""Score entry models for the leaderboard API."""

from pydantic import BaseModel, ConfigDict, Field


class ScoreEntry(BaseModel):
    """
    A single accepted leaderboard entry.
    
    Entries are immutable once accepted; the leaderboard only ever appends,
    re-sorts and truncates them.
    """
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(description="Trimmed player name")
    score: int = Field(description="Non-negative integer score")


class SubmitResult(BaseModel):
    """Response body for an accepted submission."""
    ok: bool = True


class ErrorBody(BaseModel):
    """JSON error body returned by the leaderboard endpoints."""
    error: str
    reason: str
