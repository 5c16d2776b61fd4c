"""FastAPI dependencies for dependency injection."""

from dataclasses import dataclass

from fastapi import Request

from leaderboard_server.services import RateLimiter, ScoreStore, StaticFiles


@dataclass
class LeaderboardState:
    """Mutable service state owned by a single application instance."""
    store: ScoreStore
    limiter: RateLimiter
    static_files: StaticFiles


def get_state(request: Request) -> LeaderboardState:
    """Get the application's service state."""
    state = getattr(request.app.state, "leaderboard", None)
    if state is None:
        raise RuntimeError("Leaderboard state not initialized. Build the app with create_app().")
    return state


def get_store(request: Request) -> ScoreStore:
    return get_state(request).store


def get_rate_limiter(request: Request) -> RateLimiter:
    return get_state(request).limiter


def get_static_files(request: Request) -> StaticFiles:
    return get_state(request).static_files
