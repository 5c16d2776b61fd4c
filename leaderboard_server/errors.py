"""Error types raised by the leaderboard services and mapped to HTTP responses."""


class LeaderboardError(Exception):
    """Base error rendered as a JSON body by the API layer."""

    status_code: int = 500
    reason: str = "internal_error"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, reason: str | None = None):
        self.message = message or self.message
        self.reason = reason or self.reason
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "reason": self.reason}


class MalformedInput(LeaderboardError):
    status_code = 400
    reason = "invalid_json"
    message = "Invalid JSON"


class RateLimited(LeaderboardError):
    status_code = 429
    reason = "rate_limited"
    message = "Too many submissions"


class MethodNotSupported(LeaderboardError):
    status_code = 405
    reason = "method_not_allowed"
    message = "Method not allowed"


class StorageWriteError(LeaderboardError):
    """Persisting the leaderboard failed; the submission was not kept."""

    status_code = 500
    reason = "storage_unavailable"
    message = "Could not save score"


class StaticFileError(Exception):
    """Base error for static asset lookups, rendered as plain text."""

    status_code: int = 500
    detail: str = "Internal server error"


class PathTraversal(StaticFileError):
    status_code = 400
    detail = "Bad request"


class OutOfRoot(StaticFileError):
    status_code = 403
    detail = "Forbidden"


class FileMissing(StaticFileError):
    status_code = 404
    detail = "Not found"
