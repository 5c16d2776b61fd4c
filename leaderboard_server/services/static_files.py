"""Static asset lookup for the game client."""

import logging
import posixpath
from pathlib import Path

from leaderboard_server.errors import FileMissing, OutOfRoot, PathTraversal

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"

CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".svg": "image/svg+xml",
    ".json": "application/json; charset=utf-8",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type(path: Path | str) -> str:
    """Infer the response content type from a file extension."""
    return CONTENT_TYPES.get(Path(path).suffix, DEFAULT_CONTENT_TYPE)


def sanitize_path(url_path: str) -> str:
    """
    Turn a decoded request path into a path relative to the served root.
    
    Args:
        url_path: Decoded URL path, with or without a query string
        
    Returns:
        Normalized relative path; "/" maps to index.html
        
    Raises:
        PathTraversal: If the path contains ".." segments or NUL bytes
    """
    cleaned = url_path.split("?", 1)[0]
    if "\x00" in cleaned:
        raise PathTraversal()
    
    segments = cleaned.replace("\\", "/").split("/")
    if ".." in segments:
        raise PathTraversal()
    
    normalized = posixpath.normpath("/" + cleaned).lstrip("/")
    if normalized in ("", "."):
        return INDEX_FILE
    return normalized


class StaticFiles:
    """Resolves request paths to files under a single served root."""

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()

    def resolve(self, url_path: str) -> Path:
        """
        Map a request path to a readable file under the root.
        
        Raises:
            PathTraversal: If the request path tries to climb out with ".."
            OutOfRoot: If the resolved file lies outside the root (e.g. a symlink)
            FileMissing: If there is no regular file at that location
        """
        relative = sanitize_path(url_path)
        candidate = (self.root / relative).resolve()
        
        if not candidate.is_relative_to(self.root):
            logger.warning(f"Refusing {url_path}: resolves outside {self.root}")
            raise OutOfRoot()
        if not candidate.is_file():
            raise FileMissing()
        return candidate
