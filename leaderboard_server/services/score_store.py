"""Score store holding the ranked, size-bounded leaderboard."""

import logging
from typing import Any

from leaderboard_server.models import ScoreEntry
from leaderboard_server.storage import ScoreStorage
from .validation import MAX_SCORE, coerce_score

logger = logging.getLogger(__name__)

LEADERBOARD_CAPACITY = 100
DEFAULT_NAME = "Pilot"


def _rank(entries: list[ScoreEntry], capacity: int) -> list[ScoreEntry]:
    # sorted() is stable, so equal scores keep insertion order
    return sorted(entries, key=lambda e: e.score, reverse=True)[:capacity]


class ScoreStore:
    """
    In-memory leaderboard persisted through a ScoreStorage backend.
    
    The list is always sorted by score descending and never holds more than
    ``capacity`` entries. Every accepted submission rewrites the whole
    persisted document.
    """

    def __init__(self, storage: ScoreStorage, capacity: int = LEADERBOARD_CAPACITY):
        self.storage = storage
        self.capacity = capacity
        self._entries: list[ScoreEntry] = []

    @property
    def entries(self) -> list[ScoreEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> list[ScoreEntry]:
        """
        Load the leaderboard from storage, replacing the in-memory state.
        
        Never raises: unreadable, corrupt or non-array data gives an empty
        leaderboard. Rows with unusable scores are dropped.
        
        Returns:
            The loaded leaderboard, ranked and truncated
        """
        try:
            rows = self.storage.read_rows()
        except FileNotFoundError:
            logger.info("No saved leaderboard found, starting empty")
            rows = []
        except Exception as e:
            logger.warning(f"Could not read saved leaderboard, starting empty: {e}")
            rows = []
        
        if not isinstance(rows, list):
            logger.warning("Saved leaderboard is not a list, starting empty")
            rows = []
        
        entries = [entry for entry in (self._parse_row(row) for row in rows) if entry is not None]
        dropped = len(rows) - len(entries)
        if dropped:
            logger.warning(f"Dropped {dropped} malformed leaderboard rows")
        
        self._entries = _rank(entries, self.capacity)
        logger.info(f"Loaded {len(self._entries)} leaderboard entries")
        return self.entries

    def _parse_row(self, row: Any) -> ScoreEntry | None:
        """Turn a persisted row into an entry, or None if it must be dropped."""
        if not isinstance(row, dict):
            return None
        
        name = row.get("name")
        name = str(name) if name else DEFAULT_NAME
        
        raw_score = row.get("score")
        score = coerce_score(raw_score) if raw_score is not None else 0
        if score is None or score < 0 or score > MAX_SCORE:
            return None
        
        return ScoreEntry(name=name, score=score)

    def top(self, n: int) -> list[ScoreEntry]:
        """Return the ``n`` best entries."""
        if n <= 0:
            return []
        return self._entries[:n]

    def submit(self, entry: ScoreEntry) -> None:
        """
        Add an entry, re-rank, truncate and persist the full leaderboard.
        
        If persisting fails the in-memory leaderboard is restored to its
        previous state before the error propagates.
        
        Raises:
            StorageWriteError: If the leaderboard could not be saved
        """
        previous = self._entries
        self._entries = _rank([*previous, entry], self.capacity)
        
        try:
            self.storage.write_rows([e.model_dump() for e in self._entries])
        except Exception:
            self._entries = previous
            raise
