"""Abstract base class for leaderboard storage."""

from abc import ABC, abstractmethod
from typing import Any


class ScoreStorage(ABC):
    """
    Abstract interface for where the leaderboard is persisted.
    
    The score store owns ranking and filtering; a storage backend only moves
    raw rows in and out.
    """

    @abstractmethod
    def read_rows(self) -> Any:
        """
        Read the persisted leaderboard document.
        
        Returns:
            The decoded document, normally a list of {name, score} dicts
            
        Note:
            Implementations may raise on missing or corrupt data.
            The score store treats any failure as an empty leaderboard.
        """
        pass

    @abstractmethod
    def write_rows(self, rows: list[dict]) -> None:
        """
        Replace the persisted leaderboard with ``rows``.
        
        Args:
            rows: Full ranked list of {name, score} dicts
            
        Raises:
            StorageWriteError: If the rows could not be persisted
        """
        pass
