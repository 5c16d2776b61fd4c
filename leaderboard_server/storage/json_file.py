"""JSON file storage implementation."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from leaderboard_server.errors import StorageWriteError
from .base import ScoreStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(ScoreStorage):
    """
    Stores the leaderboard as a pretty-printed JSON array in a single file.
    
    Every write rewrites the whole file. The new content is written to a
    temporary file in the same directory and swapped in with os.replace, so a
    reader never sees a half-written file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def read_rows(self) -> Any:
        with self.path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def write_rows(self, rows: list[dict]) -> None:
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(rows, f, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error(f"Failed to write leaderboard to {self.path}: {e}")
            raise StorageWriteError() from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
