from .base import ScoreStorage
from .json_file import JsonFileStorage

__all__ = ["ScoreStorage", "JsonFileStorage"]
