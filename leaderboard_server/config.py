"""Application configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path

DATA_FILE_NAME = "leaderboard-data.json"


@dataclass
class Config:
    """Application configuration loaded from environment variables."""
    
    # Server settings
    host: str = "0.0.0.0"
    port: int = 8787
    log_level: str = "INFO"
    
    # Static assets and the leaderboard file live relative to the working directory
    public_root: Path = field(default_factory=Path.cwd)
    data_file: Path = field(default_factory=lambda: Path.cwd() / DATA_FILE_NAME)
    
    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        cwd = Path.cwd()
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8787")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            public_root=cwd,
            data_file=cwd / DATA_FILE_NAME,
        )
