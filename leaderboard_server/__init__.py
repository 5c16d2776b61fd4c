"""Static file server and flat-file leaderboard for Jetpack Voice Hero."""

__version__ = "1.0.0"
