"""Golf leaderboard normalization and scoring."""

__version__ = "0.1.0"
