"""Domain models produced by the leaderboard engine."""

from .leaderboard import (
    EntryStatus,
    Leaderboard,
    LeaderboardEntry,
    Player,
    SearchResult,
    StatCategory,
    StatLeader,
    Tour,
    Tournament,
    TournamentResult,
    TournamentStatus,
)
from .profile import PlayerProfile, PlayerStat, RankingMetric, SeasonResults, SeasonSummary
from .scorecard import HoleScore, PlayerScorecard, RoundScorecard

__all__ = [
    "EntryStatus",
    "HoleScore",
    "Leaderboard",
    "LeaderboardEntry",
    "Player",
    "PlayerProfile",
    "PlayerScorecard",
    "PlayerStat",
    "RankingMetric",
    "RoundScorecard",
    "SearchResult",
    "SeasonResults",
    "SeasonSummary",
    "StatCategory",
    "StatLeader",
    "Tour",
    "Tournament",
    "TournamentResult",
    "TournamentStatus",
]
