"""Pydantic models for API I/O."""

from .leaderboard import LeaderboardResponse, ScheduleResponse, ScorecardResponse
from .players import (
    PlayerProfileResponse,
    RecentResultsResponse,
    SearchResponse,
    SeasonResultsResponse,
    StatLeadersResponse,
    StatsResponse,
)

__all__ = [
    "LeaderboardResponse",
    "PlayerProfileResponse",
    "RecentResultsResponse",
    "ScheduleResponse",
    "ScorecardResponse",
    "SearchResponse",
    "SeasonResultsResponse",
    "StatLeadersResponse",
    "StatsResponse",
]
