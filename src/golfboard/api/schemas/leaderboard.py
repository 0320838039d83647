from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from golfboard.models import Leaderboard, LeaderboardEntry, PlayerScorecard, Tournament


class LeaderboardResponse(BaseModel):
    leaderboard: Leaderboard
    total_entries: int
    matched_entries: List[LeaderboardEntry] | None = None


class ScheduleResponse(BaseModel):
    tour: str
    tournaments: List[Tournament] = Field(default_factory=list)


class ScorecardResponse(BaseModel):
    scorecard: PlayerScorecard
    rounds_complete: int
