from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from golfboard.models import (
    PlayerProfile,
    SearchResult,
    SeasonResults,
    StatCategory,
    StatLeader,
    TournamentResult,
)


class StatsResponse(BaseModel):
    tour: str
    categories: List[StatCategory] = Field(default_factory=list)


class StatLeadersResponse(BaseModel):
    tour: str
    metric: str
    category: StatCategory | None = None
    leaders: List[StatLeader] = Field(default_factory=list)
    player_rank: int | None = None


class RecentResultsResponse(BaseModel):
    player_id: str
    results: List[TournamentResult] = Field(default_factory=list)
    failed_lookups: int = 0


class PlayerProfileResponse(BaseModel):
    tour: str
    profile: PlayerProfile
    failed_lookups: int = 0


class SeasonResultsResponse(BaseModel):
    tour: str
    player_id: str
    season: SeasonResults
    failed_lookups: int = 0


class SearchResponse(BaseModel):
    query: str
    results: List[SearchResult] = Field(default_factory=list)
