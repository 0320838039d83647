"""Player profile and season models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from golfboard.models.leaderboard import Player, TournamentResult


class PlayerStat(BaseModel):
    value: str
    rank: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class RankingMetric(BaseModel):
    name: str
    display_name: str
    abbreviation: Optional[str] = None
    display_value: str
    rank: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class SeasonSummary(BaseModel):
    """Season totals; only seasons with at least one event are summarized."""

    year: int
    events: int = Field(..., ge=1)
    wins: int = 0
    top_tens: int = 0
    cuts_made: int = 0
    earnings: Optional[str] = None
    scoring_avg: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class SeasonResults(BaseModel):
    year: int
    results: List[TournamentResult] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class PlayerProfile(BaseModel):
    player: Player
    earnings: Optional[str] = None
    wins: Optional[int] = None
    top_tens: Optional[int] = None
    cuts_made: Optional[int] = None
    events: Optional[int] = None
    scoring_avg: Optional[PlayerStat] = None
    driving_distance: Optional[PlayerStat] = None
    driving_accuracy: Optional[PlayerStat] = None
    greens_in_reg: Optional[PlayerStat] = None
    putts_per_gir: Optional[PlayerStat] = None
    birdies_per_round: Optional[PlayerStat] = None
    sand_saves: Optional[PlayerStat] = None
    recent_results: List[TournamentResult] = Field(default_factory=list)
    rankings: List[RankingMetric] = Field(default_factory=list)
    season_history: List[SeasonSummary] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
