"""Canonical leaderboard models shared by the engine, API and CLI."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from golfboard.scores import parse_score


class Tour(str, Enum):
    PGA = "pga"
    LPGA = "lpga"
    EUR = "eur"
    CHAMPIONS = "champions-tour"


class TournamentStatus(str, Enum):
    PRE = "pre"
    IN = "in"
    POST = "post"


class EntryStatus(str, Enum):
    ACTIVE = "active"
    CUT = "cut"
    WD = "wd"
    DQ = "dq"


class Tournament(BaseModel):
    """One event as seen in a single upstream snapshot."""

    id: str = Field(..., min_length=1)
    name: str
    short_name: Optional[str] = None
    date: str
    end_date: Optional[str] = None
    venue: Optional[str] = None
    location: Optional[str] = None
    purse: Optional[str] = None
    status: TournamentStatus
    tour: Tour

    model_config = ConfigDict(frozen=True)


class Player(BaseModel):
    id: str
    name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    amateur: Optional[bool] = None
    image_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class LeaderboardEntry(BaseModel):
    """A competitor's standing; ``rounds`` only holds regulation rounds."""

    player: Player
    position: str
    position_num: int
    score: str
    score_num: int
    today: str
    today_num: int
    thru: str
    rounds: List[str] = Field(default_factory=list)
    status: EntryStatus = EntryStatus.ACTIVE
    scorecard_available: bool = False
    in_playoff: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_score_text(self):
        if parse_score(self.score) != self.score_num:
            raise ValueError(f"score {self.score!r} does not encode {self.score_num}")
        return self


class Leaderboard(BaseModel):
    """Immutable snapshot of one tournament's standings."""

    tournament: Tournament
    entries: List[LeaderboardEntry] = Field(default_factory=list)
    round: int = Field(..., ge=1, le=4)
    is_playoff: bool = False
    last_updated: datetime

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_entry_order(self):
        positions = [entry.position_num for entry in self.entries]
        if positions != sorted(positions):
            raise ValueError("entries must be sorted by position_num")
        return self

    @property
    def leader(self) -> Optional[LeaderboardEntry]:
        return self.entries[0] if self.entries else None

    def find_entry(self, player_id: str) -> Optional[LeaderboardEntry]:
        for entry in self.entries:
            if entry.player.id == player_id:
                return entry
        return None


class TournamentResult(BaseModel):
    tournament_id: str
    tournament_name: str
    date: str
    position: str
    score: str

    model_config = ConfigDict(frozen=True)


class StatLeader(BaseModel):
    rank: int = Field(..., ge=1)
    player_id: str
    player_name: str
    value: Optional[float] = None
    display_value: str

    model_config = ConfigDict(frozen=True)


class StatCategory(BaseModel):
    name: str
    display_name: str
    abbreviation: str = ""
    leaders: List[StatLeader] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class SearchResult(BaseModel):
    id: str
    name: str
    country: Optional[str] = None

    model_config = ConfigDict(frozen=True)
