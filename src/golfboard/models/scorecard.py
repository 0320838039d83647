"""Hole-by-hole scorecard models."""

from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class HoleScore(BaseModel):
    """A single played hole."""

    hole_number: int = Field(..., ge=1, le=18)
    strokes: int = Field(..., ge=1)
    par: int
    to_par: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_to_par(self):
        if self.to_par != self.strokes - self.par:
            raise ValueError(
                f"to_par ({self.to_par}) must equal strokes ({self.strokes}) - par ({self.par})"
            )
        return self

    @classmethod
    def from_strokes(cls, hole_number: int, strokes: int, to_par: int) -> "HoleScore":
        """Build a hole from strokes and the upstream relative-to-par value."""

        return cls(hole_number=hole_number, strokes=strokes, par=strokes - to_par, to_par=to_par)


class RoundScorecard(BaseModel):
    round: int = Field(..., ge=1, le=4)
    holes: List[HoleScore] = Field(default_factory=list)
    total_strokes: Optional[int] = None
    to_par: Optional[int] = None
    is_complete: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_totals(self):
        numbers = [hole.hole_number for hole in self.holes]
        if len(numbers) != len(set(numbers)):
            raise ValueError(f"round {self.round} has duplicate hole numbers")
        if self.holes:
            if self.total_strokes != sum(hole.strokes for hole in self.holes):
                raise ValueError("total_strokes must equal the sum of hole strokes")
            if self.to_par != sum(hole.to_par for hole in self.holes):
                raise ValueError("to_par must equal the sum of hole to_par values")
        elif self.total_strokes is not None or self.to_par is not None:
            raise ValueError("a round without holes has no totals")
        if self.is_complete != (len(self.holes) == 18):
            raise ValueError("is_complete must be true only for 18 recorded holes")
        return self

    @classmethod
    def from_holes(cls, round_number: int, holes: Iterable[HoleScore]) -> "RoundScorecard":
        ordered = sorted(holes, key=lambda hole: hole.hole_number)
        if not ordered:
            return cls(round=round_number)
        return cls(
            round=round_number,
            holes=ordered,
            total_strokes=sum(hole.strokes for hole in ordered),
            to_par=sum(hole.to_par for hole in ordered),
            is_complete=len(ordered) == 18,
        )

    @property
    def front_nine(self) -> List[HoleScore]:
        return [hole for hole in self.holes if hole.hole_number <= 9]

    @property
    def back_nine(self) -> List[HoleScore]:
        return [hole for hole in self.holes if hole.hole_number > 9]


class PlayerScorecard(BaseModel):
    player_id: str
    player_name: str
    event_id: str
    event_name: str
    rounds: List[RoundScorecard] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_round(self, number: int) -> Optional[RoundScorecard]:
        for card in self.rounds:
            if card.round == number:
                return card
        return None
