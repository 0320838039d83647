"""Split a competitor's per-period linescores into regulation and playoff play."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from golfboard.ingest.espn import RawLinescore

REGULATION_ROUNDS = 4
FULL_ROUND_HOLES = 18


@dataclass(frozen=True)
class LinescoreGroups:
    regulation: Tuple[RawLinescore, ...]
    playoff: Tuple[RawLinescore, ...]
    is_playoff_participant: bool

    @property
    def regulation_display_values(self) -> list[str]:
        return [entry.display_value or "-" for entry in self.regulation]


def classify_linescores(
    entries: Sequence[RawLinescore],
    *,
    current_round: int,
) -> LinescoreGroups:
    """Drop placeholder rows (no period, or period below 1) and partition the rest.

    A repeated regulation period keeps its first row only, so there are never
    more than four regulation rows.

    A competitor only counts as a playoff participant when the event itself has
    moved past regulation and this competitor carries a playoff period.
    """

    periodic = [entry for entry in entries if entry.period is not None and entry.period >= 1]
    seen: Dict[int, RawLinescore] = {}
    for entry in periodic:
        if entry.period <= REGULATION_ROUNDS:
            seen.setdefault(entry.period, entry)
    regulation = tuple(seen.values())
    playoff = tuple(entry for entry in periodic if entry.period > REGULATION_ROUNDS)
    return LinescoreGroups(
        regulation=regulation,
        playoff=playoff,
        is_playoff_participant=current_round > REGULATION_ROUNDS and bool(playoff),
    )


def holes_played(entry: Optional[RawLinescore]) -> int:
    if entry is None or not entry.holes:
        return 0
    return len(entry.holes)


def find_period(entries: Sequence[RawLinescore], period: int) -> Optional[RawLinescore]:
    for entry in entries:
        if entry.period == period:
            return entry
    return None


def has_hole_data(entries: Sequence[RawLinescore]) -> bool:
    return any(entry.holes for entry in entries)


__all__ = [
    "FULL_ROUND_HOLES",
    "LinescoreGroups",
    "REGULATION_ROUNDS",
    "classify_linescores",
    "find_period",
    "has_hole_data",
    "holes_played",
]
