"""Tournament schedule parsing and event metadata helpers."""

from __future__ import annotations

from typing import Any, List, Optional

from golfboard.ingest.espn import RawCompetition, RawEvent, decode_scoreboard
from golfboard.models import Tour, Tournament, TournamentStatus

_HOME_COUNTRY = "USA"


def resolve_status(state: Optional[str]) -> TournamentStatus:
    """Map upstream status-state text; anything unrecognized is pre-event."""

    if state == "in":
        return TournamentStatus.IN
    if state == "post":
        return TournamentStatus.POST
    return TournamentStatus.PRE


def format_purse(amount: Optional[float]) -> Optional[str]:
    if not amount or amount <= 0:
        return None
    return f"${amount / 1_000_000:.1f}M"


def format_location(competition: Optional[RawCompetition], *, include_country: bool = True) -> str:
    venue = competition.venue if competition else None
    if venue is None:
        return ""
    parts = [part for part in (venue.city, venue.state) if part]
    if include_country and venue.country and venue.country != _HOME_COUNTRY:
        parts.append(venue.country)
    return ", ".join(parts)


def build_tournament(event: RawEvent, tour: Tour, *, include_country: bool = True) -> Tournament:
    competition = event.competition
    venue = competition.venue if competition else None
    return Tournament(
        id=event.id or "unknown",
        name=event.name,
        short_name=event.short_name,
        date=event.date,
        end_date=event.end_date,
        venue=venue.full_name if venue else None,
        location=format_location(competition, include_country=include_country),
        purse=format_purse(competition.purse if competition else None),
        status=resolve_status(event.state),
        tour=tour,
    )


def parse_schedule(document: Any, tour: Tour, *, include_country: bool = True) -> List[Tournament]:
    """Return one :class:`Tournament` per upstream event (empty when there are none)."""

    scoreboard = decode_scoreboard(document)
    return [
        build_tournament(event, tour, include_country=include_country)
        for event in scoreboard.events
        if event.id
    ]


__all__ = [
    "build_tournament",
    "format_location",
    "format_purse",
    "parse_schedule",
    "resolve_status",
]
