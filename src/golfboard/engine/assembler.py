"""Assemble a :class:`Leaderboard` snapshot from an upstream scoreboard document."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from golfboard.engine.competitors import normalize_competitor
from golfboard.engine.errors import EventNotFoundError, NoDataError
from golfboard.engine.linescores import REGULATION_ROUNDS
from golfboard.engine.schedule import build_tournament
from golfboard.ingest.espn import decode_scoreboard
from golfboard.models import Leaderboard, LeaderboardEntry, Tour


logger = logging.getLogger(__name__)


def event_date_key(iso_date: str) -> str:
    """Scoreboard ``dates`` key for an event: ``"2025-04-10T12:00Z"`` -> ``"20250410"``."""

    return iso_date[:10].replace("-", "")


def normalize_leaderboard(
    document: Any,
    tour: Tour,
    event_id: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> Leaderboard:
    """Normalize one scoreboard snapshot.

    Without ``event_id`` the first event is used. With ``event_id`` the matching
    event is used, falling back to the first event when the id is absent from a
    non-empty document.

    Raises ``NoDataError`` when there are no events (or the chosen event has no
    competition) and ``EventNotFoundError`` for an event-scoped lookup against a
    document without events.
    """

    scoreboard = decode_scoreboard(document)
    if not scoreboard.events:
        if event_id is not None:
            raise EventNotFoundError(event_id)
        raise NoDataError()

    event = scoreboard.find_event(event_id)
    competition = event.competition if event else None
    if event is None or competition is None:
        raise NoDataError()

    tournament = build_tournament(event, tour)
    current_round = competition.period if competition.period and competition.period > 0 else 1
    is_playoff = current_round > REGULATION_ROUNDS

    entries: List[LeaderboardEntry] = []
    for index, competitor in enumerate(competition.competitors):
        entry = normalize_competitor(
            competitor,
            index=index,
            current_round=current_round,
            is_playoff=is_playoff,
            tournament_status=tournament.status,
        )
        if entry is not None:
            entries.append(entry)
    entries.sort(key=lambda entry: entry.position_num)

    dropped = len(competition.competitors) - len(entries)
    if dropped:
        logger.debug("Dropped %s competitor rows without athletes from event %s", dropped, event.id)

    return Leaderboard(
        tournament=tournament,
        entries=entries,
        round=min(current_round, REGULATION_ROUNDS),
        is_playoff=is_playoff,
        last_updated=now or datetime.now(timezone.utc),
    )


__all__ = ["event_date_key", "normalize_leaderboard"]
