"""Hole-by-hole scorecards for one competitor of a scoreboard event."""

from __future__ import annotations

from typing import Any, List

from golfboard.engine.errors import (
    NoCompetitionError,
    NoScorecardDataError,
    PlayerNotFoundError,
    ScorecardEventNotFoundError,
)
from golfboard.engine.linescores import REGULATION_ROUNDS
from golfboard.ingest.espn import RawLinescore, decode_scoreboard
from golfboard.models import HoleScore, PlayerScorecard, RoundScorecard
from golfboard.scores import parse_score


def _round_holes(linescore: RawLinescore) -> List[HoleScore]:
    holes: dict[int, HoleScore] = {}
    for hole in linescore.holes or []:
        if hole.period is None or hole.value is None:
            continue
        if not 1 <= hole.period <= 18 or hole.value < 1:
            continue
        holes.setdefault(
            hole.period,
            HoleScore.from_strokes(hole.period, hole.value, parse_score(hole.score_type)),
        )
    return list(holes.values())


def parse_player_scorecard(
    document: Any,
    *,
    event_id: str,
    player_id: str,
    player_name: str,
) -> PlayerScorecard:
    scoreboard = decode_scoreboard(document)
    if not scoreboard.events:
        raise ScorecardEventNotFoundError(event_id)

    event = scoreboard.find_event(event_id)
    if event is None or event.competition is None:
        raise NoCompetitionError()

    competitor = next(
        (
            comp
            for comp in event.competition.competitors
            if comp.id == player_id or (comp.athlete is not None and comp.athlete.id == player_id)
        ),
        None,
    )
    if competitor is None:
        raise PlayerNotFoundError(player_id)

    rounds = [
        RoundScorecard.from_holes(linescore.period, _round_holes(linescore))
        for linescore in competitor.linescores
        if linescore.period is not None and 1 <= linescore.period <= REGULATION_ROUNDS
    ]
    rounds.sort(key=lambda card: card.round)
    if not rounds:
        raise NoScorecardDataError()

    return PlayerScorecard(
        player_id=player_id,
        player_name=player_name,
        event_id=event.id,
        event_name=event.name,
        rounds=rounds,
    )


__all__ = ["parse_player_scorecard"]
