"""A player's recent tournament results gathered from several scoreboard snapshots."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Iterable, List, Optional

from golfboard.ingest.espn import decode_scoreboard
from golfboard.models import TournamentResult
from golfboard.scores import format_score

DEFAULT_LOOKBACK_WEEKS = 8


def lookback_date_keys(today: date, weeks: int = DEFAULT_LOOKBACK_WEEKS) -> List[str]:
    """Scoreboard date keys for this week and each of the previous ``weeks`` weeks."""

    return [(today - timedelta(days=7 * offset)).strftime("%Y%m%d") for offset in range(weeks + 1)]


def collect_recent_results(
    documents: Iterable[Optional[Any]],
    player_id: str,
) -> List[TournamentResult]:
    """Find ``player_id`` in each document, newest tournament first.

    ``None`` entries stand for sub-requests that failed and are skipped.
    """

    results: List[TournamentResult] = []
    seen: set[str] = set()
    for document in documents:
        if document is None:
            continue
        for event in decode_scoreboard(document).events:
            if not event.id or event.id in seen or event.competition is None:
                continue
            for competitor in event.competition.competitors:
                athlete_id = competitor.athlete.id if competitor.athlete else None
                if player_id not in (competitor.id, athlete_id):
                    continue
                score = competitor.score
                if score.display_value:
                    score_text = score.display_value
                elif score.value is not None:
                    score_text = format_score(score.value)
                else:
                    score_text = "-"
                results.append(
                    TournamentResult(
                        tournament_id=event.id,
                        tournament_name=event.short_name or event.name,
                        date=event.date,
                        position=competitor.position or (str(competitor.order) if competitor.order else "-"),
                        score=score_text,
                    )
                )
                seen.add(event.id)
                break

    results.sort(key=lambda result: result.date, reverse=True)
    return results


__all__ = ["DEFAULT_LOOKBACK_WEEKS", "collect_recent_results", "lookback_date_keys"]
