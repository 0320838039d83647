"""Player profiles, season summaries and season results from the athlete endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from golfboard.ingest.athlete import (
    RawOverview,
    RawRankingCategory,
    decode_event_log,
    decode_overview,
    decode_ref_display,
    decode_ref_event,
    decode_ref_position,
    decode_season_stats,
)
from golfboard.models import (
    Player,
    PlayerProfile,
    PlayerStat,
    RankingMetric,
    SeasonSummary,
    TournamentResult,
)


logger = logging.getLogger(__name__)

SEASON_HISTORY_YEARS = 4
RECENT_RESULTS_LIMIT = 10
UNKNOWN_EVENT = "Unknown"
NO_VALUE = "-"


def _int_or_none(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def _find_ranking(rankings: Sequence[RawRankingCategory], needle: str) -> Optional[RawRankingCategory]:
    for category in rankings:
        if needle in category.name.lower() or needle in category.abbreviation.lower():
            return category
    return None


def _ranking_stat(rankings: Sequence[RawRankingCategory], needle: str) -> Optional[PlayerStat]:
    category = _find_ranking(rankings, needle)
    if category is None or category.display_value is None:
        return None
    return PlayerStat(value=category.display_value, rank=category.rank)


def _overview_stat(overview: RawOverview, stats_name: str, label: str) -> Optional[str]:
    split = overview.split_for(stats_name)
    if split is None or label not in overview.labels:
        return None
    index = overview.labels.index(label)
    if index >= len(split.stats):
        return None
    return split.stats[index] or None


def _recent_results(overview: RawOverview) -> List[TournamentResult]:
    results = [
        TournamentResult(
            tournament_id=event.id,
            tournament_name=event.short_name or event.name,
            date=event.date,
            position=event.position or NO_VALUE,
            score=event.score or NO_VALUE,
        )
        for event in overview.recent_events
    ]
    results.sort(key=lambda result: result.date, reverse=True)
    return results[:RECENT_RESULTS_LIMIT]


def parse_player_profile(
    document: Any,
    *,
    player_id: str,
    stats_name: str,
    player_name: Optional[str] = None,
    season_history: Iterable[SeasonSummary] = (),
) -> PlayerProfile:
    """Build a profile from an athlete overview document.

    Counting stats come from the overview split whose name mentions
    ``stats_name``; per-shot metrics come from the season rankings.
    """

    overview = decode_overview(document)
    rankings = overview.rankings

    def stat(label: str) -> Optional[str]:
        return _overview_stat(overview, stats_name, label)

    earnings = _find_ranking(rankings, "amount") or _find_ranking(rankings, "earnings")
    scoring_avg = stat("AVG")

    return PlayerProfile(
        player=Player(id=player_id, name=player_name or f"Player {player_id}"),
        earnings=(earnings.display_value if earnings else None) or stat("EARNINGS"),
        wins=_int_or_none(stat("WINS")),
        top_tens=_int_or_none(stat("TOP10")),
        cuts_made=_int_or_none(stat("CUTS")),
        events=_int_or_none(stat("EVENTS")),
        scoring_avg=PlayerStat(value=scoring_avg) if scoring_avg else None,
        driving_distance=_ranking_stat(rankings, "yds/drv"),
        driving_accuracy=_ranking_stat(rankings, "drv acc"),
        greens_in_reg=_ranking_stat(rankings, "greenshit"),
        putts_per_gir=_ranking_stat(rankings, "pp gir"),
        birdies_per_round=_ranking_stat(rankings, "bird/rnd"),
        sand_saves=_ranking_stat(rankings, "saves"),
        recent_results=_recent_results(overview),
        rankings=[
            RankingMetric(
                name=category.name,
                display_name=category.display_name,
                abbreviation=category.abbreviation or None,
                display_value=category.display_value,
                rank=category.rank,
            )
            for category in rankings
            if category.display_value is not None
        ],
        season_history=list(season_history),
    )


def season_history_years(current_year: int, count: int = SEASON_HISTORY_YEARS) -> List[int]:
    return [current_year - offset for offset in range(count)]


def parse_season_stats(document: Any, year: int) -> Optional[SeasonSummary]:
    """Summarize one season, or ``None`` when the player played no events in it."""

    stats = decode_season_stats(document)

    def count(name: str) -> int:
        return _int_or_none(stats.get(name, "0")) or 0

    events = count("tournamentsPlayed")
    if events <= 0:
        return None
    return SeasonSummary(
        year=year,
        events=events,
        wins=count("wins"),
        top_tens=count("topTenFinishes"),
        cuts_made=count("cutsMade"),
        earnings=stats.get("amount"),
        scoring_avg=stats.get("scoringAverage"),
    )


def collect_season_history(seasons: Iterable[Tuple[int, Optional[Any]]]) -> List[SeasonSummary]:
    """Summaries for every season document that parses, newest year first.

    ``None`` documents stand for failed sub-requests and are skipped.
    """

    summaries: List[SeasonSummary] = []
    for year, document in seasons:
        if document is None:
            continue
        summary = parse_season_stats(document, year)
        if summary is not None:
            summaries.append(summary)
    summaries.sort(key=lambda summary: summary.year, reverse=True)
    return summaries


def secure_url(url: str) -> str:
    """Reference links are published as ``http://``; fetch them over https."""

    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


@dataclass(frozen=True)
class EventLogEntry:
    """A played event from a player's season event log and its reference links."""

    event_id: str
    event_ref: str
    competitor_ref: str

    @property
    def event_url(self) -> str:
        return secure_url(self.event_ref)

    @property
    def score_url(self) -> str:
        return secure_url(self.competitor_ref.split("?", 1)[0] + "/score")

    @property
    def status_url(self) -> str:
        return secure_url(self.competitor_ref.split("?", 1)[0] + "/status")


def _event_id_from_ref(ref: str) -> Optional[str]:
    if "/events/" not in ref:
        return None
    tail = ref.rsplit("/events/", 1)[1]
    event_id = tail.split("?", 1)[0].split("/", 1)[0]
    return event_id or None


def parse_event_log(document: Any) -> List[EventLogEntry]:
    """Played events with both reference links; unplayed or unlinked items are skipped."""

    entries: List[EventLogEntry] = []
    for item in decode_event_log(document):
        if item.played is False or not item.event_ref or not item.competitor_ref:
            continue
        event_id = _event_id_from_ref(item.event_ref)
        if event_id is None:
            logger.debug("Skipping event log reference without event id: %s", item.event_ref)
            continue
        entries.append(EventLogEntry(event_id, item.event_ref, item.competitor_ref))
    return entries


def resolve_event_result(
    entry: EventLogEntry,
    event_document: Optional[Any],
    score_document: Optional[Any],
    status_document: Optional[Any],
) -> Optional[TournamentResult]:
    """Combine the three resolved references; without the event itself there is no result."""

    if event_document is None:
        return None
    event = decode_ref_event(event_document)
    return TournamentResult(
        tournament_id=entry.event_id,
        tournament_name=event.short_name or event.name or UNKNOWN_EVENT,
        date=event.date or "",
        position=decode_ref_position(status_document) or NO_VALUE,
        score=decode_ref_display(score_document) or NO_VALUE,
    )


def collect_season_results(
    entries: Sequence[EventLogEntry],
    documents: Sequence[Tuple[Optional[Any], Optional[Any], Optional[Any]]],
) -> List[TournamentResult]:
    """Resolve each event log entry against its fetched documents, newest first."""

    results: List[TournamentResult] = []
    for entry, (event_document, score_document, status_document) in zip(entries, documents):
        result = resolve_event_result(entry, event_document, score_document, status_document)
        if result is not None:
            results.append(result)
    results.sort(key=lambda result: result.date, reverse=True)
    return results


__all__ = [
    "EventLogEntry",
    "RECENT_RESULTS_LIMIT",
    "SEASON_HISTORY_YEARS",
    "collect_season_history",
    "collect_season_results",
    "parse_event_log",
    "parse_player_profile",
    "parse_season_stats",
    "resolve_event_result",
    "season_history_years",
    "secure_url",
]
