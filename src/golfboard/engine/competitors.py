"""Map one upstream competitor record into a :class:`LeaderboardEntry`."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from golfboard.engine.linescores import (
    FULL_ROUND_HOLES,
    REGULATION_ROUNDS,
    LinescoreGroups,
    classify_linescores,
    find_period,
    has_hole_data,
    holes_played,
)
from golfboard.ingest.espn import RawAthlete, RawCompetitor
from golfboard.models import EntryStatus, LeaderboardEntry, Player, TournamentStatus
from golfboard.scores import format_score, parse_score


logger = logging.getLogger(__name__)

UNKNOWN_PLAYER = "Unknown"
NO_VALUE = "-"
FINISHED = "F"
PLAYOFF = "P"

# Checked in order; the first substring found wins.
_STATUS_MARKERS: Tuple[Tuple[str, EntryStatus], ...] = (
    ("cut", EntryStatus.CUT),
    ("wd", EntryStatus.WD),
    ("dq", EntryStatus.DQ),
)


def classify_status(text: Optional[str]) -> EntryStatus:
    lowered = (text or "").lower()
    for marker, status in _STATUS_MARKERS:
        if marker in lowered:
            return status
    return EntryStatus.ACTIVE


def _build_player(athlete: RawAthlete, competitor_id: Optional[str]) -> Player:
    name = athlete.display_name or athlete.full_name or athlete.short_name or UNKNOWN_PLAYER
    first_name = last_name = None
    if athlete.short_name:
        parts = athlete.short_name.split()
        first_name = parts[0] if parts else None
        last_name = " ".join(parts[1:]) or None
    return Player(
        id=athlete.id or competitor_id or "",
        name=name,
        first_name=first_name,
        last_name=last_name,
        country=athlete.flag_alt or athlete.citizenship,
        country_code=athlete.flag_alt,
        amateur=athlete.amateur,
        image_url=athlete.headshot,
    )


def _today_and_thru(
    groups: LinescoreGroups,
    *,
    in_playoff: bool,
    current_round: int,
    tournament_status: TournamentStatus,
) -> Tuple[str, int, str]:
    if in_playoff and tournament_status is TournamentStatus.POST:
        return NO_VALUE, 0, PLAYOFF

    if in_playoff and tournament_status is TournamentStatus.IN:
        playoff = groups.playoff[0]
        today = playoff.display_value or NO_VALUE
        holes = holes_played(playoff)
        thru = f"{PLAYOFF}{holes}" if holes > 0 else PLAYOFF
        return today, parse_score(today), thru

    effective_round = min(current_round, REGULATION_ROUNDS)
    round_entry = find_period(groups.regulation, effective_round)
    rounds = groups.regulation_display_values
    if round_entry is not None and round_entry.display_value:
        today = round_entry.display_value
    else:
        today = rounds[-1] if rounds else NO_VALUE
    holes = holes_played(round_entry)
    if holes >= FULL_ROUND_HOLES:
        thru = FINISHED
    elif holes > 0:
        thru = str(holes)
    else:
        thru = NO_VALUE
    return today, parse_score(today), thru


def normalize_competitor(
    competitor: RawCompetitor,
    *,
    index: int,
    current_round: int,
    is_playoff: bool,
    tournament_status: TournamentStatus,
) -> Optional[LeaderboardEntry]:
    """Return the competitor's standing, or ``None`` for rows without an athlete."""

    if competitor.athlete is None:
        logger.debug("Dropping competitor %s without athlete record", competitor.id or index)
        return None

    player = _build_player(competitor.athlete, competitor.id)

    position_num = competitor.order if competitor.order and competitor.order > 0 else index + 1
    position = competitor.position or str(position_num)

    groups = classify_linescores(competitor.linescores, current_round=current_round)
    in_playoff = is_playoff and groups.is_playoff_participant
    rounds = groups.regulation_display_values

    if in_playoff:
        score_num = sum(parse_score(entry.display_value) for entry in groups.regulation)
    else:
        score_num = competitor.score.relative

    today, today_num, thru = _today_and_thru(
        groups,
        in_playoff=in_playoff,
        current_round=current_round,
        tournament_status=tournament_status,
    )

    return LeaderboardEntry(
        player=player,
        position=position,
        position_num=position_num,
        score=format_score(score_num),
        score_num=score_num,
        today=today,
        today_num=today_num,
        thru=thru,
        rounds=rounds,
        status=classify_status(competitor.status_text),
        scorecard_available=has_hole_data(groups.regulation),
        in_playoff=in_playoff,
    )


__all__ = ["classify_status", "normalize_competitor"]
