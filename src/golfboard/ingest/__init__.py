"""Input adapters that normalize raw upstream payloads."""

from .athlete import (
    RawEventLogItem,
    RawEventStat,
    RawOverview,
    RawRankingCategory,
    RawEventRef,
    RawStatsSplit,
    decode_event_log,
    decode_overview,
    decode_ref_display,
    decode_ref_event,
    decode_ref_position,
    decode_season_stats,
)
from .espn import (
    RawAthlete,
    RawCompetition,
    RawCompetitor,
    RawEvent,
    RawHoleLinescore,
    RawLinescore,
    RawScore,
    RawScoreboard,
    RawVenue,
    decode_scoreboard,
)

__all__ = [
    "RawEventLogItem",
    "RawEventStat",
    "RawOverview",
    "RawRankingCategory",
    "RawEventRef",
    "RawStatsSplit",
    "decode_event_log",
    "decode_overview",
    "decode_ref_display",
    "decode_ref_event",
    "decode_ref_position",
    "decode_season_stats",
    "RawAthlete",
    "RawCompetition",
    "RawCompetitor",
    "RawEvent",
    "RawHoleLinescore",
    "RawLinescore",
    "RawScore",
    "RawScoreboard",
    "RawVenue",
    "decode_scoreboard",
]
