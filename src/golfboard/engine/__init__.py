"""Leaderboard normalization and scoring engine."""

from golfboard.scores import format_score, format_to_par, parse_score

from .assembler import event_date_key, normalize_leaderboard
from .competitors import classify_status, normalize_competitor
from .errors import (
    EventNotFoundError,
    LeaderboardError,
    NoCompetitionError,
    NoDataError,
    NoScorecardDataError,
    PlayerNotFoundError,
    ScorecardError,
    ScorecardEventNotFoundError,
)
from .linescores import LinescoreGroups, classify_linescores, find_period, holes_played
from .profile import (
    EventLogEntry,
    collect_season_history,
    collect_season_results,
    parse_event_log,
    parse_player_profile,
    parse_season_stats,
    resolve_event_result,
    season_history_years,
)
from .results import collect_recent_results, lookback_date_keys
from .schedule import format_purse, parse_schedule, resolve_status
from .scorecard import parse_player_scorecard
from .search import parse_player_search, search_leaderboard
from .stats import find_player_rank, find_stat_category, parse_stat_categories

__all__ = [
    "EventLogEntry",
    "EventNotFoundError",
    "LeaderboardError",
    "LinescoreGroups",
    "NoCompetitionError",
    "NoDataError",
    "NoScorecardDataError",
    "PlayerNotFoundError",
    "ScorecardError",
    "ScorecardEventNotFoundError",
    "classify_linescores",
    "classify_status",
    "collect_recent_results",
    "collect_season_history",
    "collect_season_results",
    "event_date_key",
    "find_period",
    "find_player_rank",
    "find_stat_category",
    "format_purse",
    "format_score",
    "format_to_par",
    "holes_played",
    "lookback_date_keys",
    "normalize_competitor",
    "normalize_leaderboard",
    "parse_event_log",
    "parse_player_profile",
    "parse_player_scorecard",
    "parse_player_search",
    "parse_schedule",
    "parse_score",
    "parse_season_stats",
    "parse_stat_categories",
    "resolve_event_result",
    "resolve_status",
    "search_leaderboard",
    "season_history_years",
]
