"""Configuration helpers for tours, endpoints and client settings."""

from .settings import (
    CacheTTL,
    ClientSettings,
    event_log_url,
    player_overview_url,
    player_search_url,
    scoreboard_url,
    season_stats_url,
    statistics_url,
)
from .tours import TOURS_BY_SLUG, TourRules, get_tour, iter_tours

__all__ = [
    "CacheTTL",
    "ClientSettings",
    "TOURS_BY_SLUG",
    "TourRules",
    "event_log_url",
    "get_tour",
    "iter_tours",
    "player_overview_url",
    "player_search_url",
    "scoreboard_url",
    "season_stats_url",
    "statistics_url",
]
