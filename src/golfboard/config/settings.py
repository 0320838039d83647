"""Endpoint, cache lifetime and environment-driven client settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import quote, urlencode

from golfboard.models import Tour


logger = logging.getLogger(__name__)

SITE_BASE = "https://site.api.espn.com/apis/site/v2/sports/golf"
WEB_BASE = "https://site.web.api.espn.com/apis"
CORE_BASE = "https://sports.core.api.espn.com/v2/sports/golf/leagues"

_TIMEOUT_ENV = "GOLFBOARD_TIMEOUT"
_INSECURE_ENV = "GOLFBOARD_INSECURE"
_LIVE_TTL_ENV = "GOLFBOARD_CACHE_TTL"

_TIMEOUT_DEFAULT = 30.0


class CacheTTL:
    """Cache lifetimes in seconds."""

    LIVE_SCORES = 60.0
    TOURNAMENTS = 120.0
    STAT_CATEGORIES = 300.0
    SCOREBOARD_LOOKUP = 1800.0
    SEASON_DATA = 3600.0
    FULL_SCHEDULE = 21600.0


def scoreboard_url(tour: Tour, dates: Optional[str] = None) -> str:
    url = f"{SITE_BASE}/{Tour(tour).value}/scoreboard"
    if dates:
        url += "?" + urlencode({"dates": dates})
    return url


def statistics_url(tour: Tour) -> str:
    return f"{WEB_BASE}/site/v2/sports/golf/{Tour(tour).value}/statistics"


def player_search_url(query: str) -> str:
    return f"{WEB_BASE}/common/v3/search?query={quote(query)}&limit=10&type=player&sport=golf"


def player_overview_url(tour: Tour, player_id: str) -> str:
    return f"{WEB_BASE}/common/v3/sports/golf/{Tour(tour).value}/athletes/{quote(player_id)}/overview"


def season_stats_url(tour: Tour, year: int, player_id: str) -> str:
    return f"{CORE_BASE}/{Tour(tour).value}/seasons/{year}/types/2/athletes/{quote(player_id)}/statistics"


def event_log_url(tour: Tour, year: int, player_id: str) -> str:
    return f"{CORE_BASE}/{Tour(tour).value}/seasons/{year}/athletes/{quote(player_id)}/eventlog"


def _env_float(name: str, default: float, *, clamp_min: float | None = None, env: Mapping[str, str]) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


@dataclass(frozen=True)
class ClientSettings:
    timeout: float = _TIMEOUT_DEFAULT
    verify_tls: bool = True
    live_ttl: float = CacheTTL.LIVE_SCORES

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ClientSettings":
        env = os.environ if env is None else env
        return cls(
            timeout=_env_float(_TIMEOUT_ENV, _TIMEOUT_DEFAULT, clamp_min=1.0, env=env),
            verify_tls=env.get(_INSECURE_ENV) != "1",
            live_ttl=_env_float(_LIVE_TTL_ENV, CacheTTL.LIVE_SCORES, clamp_min=0.0, env=env),
        )
