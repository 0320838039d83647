"""Async HTTP client for the ESPN golf endpoints."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, List, Optional, Sequence, Tuple

import httpx

from golfboard.client.cache import ResponseCache
from golfboard.config import (
    CacheTTL,
    ClientSettings,
    event_log_url,
    player_overview_url,
    player_search_url,
    scoreboard_url,
    season_stats_url,
    statistics_url,
)
from golfboard.engine.profile import EventLogEntry
from golfboard.engine.results import DEFAULT_LOOKBACK_WEEKS, lookback_date_keys
from golfboard.models import Tour


logger = logging.getLogger(__name__)


class ClientError(RuntimeError):
    """Base for upstream fetch failures."""


class UpstreamHTTPError(ClientError):
    def __init__(self, status_code: int, url: str):
        super().__init__(f"API error: {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class UpstreamUnavailableError(ClientError):
    """Raised when the upstream cannot be reached at all."""


class CaptivePortalError(ClientError):
    def __init__(self, url: str):
        super().__init__(
            "Received an HTML page instead of JSON; a captive portal or proxy may be "
            f"intercepting requests to {url}"
        )
        self.url = url


class EspnClient:
    """Fetch raw upstream documents; normalization is left to the engine."""

    def __init__(
        self,
        *,
        settings: ClientSettings | None = None,
        cache: ResponseCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or ClientSettings.from_env()
        self.cache = cache if cache is not None else ResponseCache()
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout),
            verify=self.settings.verify_tls,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "EspnClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    async def get_json(self, url: str, *, ttl: float, force_refresh: bool = False) -> Any:
        if not force_refresh:
            cached = self.cache.get(url, ttl)
            if cached is not None:
                logger.debug("Cache hit for %s", url)
                return cached

        logger.info("Fetching %s", url)
        try:
            response = await self._http.get(url)
        except httpx.RequestError as exc:
            raise UpstreamUnavailableError(f"Unable to reach {url}: {exc}") from exc

        if response.status_code < 200 or response.status_code >= 300:
            raise UpstreamHTTPError(response.status_code, url)
        if "text/html" in response.headers.get("content-type", ""):
            raise CaptivePortalError(url)
        try:
            payload = response.json()
        except ValueError as exc:
            raise ClientError(f"Invalid JSON from {url}") from exc

        self.cache.set(url, payload)
        return payload

    async def scoreboard(
        self,
        tour: Tour,
        dates: Optional[str] = None,
        *,
        ttl: float | None = None,
        force_refresh: bool = False,
    ) -> Any:
        return await self.get_json(
            scoreboard_url(tour, dates),
            ttl=self.settings.live_ttl if ttl is None else ttl,
            force_refresh=force_refresh,
        )

    async def schedule(self, tour: Tour, year: int, *, force_refresh: bool = False) -> Any:
        return await self.scoreboard(
            tour,
            str(year),
            ttl=CacheTTL.FULL_SCHEDULE,
            force_refresh=force_refresh,
        )

    async def statistics(self, tour: Tour, *, force_refresh: bool = False) -> Any:
        return await self.get_json(
            statistics_url(tour),
            ttl=CacheTTL.STAT_CATEGORIES,
            force_refresh=force_refresh,
        )

    async def player_search(self, query: str) -> Any:
        return await self.get_json(player_search_url(query), ttl=CacheTTL.STAT_CATEGORIES)

    async def fetch_many(self, urls: Sequence[str], *, ttl: float) -> List[Optional[Any]]:
        """Fetch ``urls`` concurrently; a failed request yields ``None`` in its slot."""

        async def fetch_one(url: str) -> Optional[Any]:
            try:
                return await self.get_json(url, ttl=ttl)
            except ClientError as exc:
                logger.warning("Skipping %s: %s", url, exc)
                return None

        return list(await asyncio.gather(*(fetch_one(url) for url in urls)))

    async def lookback_scoreboards(
        self,
        tour: Tour,
        today: date,
        weeks: int = DEFAULT_LOOKBACK_WEEKS,
    ) -> List[Optional[Any]]:
        urls = [scoreboard_url(tour, key) for key in lookback_date_keys(today, weeks)]
        return await self.fetch_many(urls, ttl=CacheTTL.SCOREBOARD_LOOKUP)

    async def player_overview(self, tour: Tour, player_id: str) -> Any:
        return await self.get_json(player_overview_url(tour, player_id), ttl=CacheTTL.STAT_CATEGORIES)

    async def season_stats(
        self,
        tour: Tour,
        player_id: str,
        years: Sequence[int],
    ) -> List[Optional[Any]]:
        """One statistics document per season, fetched concurrently; failures are ``None``."""

        urls = [season_stats_url(tour, year, player_id) for year in years]
        return await self.fetch_many(urls, ttl=CacheTTL.SEASON_DATA)

    async def event_log(self, tour: Tour, player_id: str, year: int) -> Any:
        return await self.get_json(event_log_url(tour, year, player_id), ttl=CacheTTL.SEASON_DATA)

    async def event_log_details(
        self,
        entries: Sequence[EventLogEntry],
    ) -> List[Tuple[Optional[Any], Optional[Any], Optional[Any]]]:
        """Resolve the event, score and status links of every entry in one concurrent batch."""

        urls: List[str] = []
        for entry in entries:
            urls.extend((entry.event_url, entry.score_url, entry.status_url))
        documents = await self.fetch_many(urls, ttl=CacheTTL.SEASON_DATA)
        return [
            (documents[index], documents[index + 1], documents[index + 2])
            for index in range(0, len(documents), 3)
        ]


__all__ = [
    "CaptivePortalError",
    "ClientError",
    "EspnClient",
    "UpstreamHTTPError",
    "UpstreamUnavailableError",
]
