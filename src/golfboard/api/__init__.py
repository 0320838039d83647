"""REST API over the leaderboard engine."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import Response

from golfboard.api.schemas import (
    LeaderboardResponse,
    PlayerProfileResponse,
    RecentResultsResponse,
    ScheduleResponse,
    ScorecardResponse,
    SearchResponse,
    SeasonResultsResponse,
    StatLeadersResponse,
    StatsResponse,
)
from golfboard.client import ClientError, EspnClient, UpstreamHTTPError
from golfboard.config import TourRules, get_tour, iter_tours
from golfboard.engine import (
    LeaderboardError,
    NoScorecardDataError,
    PlayerNotFoundError,
    ScorecardError,
    collect_recent_results,
    collect_season_history,
    collect_season_results,
    event_date_key,
    find_player_rank,
    find_stat_category,
    normalize_leaderboard,
    parse_event_log,
    parse_player_profile,
    parse_player_scorecard,
    parse_player_search,
    parse_schedule,
    parse_stat_categories,
    search_leaderboard,
    season_history_years,
)
from golfboard.engine.search import MIN_QUERY_LENGTH
from golfboard.export import export_leaderboard_to_csv
from golfboard.models import Leaderboard, SeasonResults, Tour


def _rules(slug: str) -> TourRules:
    try:
        return get_tour(slug)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown tour {slug!r}") from exc


def _resolve_tour(slug: str) -> Tour:
    return _rules(slug).tour


def _upstream_failure(exc: ClientError) -> HTTPException:
    if isinstance(exc, UpstreamHTTPError) and exc.status_code == 404:
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=502, detail=str(exc))


def _no_data(exc: LeaderboardError) -> HTTPException:
    return HTTPException(status_code=404, detail={"message": str(exc), "retryable": True})


def _client(request: Request) -> EspnClient:
    return request.app.state.client


async def _load_leaderboard(
    client: EspnClient,
    tour: Tour,
    *,
    event_id: str | None = None,
    event_date: str | None = None,
    force_refresh: bool = False,
) -> Leaderboard:
    dates = event_date_key(event_date) if event_date else None
    try:
        document = await client.scoreboard(tour, dates, force_refresh=force_refresh)
    except ClientError as exc:
        raise _upstream_failure(exc) from exc
    try:
        return normalize_leaderboard(document, tour, event_id)
    except LeaderboardError as exc:
        raise _no_data(exc) from exc


def create_app(client: EspnClient | None = None) -> FastAPI:
    owns_client = client is None

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_client:
            await app.state.client.close()

    app = FastAPI(title="golfboard", lifespan=lifespan)
    app.state.client = client or EspnClient()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/tours")
    async def tours() -> list[dict[str, Any]]:
        return [
            {"slug": rules.slug, "name": rules.display_name, "short_name": rules.short_name}
            for rules in iter_tours()
        ]

    @app.get("/tours/{tour}/leaderboard", response_model=LeaderboardResponse)
    async def leaderboard(
        tour: str,
        request: Request,
        q: str | None = Query(None, description="Filter by player name or country"),
        force_refresh: bool = False,
    ) -> LeaderboardResponse:
        resolved = _resolve_tour(tour)
        board = await _load_leaderboard(_client(request), resolved, force_refresh=force_refresh)
        return LeaderboardResponse(
            leaderboard=board,
            total_entries=len(board.entries),
            matched_entries=search_leaderboard(board.entries, q) if q else None,
        )

    @app.get("/tours/{tour}/leaderboard.csv")
    async def leaderboard_csv(tour: str, request: Request, force_refresh: bool = False) -> Response:
        resolved = _resolve_tour(tour)
        board = await _load_leaderboard(_client(request), resolved, force_refresh=force_refresh)
        filename = f"{resolved.value}-{board.tournament.id}.csv"
        return Response(
            content=export_leaderboard_to_csv(board),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/tours/{tour}/events/{event_id}/leaderboard", response_model=LeaderboardResponse)
    async def event_leaderboard(
        tour: str,
        event_id: str,
        request: Request,
        date: str | None = Query(None, description="Event start date (ISO 8601)"),
        force_refresh: bool = False,
    ) -> LeaderboardResponse:
        resolved = _resolve_tour(tour)
        board = await _load_leaderboard(
            _client(request),
            resolved,
            event_id=event_id,
            event_date=date,
            force_refresh=force_refresh,
        )
        return LeaderboardResponse(leaderboard=board, total_entries=len(board.entries))

    @app.get("/tours/{tour}/schedule", response_model=ScheduleResponse)
    async def schedule(tour: str, request: Request, year: int | None = None) -> ScheduleResponse:
        resolved = _resolve_tour(tour)
        season = year or datetime.now(timezone.utc).year
        try:
            document = await _client(request).schedule(resolved, season)
        except ClientError as exc:
            raise _upstream_failure(exc) from exc
        return ScheduleResponse(
            tour=resolved.value,
            tournaments=parse_schedule(document, resolved, include_country=False),
        )

    @app.get(
        "/tours/{tour}/events/{event_id}/players/{player_id}/scorecard",
        response_model=ScorecardResponse,
    )
    async def scorecard(
        tour: str,
        event_id: str,
        player_id: str,
        request: Request,
        date: str | None = Query(None, description="Event start date (ISO 8601)"),
        name: str | None = None,
    ) -> ScorecardResponse:
        resolved = _resolve_tour(tour)
        dates = event_date_key(date) if date else None
        try:
            document = await _client(request).scoreboard(resolved, dates)
        except ClientError as exc:
            raise _upstream_failure(exc) from exc
        try:
            card = parse_player_scorecard(
                document,
                event_id=event_id,
                player_id=player_id,
                player_name=name or player_id,
            )
        except (PlayerNotFoundError, NoScorecardDataError) as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ScorecardError as exc:
            raise HTTPException(status_code=404, detail={"message": str(exc), "retryable": True}) from exc
        return ScorecardResponse(
            scorecard=card,
            rounds_complete=sum(1 for card_round in card.rounds if card_round.is_complete),
        )

    @app.get("/tours/{tour}/stats", response_model=StatsResponse)
    async def stats(tour: str, request: Request) -> StatsResponse:
        resolved = _resolve_tour(tour)
        try:
            document = await _client(request).statistics(resolved)
        except ClientError as exc:
            raise _upstream_failure(exc) from exc
        return StatsResponse(tour=resolved.value, categories=parse_stat_categories(document))

    @app.get("/tours/{tour}/stats/{metric}", response_model=StatLeadersResponse)
    async def stat_leaders(
        tour: str,
        metric: str,
        request: Request,
        player_id: str | None = None,
    ) -> StatLeadersResponse:
        resolved = _resolve_tour(tour)
        try:
            document = await _client(request).statistics(resolved)
        except ClientError as exc:
            raise _upstream_failure(exc) from exc
        category = find_stat_category(parse_stat_categories(document), metric)
        leaders = category.leaders if category else []
        return StatLeadersResponse(
            tour=resolved.value,
            metric=metric,
            category=category,
            leaders=leaders,
            player_rank=find_player_rank(leaders, player_id) if player_id else None,
        )

    @app.get("/tours/{tour}/players/{player_id}/results", response_model=RecentResultsResponse)
    async def recent_results(tour: str, player_id: str, request: Request) -> RecentResultsResponse:
        resolved = _resolve_tour(tour)
        documents = await _client(request).lookback_scoreboards(resolved, date.today())
        return RecentResultsResponse(
            player_id=player_id,
            results=collect_recent_results(documents, player_id),
            failed_lookups=sum(1 for document in documents if document is None),
        )

    @app.get("/tours/{tour}/players/{player_id}", response_model=PlayerProfileResponse)
    async def player_profile(
        tour: str,
        player_id: str,
        request: Request,
        name: str | None = Query(None, description="Display name to attach to the profile"),
    ) -> PlayerProfileResponse:
        rules = _rules(tour)
        espn = _client(request)
        years = season_history_years(datetime.now(timezone.utc).year)
        try:
            overview, seasons = await asyncio.gather(
                espn.player_overview(rules.tour, player_id),
                espn.season_stats(rules.tour, player_id, years),
            )
        except ClientError as exc:
            raise _upstream_failure(exc) from exc
        profile = parse_player_profile(
            overview,
            player_id=player_id,
            stats_name=rules.stats_name,
            player_name=name,
            season_history=collect_season_history(zip(years, seasons)),
        )
        return PlayerProfileResponse(
            tour=rules.tour.value,
            profile=profile,
            failed_lookups=sum(1 for document in seasons if document is None),
        )

    @app.get("/tours/{tour}/players/{player_id}/seasons/{year}", response_model=SeasonResultsResponse)
    async def season_results(tour: str, player_id: str, year: int, request: Request) -> SeasonResultsResponse:
        resolved = _resolve_tour(tour)
        espn = _client(request)
        try:
            document = await espn.event_log(resolved, player_id, year)
        except ClientError as exc:
            raise _upstream_failure(exc) from exc
        entries = parse_event_log(document)
        details = await espn.event_log_details(entries)
        return SeasonResultsResponse(
            tour=resolved.value,
            player_id=player_id,
            season=SeasonResults(year=year, results=collect_season_results(entries, details)),
            failed_lookups=sum(1 for event_document, _, _ in details if event_document is None),
        )

    @app.get("/search", response_model=SearchResponse)
    async def search(request: Request, q: str = Query(..., description="Player name")) -> SearchResponse:
        query = q.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return SearchResponse(query=query)
        try:
            document = await _client(request).player_search(query)
        except ClientError as exc:
            raise _upstream_failure(exc) from exc
        return SearchResponse(query=query, results=parse_player_search(document))

    return app
