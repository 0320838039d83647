from datetime import datetime, timezone

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from golfboard.api import create_app
from golfboard.client import EspnClient, ResponseCache
from golfboard.config import ClientSettings

from tests.payloads import (
    competitor,
    event,
    event_log,
    event_log_item,
    holes,
    linescore,
    overview,
    ranking,
    recent_event,
    scoreboard,
    season_statistics,
)


def _live_document():
    return scoreboard(
        event(
            "401703504",
            period=2,
            competitors=[
                competitor(
                    "46046",
                    "Scottie Scheffler",
                    order=1,
                    score="-7",
                    linescores=[linescore(1, "-5", hole_rows=holes(18)), linescore(2, "-2", hole_rows=holes(6))],
                ),
                competitor("3470", "Rory McIlroy", order=2, score="-4", country="Northern Ireland"),
            ],
        )
    )


def _stats_document():
    return {
        "stats": {
            "categories": [
                {
                    "name": "scoringAverage",
                    "displayName": "Scoring Average",
                    "leaders": [
                        {"athlete": {"id": "46046", "displayName": "Scottie Scheffler"}, "value": 68.6, "displayValue": "68.6"},
                        {"athlete": {"id": "3470", "displayName": "Rory McIlroy"}, "value": 69.2, "displayValue": "69.2"},
                    ],
                }
            ]
        }
    }


class Upstream:
    """Routes upstream requests to canned documents and records what was asked."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.scoreboard = _live_document()
        self.fail_scoreboard = False
        self.garble_scoreboard = False
        self.fail_overview = False
        self.fail_event_log = False
        self.missing_seasons: set[str] = set()
        self.missing_events: set[str] = set()
        self.event_log = event_log(
            event_log_item("401703504", "46046"),
            event_log_item("401703400", "46046"),
            event_log_item("401703300", "46046", played=False),
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/overview"):
            if self.fail_overview:
                return httpx.Response(503)
            return httpx.Response(
                200,
                json=overview(
                    rankings=[ranking("yardsPerDrive", "YDS/DRV", "312.4", 12)],
                    recent=[recent_event("401703504", "The Open", "2025-07-17T07:00Z", position="1", score="-17")],
                ),
            )
        if "/seasons/" in path:
            return self._core(path)
        if request.url.host == "sports.core.api.espn.com" and "/events/" in path:
            return self._reference(path)
        if path.endswith("/statistics"):
            return httpx.Response(200, json=_stats_document())
        if path.endswith("/search"):
            return httpx.Response(
                200,
                json={"items": [{"id": "46046", "displayName": "Scottie Scheffler", "sport": "golf"}]},
            )
        if self.fail_scoreboard:
            return httpx.Response(503)
        if self.garble_scoreboard:
            return httpx.Response(200, content=b"not gzip", headers={"content-encoding": "gzip"})
        return httpx.Response(200, json=self.scoreboard)

    def _core(self, path: str) -> httpx.Response:
        if path.endswith("/eventlog"):
            if self.fail_event_log:
                return httpx.Response(503)
            return httpx.Response(200, json=self.event_log)
        year = path.split("/seasons/", 1)[1].split("/", 1)[0]
        if year in self.missing_seasons:
            return httpx.Response(500)
        return httpx.Response(200, json=season_statistics(int(year[-1]) + 10, wins=1))

    def _reference(self, path: str) -> httpx.Response:
        if path.endswith("/score"):
            return httpx.Response(200, json={"displayValue": "-17"})
        if path.endswith("/status"):
            return httpx.Response(200, json={"position": {"displayName": "1"}})
        event_id = path.rsplit("/", 1)[-1]
        if event_id in self.missing_events:
            return httpx.Response(404)
        names = {"401703504": ("2025-07-17T07:00Z", "The Open"), "401703400": ("2025-04-10T07:00Z", "Masters")}
        event_date, name = names.get(event_id, ("2025-01-01T07:00Z", "Sentry"))
        return httpx.Response(200, json={"name": name, "date": event_date})


@pytest.fixture
def upstream():
    return Upstream()


@pytest.fixture
async def client(upstream):
    espn = EspnClient(settings=ClientSettings(), cache=ResponseCache(), transport=httpx.MockTransport(upstream))
    app = create_app(espn)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await espn.close()


@pytest.mark.anyio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_list_tours(client):
    resp = await client.get("/tours")
    assert resp.status_code == 200
    assert {item["slug"] for item in resp.json()} == {"pga", "lpga", "eur", "champions-tour"}


@pytest.mark.anyio
async def test_tour_leaderboard(client):
    resp = await client.get("/tours/pga/leaderboard")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["total_entries"] == 2
    assert payload["matched_entries"] is None
    board = payload["leaderboard"]
    assert board["round"] == 2
    assert board["tournament"]["id"] == "401703504"
    leader = board["entries"][0]
    assert leader["player"]["name"] == "Scottie Scheffler"
    assert leader["score"] == "-7"
    assert leader["today"] == "-2"
    assert leader["thru"] == "6"


@pytest.mark.anyio
async def test_leaderboard_search_filter(client):
    resp = await client.get("/tours/pga/leaderboard", params={"q": "ireland"})
    assert resp.status_code == 200
    assert [entry["player"]["id"] for entry in resp.json()["matched_entries"]] == ["3470"]


@pytest.mark.anyio
async def test_leaderboard_is_cached_unless_refresh_forced(client, upstream):
    await client.get("/tours/pga/leaderboard")
    await client.get("/tours/pga/leaderboard")
    assert len(upstream.requests) == 1

    await client.get("/tours/pga/leaderboard", params={"force_refresh": "true"})
    assert len(upstream.requests) == 2


@pytest.mark.anyio
async def test_unknown_tour(client):
    resp = await client.get("/tours/korn-ferry/leaderboard")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_no_events_is_retryable_not_found(client, upstream):
    upstream.scoreboard = {"events": []}

    resp = await client.get("/tours/pga/leaderboard")

    assert resp.status_code == 404
    assert resp.json()["detail"] == {"message": "No tournament data available", "retryable": True}


@pytest.mark.anyio
async def test_upstream_failure_maps_to_bad_gateway(client, upstream):
    upstream.fail_scoreboard = True
    resp = await client.get("/tours/pga/leaderboard")
    assert resp.status_code == 502


@pytest.mark.anyio
async def test_event_leaderboard_uses_date_key(client, upstream):
    resp = await client.get(
        "/tours/pga/events/401703504/leaderboard",
        params={"date": "2025-07-17T07:00Z"},
    )

    assert resp.status_code == 200
    assert upstream.requests[-1].url.params["dates"] == "20250717"
    assert resp.json()["leaderboard"]["tournament"]["id"] == "401703504"


@pytest.mark.anyio
async def test_event_leaderboard_unmatched_id_falls_back(client):
    resp = await client.get("/tours/pga/events/999/leaderboard")
    assert resp.status_code == 200
    assert resp.json()["leaderboard"]["tournament"]["id"] == "401703504"


@pytest.mark.anyio
async def test_event_leaderboard_without_events(client, upstream):
    upstream.scoreboard = {"events": []}
    resp = await client.get("/tours/pga/events/999/leaderboard")
    assert resp.status_code == 404
    assert resp.json()["detail"]["message"] == "Event 999 not found"


@pytest.mark.anyio
async def test_leaderboard_csv_export(client):
    resp = await client.get("/tours/pga/leaderboard.csv")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    lines = resp.text.strip().splitlines()
    assert lines[0].startswith("position,player_id,player")
    assert len(lines) == 3


@pytest.mark.anyio
async def test_schedule(client, upstream):
    resp = await client.get("/tours/lpga/schedule", params={"year": 2025})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["tour"] == "lpga"
    assert [item["id"] for item in payload["tournaments"]] == ["401703504"]
    assert upstream.requests[-1].url.params["dates"] == "2025"


@pytest.mark.anyio
async def test_scorecard(client):
    resp = await client.get(
        "/tours/pga/events/401703504/players/46046/scorecard",
        params={"name": "Scottie Scheffler"},
    )
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["rounds_complete"] == 1
    assert payload["scorecard"]["player_name"] == "Scottie Scheffler"
    assert [item["round"] for item in payload["scorecard"]["rounds"]] == [1, 2]


@pytest.mark.anyio
async def test_scorecard_unknown_player(client):
    resp = await client.get("/tours/pga/events/401703504/players/nobody/scorecard")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_stats(client):
    resp = await client.get("/tours/pga/stats")
    assert resp.status_code == 200
    assert resp.json()["categories"][0]["name"] == "scoringAverage"


@pytest.mark.anyio
async def test_stat_leaders_with_player_rank(client):
    resp = await client.get("/tours/pga/stats/scoring average", params={"player_id": "3470"})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["category"]["name"] == "scoringAverage"
    assert payload["player_rank"] == 2
    assert len(payload["leaders"]) == 2


@pytest.mark.anyio
async def test_recent_results(client):
    resp = await client.get("/tours/pga/players/46046/results")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["failed_lookups"] == 0
    assert [item["tournament_id"] for item in payload["results"]] == ["401703504"]


@pytest.mark.anyio
async def test_search(client):
    resp = await client.get("/search", params={"q": "scheffler"})
    assert resp.status_code == 200
    assert resp.json()["results"][0]["id"] == "46046"

    short = await client.get("/search", params={"q": "s"})
    assert short.json() == {"query": "s", "results": []}


@pytest.mark.anyio
async def test_undecodable_upstream_body_maps_to_bad_gateway(client, upstream):
    upstream.garble_scoreboard = True

    resp = await client.get("/tours/pga/leaderboard")
    assert resp.status_code == 502


@pytest.mark.anyio
async def test_player_profile(client, upstream):
    this_year = datetime.now(timezone.utc).year
    upstream.missing_seasons = {str(this_year - 1)}

    resp = await client.get("/tours/pga/players/46046", params={"name": "Scottie Scheffler"})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["tour"] == "pga"
    assert payload["failed_lookups"] == 1
    profile = payload["profile"]
    assert profile["player"] == {
        "id": "46046",
        "name": "Scottie Scheffler",
        "first_name": None,
        "last_name": None,
        "country": None,
        "country_code": None,
        "amateur": None,
        "image_url": None,
    }
    assert profile["wins"] == 4
    assert profile["scoring_avg"] == {"value": "68.7", "rank": None}
    assert profile["driving_distance"] == {"value": "312.4", "rank": 12}
    assert [item["tournament_id"] for item in profile["recent_results"]] == ["401703504"]
    assert [season["year"] for season in profile["season_history"]] == [this_year, this_year - 2, this_year - 3]


@pytest.mark.anyio
async def test_player_profile_upstream_failure(client, upstream):
    upstream.fail_overview = True
    resp = await client.get("/tours/pga/players/46046")
    assert resp.status_code == 502

    unknown = await client.get("/tours/korn-ferry/players/46046")
    assert unknown.status_code == 404


@pytest.mark.anyio
async def test_season_results(client, upstream):
    upstream.missing_events = {"401703400"}

    resp = await client.get("/tours/pga/players/46046/seasons/2025")

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["player_id"] == "46046"
    assert payload["failed_lookups"] == 1
    assert payload["season"]["year"] == 2025
    assert payload["season"]["results"] == [
        {
            "tournament_id": "401703504",
            "tournament_name": "The Open",
            "date": "2025-07-17T07:00Z",
            "position": "1",
            "score": "-17",
        }
    ]
    assert all(request.url.scheme == "https" for request in upstream.requests)


@pytest.mark.anyio
async def test_season_results_event_log_failure(client, upstream):
    upstream.fail_event_log = True
    resp = await client.get("/tours/pga/players/46046/seasons/2025")
    assert resp.status_code == 502
