import json
from pathlib import Path

import httpx
import pytest

from golfboard import cli
from golfboard.client import EspnClient
from golfboard.config import ClientSettings

from tests.payloads import competitor, event, holes, linescore, scoreboard


def _install_upstream(monkeypatch, document):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=document)

    def factory() -> EspnClient:
        return EspnClient(settings=ClientSettings(), transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "EspnClient", factory)


def _document():
    return scoreboard(
        event(
            "401",
            name="Masters Tournament",
            period=4,
            state="post",
            competitors=[
                competitor(
                    "1",
                    "Scottie Scheffler",
                    order=1,
                    score="-11",
                    linescores=[linescore(4, "-3", hole_rows=holes(18))],
                ),
                competitor("2", "Rory McIlroy", order=2, score="-9", country="Northern Ireland"),
                competitor("3", "Tiger Woods", order=50, score="+8", status="CUT"),
            ],
        )
    )


def test_leaderboard_table(monkeypatch, capsys):
    _install_upstream(monkeypatch, _document())

    cli.main(["leaderboard", "--limit", "2"])

    out = capsys.readouterr().out
    assert "Masters Tournament - Round 4 (post)" in out
    assert "Scottie Scheffler" in out
    assert "Rory McIlroy" in out
    assert "Tiger Woods" not in out


def test_leaderboard_json_with_search(monkeypatch, capsys):
    _install_upstream(monkeypatch, _document())

    cli.main(["leaderboard", "--search", "ireland", "--json"])

    out = capsys.readouterr().out
    payload = json.loads(out[out.index("{"):])
    assert [entry["player"]["id"] for entry in payload["entries"]] == ["2"]
    assert payload["tournament"]["id"] == "401"


def test_leaderboard_csv(monkeypatch, capsys, tmp_path: Path):
    _install_upstream(monkeypatch, _document())
    target = tmp_path / "board.csv"

    cli.main(["leaderboard", "--csv", str(target)])

    lines = target.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 4
    assert lines[3].endswith(",cut")
    assert "Wrote 3 entries" in capsys.readouterr().out


def test_schedule(monkeypatch, capsys):
    _install_upstream(monkeypatch, _document())

    cli.main(["schedule", "--tour", "pga", "--year", "2025"])

    out = capsys.readouterr().out
    assert "2025-07-17" in out
    assert "Masters Tournament" in out


def test_no_data_exits_with_error(monkeypatch):
    _install_upstream(monkeypatch, {"events": []})

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["leaderboard"])

    assert "No tournament data available" in str(excinfo.value.code)


def test_unknown_tour_rejected_by_parser(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["leaderboard", "--tour", "korn-ferry"])
    assert excinfo.value.code == 2
