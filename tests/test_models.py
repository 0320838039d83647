from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from golfboard.models import (
    HoleScore,
    Leaderboard,
    LeaderboardEntry,
    Player,
    RoundScorecard,
    Tour,
    Tournament,
    TournamentStatus,
)


def _tournament(**overrides):
    values = {"id": "401", "name": "The Open", "date": "2025-07-17", "status": TournamentStatus.IN, "tour": Tour.PGA}
    values.update(overrides)
    return Tournament(**values)


def _entry(player_id: str, position_num: int, score: str = "-3", score_num: int = -3):
    return LeaderboardEntry(
        player=Player(id=player_id, name=f"Player {player_id}"),
        position=str(position_num),
        position_num=position_num,
        score=score,
        score_num=score_num,
        today="E",
        today_num=0,
        thru="F",
    )


def test_models_are_frozen():
    tournament = _tournament()
    with pytest.raises(ValidationError):
        tournament.name = "Renamed"


def test_tournament_requires_id():
    with pytest.raises(ValidationError):
        _tournament(id="")


def test_entry_score_text_must_encode_score_num():
    assert _entry("1", 1, "E", 0).score_num == 0
    with pytest.raises(ValidationError):
        _entry("1", 1, "-3", -4)


def test_leaderboard_requires_sorted_entries():
    now = datetime.now(timezone.utc)
    board = Leaderboard(tournament=_tournament(), entries=[_entry("1", 1), _entry("2", 1), _entry("3", 4)], round=2, last_updated=now)
    assert board.leader.player.id == "1"
    assert board.find_entry("3").position_num == 4
    assert board.find_entry("9") is None

    with pytest.raises(ValidationError):
        Leaderboard(tournament=_tournament(), entries=[_entry("1", 2), _entry("2", 1)], round=2, last_updated=now)


def test_leaderboard_round_is_regulation_only():
    now = datetime.now(timezone.utc)
    with pytest.raises(ValidationError):
        Leaderboard(tournament=_tournament(), round=5, last_updated=now)
    assert Leaderboard(tournament=_tournament(), round=1, last_updated=now).leader is None


def test_hole_score_to_par_consistency():
    hole = HoleScore.from_strokes(7, 3, -1)
    assert hole.par == 4
    with pytest.raises(ValidationError):
        HoleScore(hole_number=7, strokes=3, par=4, to_par=0)
    with pytest.raises(ValidationError):
        HoleScore(hole_number=19, strokes=4, par=4, to_par=0)


def test_round_scorecard_totals_validated():
    holes = [HoleScore.from_strokes(number, 4, 0) for number in range(1, 19)]
    card = RoundScorecard.from_holes(1, reversed(holes))
    assert card.is_complete is True
    assert card.holes[0].hole_number == 1
    assert card.total_strokes == 72

    with pytest.raises(ValidationError):
        RoundScorecard(round=1, holes=holes[:2], total_strokes=9, to_par=0)
    with pytest.raises(ValidationError):
        RoundScorecard(round=1, holes=holes[:2], total_strokes=8, to_par=0, is_complete=True)
    with pytest.raises(ValidationError):
        RoundScorecard(round=1, holes=[holes[0], holes[0]], total_strokes=8, to_par=0)
    with pytest.raises(ValidationError):
        RoundScorecard(round=1, total_strokes=0)
