import pytest

from golfboard.scores import format_score, format_to_par, parse_score


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("-5", -5),
        ("+3", 3),
        ("7", 7),
        (" -12 ", -12),
        ("E", 0),
        ("e", 0),
        ("", 0),
        (None, 0),
        ("abc", 0),
        ("--", 0),
        ("1.5", 0),
        (-4, -4),
        (2.0, 2),
        (float("inf"), 0),
        (True, 0),
        ({"value": 3}, 0),
    ],
)
def test_parse_score(value, expected):
    assert parse_score(value) == expected


def test_format_score_signs():
    assert format_score(0) == "E"
    assert format_score(4) == "+4"
    assert format_score(-7) == "-7"


def test_parse_format_round_trip():
    for score in range(-25, 26):
        assert parse_score(format_score(score)) == score


def test_even_and_absent_are_indistinguishable():
    assert parse_score("E") == parse_score(None) == parse_score("-") == 0


def test_format_to_par_missing_total():
    assert format_to_par(None) == "-"
    assert format_to_par(-3) == "-3"
    assert format_to_par(0) == "E"
