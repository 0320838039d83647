from golfboard.ingest import RawScore, decode_scoreboard

from tests.payloads import competitor, event, holes, linescore, scoreboard


def test_raw_score_accepts_every_upstream_shape():
    assert RawScore.from_value(-12).value == -12
    assert RawScore.from_value("-12").value == -12
    assert RawScore.from_value("-12").display_value == "-12"
    assert RawScore.from_value("E").value == 0
    assert RawScore.from_value({"value": -8.0, "displayValue": "-8"}).value == -8
    assert RawScore.from_value({"displayValue": "+2"}).value == 2
    assert RawScore.from_value(None).value is None
    assert RawScore.from_value(None).relative == 0
    assert RawScore.from_value([1, 2]).value is None


def test_decode_tolerates_non_mapping_documents():
    assert decode_scoreboard(None).events == []
    assert decode_scoreboard([]).events == []
    assert decode_scoreboard({"events": "nope"}).events == []


def test_decode_skips_malformed_rows():
    document = scoreboard(
        event(
            "401",
            period=2,
            competitors=[
                competitor("1", "Scottie Scheffler", order=1, score="-5", linescores=[linescore(1, "-5")]),
                "not a competitor",
            ],
        ),
        42,
    )
    document["events"][0]["competitions"][0]["competitors"][0]["linescores"].append("junk")

    decoded = decode_scoreboard(document)

    assert len(decoded.events) == 1
    competition = decoded.events[0].competition
    assert competition is not None
    assert competition.period == 2
    assert len(competition.competitors) == 1
    assert len(competition.competitors[0].linescores) == 1


def test_decode_nested_holes_and_athlete_fields():
    row = competitor(
        "7",
        "Rory McIlroy",
        order="3",
        position="T3",
        status="Round 2",
        country="Northern Ireland",
        linescores=[linescore(2, "-3", hole_rows=holes(9, to_par="-1"))],
    )
    decoded = decode_scoreboard(scoreboard(event("401", competitors=[row])))
    raw = decoded.events[0].competition.competitors[0]

    assert raw.order == 3
    assert raw.position == "T3"
    assert raw.status_text == "Round 2"
    assert raw.athlete.display_name == "Rory McIlroy"
    assert raw.athlete.flag_alt == "Northern Ireland"
    hole_rows = raw.linescores[0].holes
    assert hole_rows is not None and len(hole_rows) == 9
    assert hole_rows[0].score_type == "-1"


def test_linescore_without_nested_list_has_no_hole_data():
    row = competitor("7", "Rory McIlroy", linescores=[linescore(1, "-2")])
    decoded = decode_scoreboard(scoreboard(event("401", competitors=[row])))
    assert decoded.events[0].competition.competitors[0].linescores[0].holes is None


def test_find_event_falls_back_to_first_event():
    decoded = decode_scoreboard(scoreboard(event("401"), event("402")))

    assert decoded.find_event("402").id == "402"
    assert decoded.find_event("999").id == "401"
    assert decoded.find_event(None).id == "401"
    assert decode_scoreboard({}).find_event("401") is None
