"""Tolerant decoding of the athlete overview, season statistics and event log payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from golfboard.ingest.espn import _as_bool, _as_int, _as_list, _as_mapping, _as_str, _records


def _display(value: Any) -> Optional[str]:
    """``displayValue`` of an object, or the value itself when it is already scalar."""

    if isinstance(value, Mapping):
        return _as_str(value.get("displayValue"))
    return _as_str(value)


class RawStatsSplit(BaseModel):
    display_name: Optional[str] = None
    stats: List[str] = Field(default_factory=list)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawStatsSplit":
        return cls(
            display_name=_as_str(row.get("displayName")),
            stats=[_as_str(item) or "" for item in _as_list(row.get("stats"))],
        )


class RawRankingCategory(BaseModel):
    name: str
    display_name: str
    abbreviation: str = ""
    display_value: Optional[str] = None
    rank: Optional[int] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> Optional["RawRankingCategory"]:
        name = _as_str(row.get("name"))
        if name is None:
            return None
        return cls(
            name=name,
            display_name=_as_str(row.get("displayName")) or name,
            abbreviation=_as_str(row.get("abbreviation")) or "",
            display_value=_as_str(row.get("displayValue")),
            rank=_as_int(row.get("rank")),
        )


class RawEventStat(BaseModel):
    """One entry of the overview's recent tournaments."""

    id: str
    name: str = ""
    short_name: Optional[str] = None
    date: str = ""
    position: Optional[str] = None
    score: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> Optional["RawEventStat"]:
        event_id = _as_str(row.get("id"))
        if event_id is None:
            return None
        competitions = _records(row.get("competitions"))
        competitors = _records(competitions[0].get("competitors")) if competitions else []
        competitor = competitors[0] if competitors else {}
        status = _as_mapping(competitor.get("status"))
        return cls(
            id=event_id,
            name=_as_str(row.get("name")) or "",
            short_name=_as_str(row.get("shortName")),
            date=_as_str(row.get("date")) or "",
            position=_as_str(_as_mapping(status.get("position")).get("displayName"))
            or _as_str(status.get("displayValue")),
            score=_display(competitor.get("score")),
        )


class RawOverview(BaseModel):
    labels: List[str] = Field(default_factory=list)
    splits: List[RawStatsSplit] = Field(default_factory=list)
    rankings: List[RawRankingCategory] = Field(default_factory=list)
    recent_events: List[RawEventStat] = Field(default_factory=list)

    def split_for(self, stats_name: str) -> Optional[RawStatsSplit]:
        """First statistics split whose name mentions the tour, e.g. ``"PGA TOUR"``."""

        wanted = stats_name.upper()
        for split in self.splits:
            if split.display_name and wanted in split.display_name.upper():
                return split
        return None


def decode_overview(document: Any) -> RawOverview:
    root = _as_mapping(document)
    statistics = _as_mapping(root.get("statistics"))
    rankings = [
        RawRankingCategory.from_mapping(item)
        for item in _records(_as_mapping(root.get("seasonRankings")).get("categories"))
    ]
    recent = [
        RawEventStat.from_mapping(item)
        for section in _records(root.get("recentTournaments"))
        for item in _records(section.get("eventsStats"))
    ]
    return RawOverview(
        labels=[_as_str(label) or "" for label in _as_list(statistics.get("labels"))],
        splits=[RawStatsSplit.from_mapping(item) for item in _records(statistics.get("splits"))],
        rankings=[item for item in rankings if item is not None],
        recent_events=[item for item in recent if item is not None],
    )


def decode_season_stats(document: Any) -> Dict[str, str]:
    """Display values of the ``general`` season statistics category, keyed by stat name."""

    categories = _records(_as_mapping(_as_mapping(document).get("splits")).get("categories"))
    general = next((item for item in categories if item.get("name") == "general"), None)
    values: Dict[str, str] = {}
    for stat in _records(general.get("stats") if general else None):
        name = _as_str(stat.get("name"))
        display = _as_str(stat.get("displayValue"))
        if name and display is not None:
            values.setdefault(name, display)
    return values


class RawEventLogItem(BaseModel):
    event_ref: Optional[str] = None
    competitor_ref: Optional[str] = None
    played: Optional[bool] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawEventLogItem":
        return cls(
            event_ref=_as_str(_as_mapping(row.get("event")).get("$ref")),
            competitor_ref=_as_str(_as_mapping(row.get("competitor")).get("$ref")),
            played=_as_bool(row.get("played")),
        )


def decode_event_log(document: Any) -> List[RawEventLogItem]:
    events = _as_mapping(_as_mapping(document).get("events"))
    return [RawEventLogItem.from_mapping(item) for item in _records(events.get("items"))]


class RawEventRef(BaseModel):
    name: Optional[str] = None
    short_name: Optional[str] = None
    date: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawEventRef":
        return cls(
            name=_as_str(row.get("name")),
            short_name=_as_str(row.get("shortName")),
            date=_as_str(row.get("date")),
        )


def decode_ref_event(document: Any) -> RawEventRef:
    return RawEventRef.from_mapping(_as_mapping(document))


def decode_ref_display(document: Any) -> Optional[str]:
    """``displayValue`` of a resolved score reference."""

    return _as_str(_as_mapping(document).get("displayValue"))


def decode_ref_position(document: Any) -> Optional[str]:
    """``position.displayName`` of a resolved status reference."""

    return _as_str(_as_mapping(_as_mapping(document).get("position")).get("displayName"))


__all__ = [
    "RawEventLogItem",
    "RawEventRef",
    "RawEventStat",
    "RawOverview",
    "RawRankingCategory",
    "RawStatsSplit",
    "decode_event_log",
    "decode_overview",
    "decode_ref_display",
    "decode_ref_event",
    "decode_ref_position",
    "decode_season_stats",
]
