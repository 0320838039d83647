"""Tolerant decoding of ESPN golf scoreboard payloads into fixed raw records."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field

from golfboard.scores import parse_score


logger = logging.getLogger(__name__)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (bool, Mapping, list)):
        return None
    text = str(value).strip()
    return text or None


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None
            return int(number) if math.isfinite(number) else None
    return None


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    return None


def _records(value: Any) -> List[Mapping[str, Any]]:
    return [item for item in _as_list(value) if isinstance(item, Mapping)]


class RawScore(BaseModel):
    """Score field that may arrive as a number, a string or a ``{value, displayValue}`` object."""

    value: Optional[int] = None
    display_value: Optional[str] = None

    @classmethod
    def from_value(cls, raw: Any) -> "RawScore":
        if isinstance(raw, Mapping):
            display = _as_str(raw.get("displayValue"))
            number = raw.get("value")
            if number is None or isinstance(number, bool):
                return cls(value=parse_score(display) if display else None, display_value=display)
            return cls(value=parse_score(number), display_value=display)
        if raw is None or isinstance(raw, (bool, list)):
            return cls()
        if isinstance(raw, str):
            return cls(value=parse_score(raw), display_value=raw.strip() or None)
        return cls(value=parse_score(raw))

    @property
    def relative(self) -> int:
        return self.value if self.value is not None else 0


class RawHoleLinescore(BaseModel):
    period: Optional[int] = None
    value: Optional[int] = None
    display_value: Optional[str] = None
    score_type: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawHoleLinescore":
        return cls(
            period=_as_int(row.get("period")),
            value=_as_int(row.get("value")),
            display_value=_as_str(row.get("displayValue")),
            score_type=_as_str(_as_mapping(row.get("scoreType")).get("displayValue")),
        )


class RawLinescore(BaseModel):
    """One round (or playoff period) entry from a competitor's ``linescores``."""

    period: Optional[int] = None
    value: Optional[float] = None
    display_value: Optional[str] = None
    holes: Optional[List[RawHoleLinescore]] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawLinescore":
        nested = row.get("linescores")
        holes = None
        if isinstance(nested, list):
            holes = [RawHoleLinescore.from_mapping(item) for item in _records(nested)]
        return cls(
            period=_as_int(row.get("period")),
            value=_as_float(row.get("value")),
            display_value=_as_str(row.get("displayValue")),
            holes=holes,
        )


class RawAthlete(BaseModel):
    id: Optional[str] = None
    display_name: Optional[str] = None
    full_name: Optional[str] = None
    short_name: Optional[str] = None
    flag_alt: Optional[str] = None
    flag_href: Optional[str] = None
    citizenship: Optional[str] = None
    amateur: Optional[bool] = None
    headshot: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawAthlete":
        flag = _as_mapping(row.get("flag"))
        return cls(
            id=_as_str(row.get("id")),
            display_name=_as_str(row.get("displayName")),
            full_name=_as_str(row.get("fullName")),
            short_name=_as_str(row.get("shortName")),
            flag_alt=_as_str(flag.get("alt")),
            flag_href=_as_str(flag.get("href")),
            citizenship=_as_str(row.get("citizenship")),
            amateur=_as_bool(row.get("amateur")),
            headshot=_as_str(_as_mapping(row.get("headshot")).get("href")),
        )


class RawCompetitor(BaseModel):
    id: Optional[str] = None
    order: Optional[int] = None
    athlete: Optional[RawAthlete] = None
    position: Optional[str] = None
    status_text: Optional[str] = None
    score: RawScore = Field(default_factory=RawScore)
    linescores: List[RawLinescore] = Field(default_factory=list)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawCompetitor":
        athlete = row.get("athlete")
        status = _as_mapping(row.get("status"))
        return cls(
            id=_as_str(row.get("id")),
            order=_as_int(row.get("order")),
            athlete=RawAthlete.from_mapping(athlete) if isinstance(athlete, Mapping) else None,
            position=_as_str(_as_mapping(status.get("position")).get("displayName")),
            status_text=_as_str(status.get("displayValue")),
            score=RawScore.from_value(row.get("score")),
            linescores=[RawLinescore.from_mapping(item) for item in _records(row.get("linescores"))],
        )


class RawVenue(BaseModel):
    full_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawVenue":
        address = _as_mapping(row.get("address"))
        return cls(
            full_name=_as_str(row.get("fullName")),
            city=_as_str(address.get("city")),
            state=_as_str(address.get("state")),
            country=_as_str(address.get("country")),
        )


class RawCompetition(BaseModel):
    id: Optional[str] = None
    purse: Optional[float] = None
    venue: Optional[RawVenue] = None
    period: Optional[int] = None
    competitors: List[RawCompetitor] = Field(default_factory=list)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawCompetition":
        venue = row.get("venue")
        return cls(
            id=_as_str(row.get("id")),
            purse=_as_float(row.get("purse")),
            venue=RawVenue.from_mapping(venue) if isinstance(venue, Mapping) else None,
            period=_as_int(_as_mapping(row.get("status")).get("period")),
            competitors=[RawCompetitor.from_mapping(item) for item in _records(row.get("competitors"))],
        )


class RawEvent(BaseModel):
    id: str
    name: str = ""
    short_name: Optional[str] = None
    date: str = ""
    end_date: Optional[str] = None
    state: Optional[str] = None
    competition: Optional[RawCompetition] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawEvent":
        competitions = _records(row.get("competitions"))
        status_type = _as_mapping(_as_mapping(row.get("status")).get("type"))
        return cls(
            id=_as_str(row.get("id")) or "",
            name=_as_str(row.get("name")) or "",
            short_name=_as_str(row.get("shortName")),
            date=_as_str(row.get("date")) or "",
            end_date=_as_str(row.get("endDate")),
            state=_as_str(status_type.get("state")),
            competition=RawCompetition.from_mapping(competitions[0]) if competitions else None,
        )


class RawScoreboard(BaseModel):
    events: List[RawEvent] = Field(default_factory=list)

    def find_event(self, event_id: Optional[str]) -> Optional[RawEvent]:
        """Return the matching event, or the first event when the id is unknown."""

        if not self.events:
            return None
        if event_id is not None:
            for event in self.events:
                if event.id == event_id:
                    return event
            logger.info(
                "Event %s not in scoreboard; falling back to first event %s",
                event_id,
                self.events[0].id,
            )
        return self.events[0]


def decode_scoreboard(document: Any) -> RawScoreboard:
    """Map an upstream scoreboard document (any shape) to a :class:`RawScoreboard`."""

    events = _records(_as_mapping(document).get("events"))
    return RawScoreboard(events=[RawEvent.from_mapping(item) for item in events])


__all__ = [
    "RawAthlete",
    "RawCompetition",
    "RawCompetitor",
    "RawEvent",
    "RawHoleLinescore",
    "RawLinescore",
    "RawScore",
    "RawScoreboard",
    "RawVenue",
    "decode_scoreboard",
]
