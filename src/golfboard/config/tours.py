"""Tour configuration for supported golf tours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Union

from golfboard.models import Tour


@dataclass(frozen=True)
class TourRules:
    tour: Tour
    display_name: str
    short_name: str
    stats_name: str

    @property
    def slug(self) -> str:
        return self.tour.value


_TOUR_RULES: Dict[Tour, TourRules] = {
    Tour.PGA: TourRules(
        tour=Tour.PGA,
        display_name="PGA Tour",
        short_name="PGA",
        stats_name="PGA TOUR",
    ),
    Tour.LPGA: TourRules(
        tour=Tour.LPGA,
        display_name="LPGA Tour",
        short_name="LPGA",
        stats_name="LPGA",
    ),
    Tour.EUR: TourRules(
        tour=Tour.EUR,
        display_name="DP World Tour",
        short_name="DP World",
        stats_name="DP WORLD TOUR",
    ),
    Tour.CHAMPIONS: TourRules(
        tour=Tour.CHAMPIONS,
        display_name="Champions Tour",
        short_name="Champions",
        stats_name="PGA TOUR CHAMPIONS",
    ),
}


def iter_tours() -> Iterable[TourRules]:
    """Return an iterator of all configured tours."""

    return _TOUR_RULES.values()


def get_tour(tour: Union[str, Tour]) -> TourRules:
    """Fetch rules for a tour slug, raising KeyError if missing."""

    if isinstance(tour, Tour):
        return _TOUR_RULES[tour]
    if not isinstance(tour, str):
        raise TypeError("tour must be a str or Tour")
    key = tour.strip().lower()
    for rules in _TOUR_RULES.values():
        if rules.slug == key:
            return rules
    raise KeyError(f"No tour configured for {tour!r}")


# Lookup by slug for callers that only hold the raw path segment.
TOURS_BY_SLUG: Mapping[str, TourRules] = {rules.slug: rules for rules in _TOUR_RULES.values()}
