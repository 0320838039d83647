"""Season statistic categories and their leaders."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from golfboard.models import StatCategory, StatLeader


# Alternate metric names (profile abbreviations, legacy keys) -> category name.
METRIC_ALIASES: Mapping[str, str] = {
    "officialamount": "officialAmount",
    "cuppoints": "cupPoints",
    "cutsmade": "cutsMade",
    "yardsperdrive": "yardsPerDrive",
    "strokesperhole": "strokesPerHole",
    "driveaccuracypct": "driveAccuracyPct",
    "greensinregputts": "greensInRegPutts",
    "greensinregpct": "greensInRegPct",
    "birdiesperround": "birdiesPerRound",
    "scoringaverage": "scoringAverage",
    "wins": "wins",
    "toptenfinishes": "topTenFinishes",
    "yds/drv": "yardsPerDrive",
    "drv acc": "driveAccuracyPct",
    "greenshit": "greensInRegPct",
    "pp gir": "greensInRegPutts",
    "bird/rnd": "birdiesPerRound",
    "saves": "sandSaves",
    "amount": "officialAmount",
    "earnings": "officialAmount",
}


def _parse_leaders(raw_leaders: Any) -> List[StatLeader]:
    leaders: List[StatLeader] = []
    if not isinstance(raw_leaders, list):
        return leaders
    for item in raw_leaders:
        if not isinstance(item, Mapping):
            continue
        athlete = item.get("athlete")
        if not isinstance(athlete, Mapping) or athlete.get("id") is None:
            continue
        value = item.get("value")
        leaders.append(
            StatLeader(
                rank=len(leaders) + 1,
                player_id=str(athlete["id"]),
                player_name=str(athlete.get("displayName") or "Unknown"),
                value=value if isinstance(value, (int, float)) and not isinstance(value, bool) else None,
                display_value=str(item.get("displayValue") or "-"),
            )
        )
    return leaders


def parse_stat_categories(document: Any) -> List[StatCategory]:
    stats = document.get("stats") if isinstance(document, Mapping) else None
    raw_categories = stats.get("categories") if isinstance(stats, Mapping) else None
    if not isinstance(raw_categories, list):
        return []

    categories: List[StatCategory] = []
    for raw in raw_categories:
        if not isinstance(raw, Mapping) or not raw.get("name"):
            continue
        categories.append(
            StatCategory(
                name=str(raw["name"]),
                display_name=str(raw.get("displayName") or raw["name"]),
                abbreviation=str(raw.get("abbreviation") or raw.get("shortDisplayName") or ""),
                leaders=_parse_leaders(raw.get("leaders")),
            )
        )
    return categories


def find_stat_category(categories: Sequence[StatCategory], metric: str) -> Optional[StatCategory]:
    """Resolve a metric by exact name, then alias, then fuzzy display-name match."""

    for category in categories:
        if category.name == metric:
            return category

    lowered = metric.strip().lower()
    alias = METRIC_ALIASES.get(lowered)
    if alias:
        for category in categories:
            if category.name == alias:
                return category

    if not lowered:
        return None
    for category in categories:
        display = category.display_name.lower()
        if lowered in display or display in lowered or category.abbreviation.lower() == lowered:
            return category
    return None


def find_player_rank(leaders: Sequence[StatLeader], player_id: str) -> Optional[int]:
    for leader in leaders:
        if leader.player_id == player_id:
            return leader.rank
    return None


__all__ = [
    "METRIC_ALIASES",
    "find_player_rank",
    "find_stat_category",
    "parse_stat_categories",
]
