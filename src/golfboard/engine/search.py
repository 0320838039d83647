"""Player lookup within a leaderboard and across the upstream search index."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from golfboard.models import LeaderboardEntry, SearchResult

MIN_QUERY_LENGTH = 2


def search_leaderboard(entries: Sequence[LeaderboardEntry], query: str) -> List[LeaderboardEntry]:
    needle = query.strip().lower()
    if not needle:
        return []
    return [
        entry
        for entry in entries
        if needle in entry.player.name.lower()
        or (entry.player.country is not None and needle in entry.player.country.lower())
    ]


def parse_player_search(document: Any) -> List[SearchResult]:
    items = document.get("items") if isinstance(document, Mapping) else None
    if not isinstance(items, list):
        return []
    results: List[SearchResult] = []
    for item in items:
        if not isinstance(item, Mapping) or item.get("sport") != "golf":
            continue
        if item.get("id") is None or not item.get("displayName"):
            continue
        country = item.get("citizenshipCountry")
        results.append(
            SearchResult(
                id=str(item["id"]),
                name=str(item["displayName"]),
                country=str(country["name"]) if isinstance(country, Mapping) and country.get("name") else None,
            )
        )
    return results


__all__ = ["MIN_QUERY_LENGTH", "parse_player_search", "search_leaderboard"]
