"""CSV export helpers for leaderboard snapshots."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from io import StringIO
from typing import Sequence

from golfboard.engine.linescores import REGULATION_ROUNDS
from golfboard.models import Leaderboard, LeaderboardEntry


class LeaderboardExportError(RuntimeError):
    """Raised when a leaderboard cannot be exported."""


@dataclass(frozen=True)
class ExportTemplate:
    """Column layout of a leaderboard export."""

    round_columns: int = REGULATION_ROUNDS

    @property
    def headers(self) -> tuple[str, ...]:
        return (
            "position",
            "player_id",
            "player",
            "country",
            "score",
            "today",
            "thru",
            *(f"R{number}" for number in range(1, self.round_columns + 1)),
            "status",
        )


DEFAULT_TEMPLATE = ExportTemplate()


def _entry_row(entry: LeaderboardEntry, template: ExportTemplate) -> list[str]:
    if len(entry.rounds) > template.round_columns:
        raise LeaderboardExportError(
            f"Entry {entry.player.id} has {len(entry.rounds)} rounds; at most "
            f"{template.round_columns} can be exported"
        )
    rounds = list(entry.rounds) + [""] * (template.round_columns - len(entry.rounds))
    return [
        entry.position,
        entry.player.id,
        entry.player.name,
        entry.player.country or "",
        entry.score,
        entry.today,
        entry.thru,
        *rounds,
        entry.status.value,
    ]


def export_leaderboard_to_csv(
    leaderboard: Leaderboard,
    *,
    entries: Sequence[LeaderboardEntry] | None = None,
    template: ExportTemplate = DEFAULT_TEMPLATE,
) -> str:
    """Render the leaderboard (or a subset of its entries) as CSV text."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(template.headers)
    for entry in leaderboard.entries if entries is None else entries:
        writer.writerow(_entry_row(entry, template))
    return buffer.getvalue()


__all__ = [
    "DEFAULT_TEMPLATE",
    "ExportTemplate",
    "LeaderboardExportError",
    "export_leaderboard_to_csv",
]
