"""Command-line interface for viewing live leaderboards and schedules."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from golfboard.client import ClientError, EspnClient
from golfboard.config import get_tour, iter_tours
from golfboard.engine import (
    LeaderboardError,
    event_date_key,
    normalize_leaderboard,
    parse_schedule,
    search_leaderboard,
)
from golfboard.export import export_leaderboard_to_csv
from golfboard.models import Leaderboard, LeaderboardEntry, Tour, Tournament


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Golf tournament leaderboards")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tour_choices = [rules.slug for rules in iter_tours()]

    board = subparsers.add_parser("leaderboard", help="Show the current leaderboard")
    board.add_argument("--tour", default=Tour.PGA.value, choices=tour_choices, help="Tour slug")
    board.add_argument("--event", default=None, help="Event id to show instead of the current event")
    board.add_argument(
        "--date",
        default=None,
        help="Event start date (ISO 8601), used with --event for past tournaments",
    )
    board.add_argument("--limit", type=int, default=None, help="Only print the first N entries")
    board.add_argument("--search", default=None, help="Filter entries by player name or country")
    board.add_argument("--csv", type=Path, default=None, help="Write the leaderboard to a CSV file")
    board.add_argument("--json", action="store_true", help="Print the leaderboard as JSON")
    board.add_argument("--refresh", action="store_true", help="Bypass the response cache")

    schedule = subparsers.add_parser("schedule", help="List the season schedule")
    schedule.add_argument("--tour", default=Tour.PGA.value, choices=tour_choices, help="Tour slug")
    schedule.add_argument("--year", type=int, default=None, help="Season year (defaults to this year)")
    schedule.add_argument("--json", action="store_true", help="Print the schedule as JSON")
    return parser


async def _fetch_leaderboard(args: argparse.Namespace) -> Leaderboard:
    tour = get_tour(args.tour).tour
    dates = event_date_key(args.date) if args.date else None
    async with EspnClient() as client:
        document = await client.scoreboard(tour, dates, force_refresh=args.refresh)
    return normalize_leaderboard(document, tour, args.event)


async def _fetch_schedule(args: argparse.Namespace) -> list[Tournament]:
    tour = get_tour(args.tour).tour
    year = args.year or datetime.now(timezone.utc).year
    async with EspnClient() as client:
        document = await client.schedule(tour, year)
    return parse_schedule(document, tour)


def _format_entry(entry: LeaderboardEntry) -> str:
    rounds = " ".join(f"{value:>3}" for value in entry.rounds)
    name = entry.player.name
    if entry.in_playoff:
        name += " (playoff)"
    return f"{entry.position:>4}  {name:<28} {entry.score:>4} {entry.today:>4} {entry.thru:>3}  {rounds}"


def _print_leaderboard(leaderboard: Leaderboard, entries: Sequence[LeaderboardEntry]) -> None:
    tournament = leaderboard.tournament
    print(f"{tournament.name} - Round {leaderboard.round} ({tournament.status.value})")
    if tournament.venue:
        print(f"{tournament.venue}, {tournament.location}" if tournament.location else tournament.venue)
    if leaderboard.is_playoff:
        print("Playoff in progress")
    print(f"{'POS':>4}  {'PLAYER':<28} {'TOT':>4} {'TDY':>4} {'THR':>3}  ROUNDS")
    for entry in entries:
        print(_format_entry(entry))


def _run_leaderboard(args: argparse.Namespace) -> None:
    leaderboard = asyncio.run(_fetch_leaderboard(args))
    entries = list(leaderboard.entries)
    if args.search:
        entries = search_leaderboard(entries, args.search)
        print(f"Matched {len(entries)}/{len(leaderboard.entries)} players for {args.search!r}")
    if args.limit is not None:
        entries = entries[: max(0, args.limit)]

    if args.csv:
        args.csv.write_text(export_leaderboard_to_csv(leaderboard, entries=entries), encoding="utf-8")
        print(f"Wrote {len(entries)} entries to {args.csv}")
    if args.json:
        payload = leaderboard.model_dump(mode="json")
        payload["entries"] = [entry.model_dump(mode="json") for entry in entries]
        print(json.dumps(payload, indent=2))
    elif not args.csv:
        _print_leaderboard(leaderboard, entries)


def _run_schedule(args: argparse.Namespace) -> None:
    tournaments = asyncio.run(_fetch_schedule(args))
    if args.json:
        print(json.dumps([item.model_dump(mode="json") for item in tournaments], indent=2))
        return
    for item in tournaments:
        purse = f"  {item.purse}" if item.purse else ""
        print(f"{item.date[:10]}  {item.status.value:<4} {item.name}{purse}")


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "leaderboard":
            _run_leaderboard(args)
        else:
            _run_schedule(args)
    except (LeaderboardError, ClientError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
