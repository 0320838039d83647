"""Lightweight REST client for the golfboard API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the golfboard REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--tour", default="pga", help="Tour slug (pga, lpga, eur, champions-tour)")
    parser.add_argument("--event", help="Event id; defaults to the tour's current event")
    parser.add_argument("--date", help="Event start date (ISO 8601) for past events")
    parser.add_argument("--search", help="Filter the leaderboard by player name or country")
    parser.add_argument("--refresh", action="store_true", help="Ask the server to bypass its cache")
    parser.add_argument("--schedule", action="store_true", help="Print the season schedule and exit")
    parser.add_argument("--scorecard", metavar="PLAYER_ID", help="Fetch a player's scorecard (requires --event)")
    parser.add_argument("--export-path", type=Path, help="Download the leaderboard CSV to this path")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.schedule:
            resp = client.get(f"/tours/{args.tour}/schedule")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.scorecard:
            if not args.event:
                raise SystemExit("--scorecard requires --event")
            params = {"date": args.date} if args.date else {}
            resp = client.get(
                f"/tours/{args.tour}/events/{args.event}/players/{args.scorecard}/scorecard",
                params=params,
            )
            if resp.status_code == 404:
                raise SystemExit(f"scorecard unavailable: {resp.json().get('detail')}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.export_path:
            resp = client.get(f"/tours/{args.tour}/leaderboard.csv", params={"force_refresh": args.refresh})
            resp.raise_for_status()
            args.export_path.write_text(resp.text)
            print(f"CSV export saved to {args.export_path}")
            return

        params: dict[str, str | bool] = {"force_refresh": args.refresh}
        if args.event:
            if args.date:
                params["date"] = args.date
            path = f"/tours/{args.tour}/events/{args.event}/leaderboard"
        else:
            if args.search:
                params["q"] = args.search
            path = f"/tours/{args.tour}/leaderboard"
        resp = client.get(path, params=params)
        if resp.status_code == 404:
            raise SystemExit(f"no leaderboard: {resp.json().get('detail')}")
        resp.raise_for_status()
        payload = resp.json()

    board = payload["leaderboard"]
    print(f"{board['tournament']['name']} - Round {board['round']}")
    entries = payload.get("matched_entries") or board["entries"]
    for entry in entries:
        print(f"{entry['position']:>4}  {entry['player']['name']:<28} {entry['score']:>4} {entry['thru']:>3}")


if __name__ == "__main__":
    main()
