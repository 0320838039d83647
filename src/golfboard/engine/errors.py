"""Structural failures raised by the engine.

Field-level anomalies never raise; these only signal that a document has
nothing to normalize.
"""

from __future__ import annotations


class LeaderboardError(RuntimeError):
    """Base for leaderboard normalization failures."""


class NoDataError(LeaderboardError):
    def __init__(self, message: str = "No tournament data available"):
        super().__init__(message)


class EventNotFoundError(LeaderboardError):
    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class ScorecardError(RuntimeError):
    """Base for scorecard lookup failures."""


class ScorecardEventNotFoundError(ScorecardError):
    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class NoCompetitionError(ScorecardError):
    def __init__(self):
        super().__init__("No competition data available")


class PlayerNotFoundError(ScorecardError):
    def __init__(self, player_id: str):
        super().__init__(f"Player {player_id} not found in competition")
        self.player_id = player_id


class NoScorecardDataError(ScorecardError):
    def __init__(self):
        super().__init__("No scorecard data available for this player")


__all__ = [
    "EventNotFoundError",
    "LeaderboardError",
    "NoCompetitionError",
    "NoDataError",
    "NoScorecardDataError",
    "PlayerNotFoundError",
    "ScorecardError",
    "ScorecardEventNotFoundError",
]
