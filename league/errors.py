"""
Error taxonomy for league operations.

ValidationError is raised for bad input (unknown ids, duplicate names, capacity
limits, wrong lineup size); the league has not changed when it is raised.
PreconditionNotMet is returned inside a result, never raised: the call was a
no-op because the league was not ready for it.
"""
from typing import Dict, Any

from models.game_result import (
    EMPTY_LINEUP,
    EMPTY_SCHEDULE,
    NOT_ENOUGH_TEAMS,
    WEEK_ALREADY_SIMULATED,
    PreconditionNotMet,
)

# Validation codes
LEAGUE_FULL = "league_full"
DUPLICATE_TEAM_NAME = "duplicate_team_name"
INVALID_TEAM_NAME = "invalid_team_name"
TEAM_NOT_FOUND = "team_not_found"
PLAYER_NOT_AVAILABLE = "player_not_available"
PLAYER_NOT_FOUND = "player_not_found"
ROSTER_FULL = "roster_full"
PLAYER_NOT_ON_ROSTER = "player_not_on_roster"
LINEUP_SIZE = "lineup_size"
LINEUP_INVALID = "lineup_invalid"
INVALID_POSITION = "invalid_position"

__all__ = [
    "ValidationError",
    "PreconditionNotMet",
    "LEAGUE_FULL",
    "DUPLICATE_TEAM_NAME",
    "INVALID_TEAM_NAME",
    "TEAM_NOT_FOUND",
    "PLAYER_NOT_AVAILABLE",
    "PLAYER_NOT_FOUND",
    "ROSTER_FULL",
    "PLAYER_NOT_ON_ROSTER",
    "LINEUP_SIZE",
    "LINEUP_INVALID",
    "INVALID_POSITION",
    "NOT_ENOUGH_TEAMS",
    "EMPTY_SCHEDULE",
    "WEEK_ALREADY_SIMULATED",
    "EMPTY_LINEUP",
]


class ValidationError(ValueError):
    """Rejected input. ``code`` is one of the validation codes above."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def is_not_found(self) -> bool:
        return self.code.endswith("_not_found")

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code}
