"""
Domain models for the fantasy league simulator.
"""
from .constants import Position, ScoringMode, WeekPhase
from .player import Player
from .team import Team
from .matchup import Matchup
from .game_result import (
    PlayerGameStats,
    MatchupResult,
    PreconditionNotMet,
    ScheduleResult,
    WeekResult,
    WeeklyReport,
)

__all__ = [
    "Position",
    "ScoringMode",
    "WeekPhase",
    "Player",
    "Team",
    "Matchup",
    "PlayerGameStats",
    "MatchupResult",
    "ScheduleResult",
    "WeekResult",
    "WeeklyReport",
    "PreconditionNotMet",
]
