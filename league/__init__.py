"""
League orchestration for the fantasy league simulator.
Team registration, the draft, lineups and the weekly schedule/simulate cycle.
"""
from .config import LeagueConfig
from .draft_pool import DraftPool
from .errors import PreconditionNotMet, ValidationError
from .league import League

__all__ = [
    "League",
    "LeagueConfig",
    "DraftPool",
    "ValidationError",
    "PreconditionNotMet",
]
