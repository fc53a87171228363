"""
Game result DTOs for the fantasy league simulator.

PlayerGameStats holds the stat line and point delta for one player in one simulated game.
MatchupResult holds the outcome of one head-to-head matchup.
ScheduleResult and WeekResult wrap the league-level scheduling and simulation calls.
PreconditionNotMet rides inside any of them when the call was a no-op.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

# Precondition codes
NOT_ENOUGH_TEAMS = "not_enough_teams"
EMPTY_SCHEDULE = "empty_schedule"
WEEK_ALREADY_SIMULATED = "week_already_simulated"
EMPTY_LINEUP = "empty_lineup"


@dataclass(frozen=True)
class PreconditionNotMet:
    """Why an operation was a no-op. Returned inside a result, never raised."""

    code: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code}


@dataclass
class PlayerGameStats:
    """One player's stat line for a single simulated game."""

    player_id: int = 0
    name: str = ""
    position: str = ""
    stats: Dict[str, int] = field(default_factory=dict)
    points: float = 0.0  # this game's delta
    season_points: float = 0.0  # fantasy points after this game

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "position": self.position,
            "stats": dict(self.stats),
            "points": round(self.points, 2),
            "season_points": round(self.season_points, 2),
        }


@dataclass
class MatchupResult:
    """Outcome of one matchup. ``completed`` is False when it was skipped, and ``precondition`` says why."""

    home_team_id: int = 0
    home_team: str = ""
    away_team_id: int = 0
    away_team: str = ""
    home_score: float = 0.0
    away_score: float = 0.0
    completed: bool = False
    precondition: Optional[PreconditionNotMet] = None

    @property
    def winner(self) -> Optional[str]:
        """Winning team name; None for ties and skipped matchups."""
        if not self.completed or self.home_score == self.away_score:
            return None
        return self.home_team if self.home_score > self.away_score else self.away_team

    @property
    def is_tie(self) -> bool:
        return self.completed and self.home_score == self.away_score

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "home_team_id": self.home_team_id,
            "home_team": self.home_team,
            "away_team_id": self.away_team_id,
            "away_team": self.away_team,
            "home_score": round(self.home_score, 1),
            "away_score": round(self.away_score, 1),
            "completed": self.completed,
            "winner": self.winner,
            "tie": self.is_tie,
        }
        if self.precondition is not None:
            d["precondition"] = self.precondition.to_dict()
        return d


@dataclass
class ScheduleResult:
    """Matchups created for a week, plus teams on bye."""

    week: int = 1
    matchups: List[MatchupResult] = field(default_factory=list)
    byes: List[str] = field(default_factory=list)
    precondition: Optional[PreconditionNotMet] = None

    @property
    def ok(self) -> bool:
        return self.precondition is None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "week": self.week,
            "matchups": [m.to_dict() for m in self.matchups],
            "byes": list(self.byes),
        }
        if self.precondition is not None:
            d["precondition"] = self.precondition.to_dict()
        return d


@dataclass
class WeekResult:
    """Results of simulating one week. ``week`` is the week that was played."""

    week: int = 1
    results: List[MatchupResult] = field(default_factory=list)
    byes: List[str] = field(default_factory=list)
    precondition: Optional[PreconditionNotMet] = None

    @property
    def ok(self) -> bool:
        return self.precondition is None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "week": self.week,
            "results": [r.to_dict() for r in self.results],
            "byes": list(self.byes),
        }
        if self.precondition is not None:
            d["precondition"] = self.precondition.to_dict()
        return d


@dataclass
class WeeklyReport:
    """Read-back of the last simulated week: results, standings and top rostered players."""

    week: int = 0
    results: List[MatchupResult] = field(default_factory=list)
    byes: List[str] = field(default_factory=list)
    standings: List[Dict[str, Any]] = field(default_factory=list)
    top_players: List[Dict[str, Any]] = field(default_factory=list)
    precondition: Optional[PreconditionNotMet] = None

    @property
    def ok(self) -> bool:
        return self.precondition is None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "week": self.week,
            "results": [r.to_dict() for r in self.results],
            "byes": list(self.byes),
            "standings": list(self.standings),
            "top_players": list(self.top_players),
        }
        if self.precondition is not None:
            d["precondition"] = self.precondition.to_dict()
        return d
