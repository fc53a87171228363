"""
League configuration for the fantasy league simulator.
Fixed at league construction; defaults are 8 teams, 10-man rosters, 5 starters.
"""
from dataclasses import dataclass
from typing import Dict, Any

from models.constants import (
    DEFAULT_LEAGUE_NAME,
    DEFAULT_MAX_TEAMS,
    DEFAULT_ROSTER_SIZE,
    DEFAULT_LINEUP_SIZE,
    ScoringMode,
)


@dataclass(frozen=True)
class LeagueConfig:
    """Immutable league settings."""

    name: str = DEFAULT_LEAGUE_NAME
    max_teams: int = DEFAULT_MAX_TEAMS
    roster_size: int = DEFAULT_ROSTER_SIZE
    lineup_size: int = DEFAULT_LINEUP_SIZE
    scoring_mode: ScoringMode = ScoringMode.CUMULATIVE
    seed: int | str | None = None

    def __post_init__(self) -> None:
        for key in ("max_teams", "roster_size", "lineup_size"):
            val = getattr(self, key)
            if not isinstance(val, int) or val < 1:
                raise ValueError(f"{key} must be a positive integer, got {val!r}")
        if self.lineup_size > self.roster_size:
            raise ValueError(
                f"lineup_size ({self.lineup_size}) cannot exceed roster_size ({self.roster_size})"
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, (int, str))):
            raise ValueError(f"seed must be an integer, a string or null, got {self.seed!r}")
        if not isinstance(self.scoring_mode, ScoringMode):
            object.__setattr__(self, "scoring_mode", ScoringMode(self.scoring_mode))

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "name": self.name,
            "max_teams": self.max_teams,
            "roster_size": self.roster_size,
            "lineup_size": self.lineup_size,
            "scoring_mode": self.scoring_mode.value,
        }
        if self.seed is not None:
            d["seed"] = self.seed
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeagueConfig":
        seed = data.get("seed")
        mode = data.get("scoring_mode", ScoringMode.CUMULATIVE)
        if not isinstance(mode, ScoringMode):
            mode = ScoringMode(str(mode).strip().lower())
        if isinstance(seed, str) and seed.strip().lstrip("-").isdigit():
            seed = int(seed)
        return cls(
            name=data.get("name") or DEFAULT_LEAGUE_NAME,
            max_teams=int(data.get("max_teams", DEFAULT_MAX_TEAMS)),
            roster_size=int(data.get("roster_size", DEFAULT_ROSTER_SIZE)),
            lineup_size=int(data.get("lineup_size", DEFAULT_LINEUP_SIZE)),
            scoring_mode=mode,
            seed=seed,
        )
