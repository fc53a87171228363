"""
Player DTO for the fantasy league simulator.
Cumulative stat counters plus season-to-date fantasy points; ids are assigned once from the seed catalog.
"""
from dataclasses import dataclass, field
from typing import Dict, Any

from .constants import Position, STAT_CATEGORIES, STAT_LABELS, STAT_RANGES


@dataclass
class Player:
    """A draftable player. Owned by the draft pool or by exactly one team roster at a time."""

    id: int
    name: str = ""
    position: Position = Position.QUARTERBACK
    home_team: str = ""  # cosmetic NFL city label, unrelated to fantasy teams
    games_played: int = 0
    fantasy_points: float = 0.0
    stats: Dict[str, int] = field(default_factory=lambda: {k: 0 for k in STAT_CATEGORIES})

    def __post_init__(self) -> None:
        if self.id < 1:
            raise ValueError(f"player id must be positive, got {self.id}")
        self.position = Position.parse(self.position)

    def record_game(self, stat_line: Dict[str, int], points: float) -> None:
        """Add one game's stat deltas and point delta to the season totals."""
        self.games_played += 1
        for key, value in stat_line.items():
            self.stats[key] = self.stats.get(key, 0) + value
        self.fantasy_points += points

    def position_stats(self) -> Dict[str, int]:
        """Season totals for the categories this position actually records (points allowed excluded)."""
        return {
            key: self.stats.get(key, 0)
            for key in STAT_RANGES[self.position]
            if key != "points_allowed"
        }

    def to_summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.value,
            "home_team": self.home_team,
            "fantasy_points": round(self.fantasy_points, 1),
        }

    def to_detail(self) -> Dict[str, Any]:
        d = self.to_summary()
        d["games_played"] = self.games_played
        d["stats"] = [
            {"key": key, "label": STAT_LABELS[key], "value": value}
            for key, value in self.position_stats().items()
        ]
        return d
