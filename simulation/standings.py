"""
Standings and leaderboards for the fantasy league simulator.
All functions here are pure: they sort copies and never touch team or player state.
"""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from models.player import Player
from models.team import Team


def rank_teams(teams: Sequence[Team]) -> list[Team]:
    """Order teams by wins desc, then total points desc. Full ties keep league order."""
    return sorted(teams, key=lambda t: (-t.wins, -t.total_points))


def standings_table(teams: Sequence[Team]) -> list[dict[str, Any]]:
    """Ranked team summaries with a 1-based ``rank``."""
    table: list[dict[str, Any]] = []
    for rank, team in enumerate(rank_teams(teams), start=1):
        row = team.to_summary()
        row["rank"] = rank
        table.append(row)
    return table


def top_players(players: Iterable[Player], limit: int | None = None) -> list[Player]:
    """Players with positive fantasy points, best first. ``limit`` caps the list."""
    scored = [p for p in players if p.fantasy_points > 0]
    scored.sort(key=lambda p: -p.fantasy_points)
    if limit is not None:
        return scored[:limit]
    return scored
