"""
Performance simulation engine for the fantasy league simulator.

Maps a player's position and a shared random source to one game's stat line
and fantasy point delta:

1. **Position-driven**: each position draws its own stat categories from
   closed integer ranges (``STAT_RANGES``), independently per stat.
2. **Cumulative**: the draw is added to the player's season totals; fantasy
   points only ever accumulate, they are never overwritten.
3. **Injected randomness**: the caller owns the ``random.Random`` instance so
   a whole season replays from one seed and nothing re-seeds per call.
"""
from __future__ import annotations

import random
from typing import Mapping

from models.constants import (
    Position,
    STAT_RANGES,
    SCORING_WEIGHTS,
    POINTS_ALLOWED_TIERS,
    POINTS_ALLOWED_FLOOR_BONUS,
)
from models.game_result import PlayerGameStats
from models.player import Player


# ===================================================================
# Scoring
# ===================================================================

def points_allowed_bonus(points_allowed: int) -> float:
    """Defense bonus for points allowed: 0 -> +10, 1-6 -> +7, 7-13 -> +4,
    14-20 -> +1, 21-27 -> 0, 28-34 -> -1, 35+ -> -4."""
    for ceiling, bonus in POINTS_ALLOWED_TIERS:
        if points_allowed <= ceiling:
            return bonus
    return POINTS_ALLOWED_FLOOR_BONUS


def score_stat_line(position: Position, stat_line: Mapping[str, int]) -> float:
    """Fantasy points for one game's stat line at *position*."""
    points = 0.0
    for key, value in stat_line.items():
        if key == "points_allowed":
            continue
        points += value * SCORING_WEIGHTS[key]
    if position is Position.DEFENSE and "points_allowed" in stat_line:
        points += points_allowed_bonus(stat_line["points_allowed"])
    return points


# ===================================================================
# Stat generation
# ===================================================================

def draw_stat_line(position: Position, rng: random.Random) -> dict[str, int]:
    """Draw every stat for *position* uniformly from its inclusive range."""
    return {key: rng.randint(lo, hi) for key, (lo, hi) in STAT_RANGES[position].items()}


def simulate_performance(player: Player, rng: random.Random) -> PlayerGameStats:
    """Simulate one game for *player*, apply it to the season totals and return the game line."""
    stat_line = draw_stat_line(player.position, rng)
    points = score_stat_line(player.position, stat_line)
    player.record_game(stat_line, points)
    return PlayerGameStats(
        player_id=player.id,
        name=player.name,
        position=player.position.value,
        stats=stat_line,
        points=points,
        season_points=player.fantasy_points,
    )
