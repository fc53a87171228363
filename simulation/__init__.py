"""
Simulation engine for the fantasy league simulator.
Per-player performance generation, weekly matchup pairing, and standings.
"""
from .engine import simulate_performance, points_allowed_bonus, score_stat_line
from .schedule import generate_weekly_matchups
from .standings import rank_teams, standings_table, top_players

__all__ = [
    "simulate_performance",
    "points_allowed_bonus",
    "score_stat_line",
    "generate_weekly_matchups",
    "rank_teams",
    "standings_table",
    "top_players",
]
