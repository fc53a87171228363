"""
League structure, scoring and catalog constants for the fantasy league simulator.
Stat ranges are illustrative, not tuned to real-world distributions.
"""
from enum import Enum
from typing import Dict


class Position(str, Enum):
    """Draftable fantasy positions. Value is the short display code."""

    QUARTERBACK = "QB"
    RUNNING_BACK = "RB"
    WIDE_RECEIVER = "WR"
    TIGHT_END = "TE"
    KICKER = "K"
    DEFENSE = "DEF"

    @classmethod
    def parse(cls, value: "str | Position") -> "Position":
        """Accept a Position, its short code ("QB") or its name ("QUARTERBACK")."""
        if isinstance(value, Position):
            return value
        key = (value or "").strip().upper()
        for pos in cls:
            if key in (pos.value, pos.name):
                return pos
        raise ValueError(f"Unknown position: {value!r}")


class ScoringMode(str, Enum):
    """How a team's weekly game score is computed from its lineup."""

    CUMULATIVE = "cumulative"  # sum of season-to-date fantasy points
    WEEKLY = "weekly"  # sum of this game's point deltas only


class WeekPhase(str, Enum):
    SETUP = "setup"
    SCHEDULED = "scheduled"
    SIMULATED = "simulated"


# League defaults: 8 teams, 10-man rosters, 5 starters
DEFAULT_LEAGUE_NAME = "Fantasy Football League"
DEFAULT_MAX_TEAMS = 8
DEFAULT_ROSTER_SIZE = 10
DEFAULT_LINEUP_SIZE = 5

# Number of players shown in the weekly report's top performers
WEEKLY_REPORT_TOP_PLAYERS = 5

# Stat categories drawn per position: stat -> (lo, hi), inclusive.
# Dict order is draw order.
STAT_RANGES: Dict[Position, Dict[str, tuple[int, int]]] = {
    Position.QUARTERBACK: {
        "pass_yards": (150, 400),
        "pass_touchdowns": (0, 4),
        "interceptions": (0, 3),
        "rush_yards": (0, 50),
        "rush_touchdowns": (0, 1),
    },
    Position.RUNNING_BACK: {
        "rush_yards": (30, 150),
        "rush_touchdowns": (0, 2),
        "receiving_yards": (0, 50),
        "receiving_touchdowns": (0, 1),
    },
    Position.WIDE_RECEIVER: {
        "receiving_yards": (20, 150),
        "receiving_touchdowns": (0, 2),
    },
    Position.TIGHT_END: {
        "receiving_yards": (10, 100),
        "receiving_touchdowns": (0, 1),
    },
    Position.KICKER: {
        "field_goals": (0, 5),
        "extra_points": (1, 5),
    },
    Position.DEFENSE: {
        "sacks": (0, 5),
        "def_interceptions": (0, 3),
        "def_touchdowns": (0, 1),
        "points_allowed": (0, 35),
    },
}

# Fantasy points per unit. points_allowed is scored by tier, not linearly.
SCORING_WEIGHTS: Dict[str, float] = {
    "pass_yards": 0.04,
    "pass_touchdowns": 4.0,
    "interceptions": -2.0,
    "rush_yards": 0.1,
    "rush_touchdowns": 6.0,
    "receiving_yards": 0.1,
    "receiving_touchdowns": 6.0,
    "field_goals": 3.0,
    "extra_points": 1.0,
    "sacks": 1.0,
    "def_interceptions": 2.0,
    "def_touchdowns": 6.0,
}

# Defense points-allowed tiers: (max points allowed inclusive, bonus). Anything above the last tier: -4.
POINTS_ALLOWED_TIERS: tuple[tuple[int, float], ...] = (
    (0, 10.0),
    (6, 7.0),
    (13, 4.0),
    (20, 1.0),
    (27, 0.0),
    (34, -1.0),
)
POINTS_ALLOWED_FLOOR_BONUS = -4.0

# Every cumulative counter a Player carries
STAT_CATEGORIES: tuple[str, ...] = (
    "pass_yards", "pass_touchdowns", "interceptions",
    "rush_yards", "rush_touchdowns",
    "receiving_yards", "receiving_touchdowns",
    "field_goals", "extra_points",
    "sacks", "def_interceptions", "def_touchdowns", "points_allowed",
)

# Display labels for player detail views
STAT_LABELS: Dict[str, str] = {
    "pass_yards": "Passing Yards",
    "pass_touchdowns": "Passing TDs",
    "interceptions": "Interceptions",
    "rush_yards": "Rushing Yards",
    "rush_touchdowns": "Rushing TDs",
    "receiving_yards": "Receiving Yards",
    "receiving_touchdowns": "Receiving TDs",
    "field_goals": "Field Goals",
    "extra_points": "Extra Points",
    "sacks": "Sacks",
    "def_interceptions": "Interceptions",
    "def_touchdowns": "Defensive TDs",
    "points_allowed": "Points Allowed",
}

# Seed catalog: (id, name, position, home team label). Ids are 1..N and never reused.
PLAYER_CATALOG: tuple[tuple[int, str, Position, str], ...] = (
    # Quarterbacks
    (1, "Patrick Mahomes", Position.QUARTERBACK, "Kansas City"),
    (2, "Josh Allen", Position.QUARTERBACK, "Buffalo"),
    (3, "Lamar Jackson", Position.QUARTERBACK, "Baltimore"),
    (4, "Joe Burrow", Position.QUARTERBACK, "Cincinnati"),
    (5, "Justin Herbert", Position.QUARTERBACK, "Los Angeles"),
    (6, "Jalen Hurts", Position.QUARTERBACK, "Philadelphia"),
    # Running backs
    (7, "Christian McCaffrey", Position.RUNNING_BACK, "San Francisco"),
    (8, "Derrick Henry", Position.RUNNING_BACK, "Tennessee"),
    (9, "Jonathan Taylor", Position.RUNNING_BACK, "Indianapolis"),
    (10, "Nick Chubb", Position.RUNNING_BACK, "Cleveland"),
    (11, "Saquon Barkley", Position.RUNNING_BACK, "New York"),
    (12, "Austin Ekeler", Position.RUNNING_BACK, "Los Angeles"),
    (13, "Alvin Kamara", Position.RUNNING_BACK, "New Orleans"),
    (14, "Dalvin Cook", Position.RUNNING_BACK, "Minnesota"),
    # Wide receivers
    (15, "Justin Jefferson", Position.WIDE_RECEIVER, "Minnesota"),
    (16, "Tyreek Hill", Position.WIDE_RECEIVER, "Miami"),
    (17, "Davante Adams", Position.WIDE_RECEIVER, "Las Vegas"),
    (18, "Cooper Kupp", Position.WIDE_RECEIVER, "Los Angeles"),
    (19, "Stefon Diggs", Position.WIDE_RECEIVER, "Buffalo"),
    (20, "CeeDee Lamb", Position.WIDE_RECEIVER, "Dallas"),
    (21, "A.J. Brown", Position.WIDE_RECEIVER, "Philadelphia"),
    (22, "Ja'Marr Chase", Position.WIDE_RECEIVER, "Cincinnati"),
    (23, "Deebo Samuel", Position.WIDE_RECEIVER, "San Francisco"),
    (24, "Mike Evans", Position.WIDE_RECEIVER, "Tampa Bay"),
    # Tight ends
    (25, "Travis Kelce", Position.TIGHT_END, "Kansas City"),
    (26, "Mark Andrews", Position.TIGHT_END, "Baltimore"),
    (27, "George Kittle", Position.TIGHT_END, "San Francisco"),
    (28, "T.J. Hockenson", Position.TIGHT_END, "Detroit"),
    (29, "Dallas Goedert", Position.TIGHT_END, "Philadelphia"),
    # Kickers
    (30, "Justin Tucker", Position.KICKER, "Baltimore"),
    (31, "Harrison Butker", Position.KICKER, "Kansas City"),
    (32, "Evan McPherson", Position.KICKER, "Cincinnati"),
    (33, "Tyler Bass", Position.KICKER, "Buffalo"),
    # Team defenses
    (34, "San Francisco 49ers", Position.DEFENSE, "San Francisco"),
    (35, "Dallas Cowboys", Position.DEFENSE, "Dallas"),
    (36, "Buffalo Bills", Position.DEFENSE, "Buffalo"),
    (37, "New England Patriots", Position.DEFENSE, "New England"),
    (38, "Pittsburgh Steelers", Position.DEFENSE, "Pittsburgh"),
)
