"""
Tests for per-player performance simulation and fantasy scoring.
"""
import random

import pytest

from models import Player, Position
from models.constants import STAT_RANGES
from simulation.engine import (
    draw_stat_line,
    points_allowed_bonus,
    score_stat_line,
    simulate_performance,
)


@pytest.mark.parametrize(
    "points_allowed, bonus",
    [
        (0, 10.0),
        (1, 7.0),
        (6, 7.0),
        (7, 4.0),
        (13, 4.0),
        (14, 1.0),
        (20, 1.0),
        (21, 0.0),
        (27, 0.0),
        (28, -1.0),
        (34, -1.0),
        (35, -4.0),
    ],
)
def test_points_allowed_bonus_tiers(points_allowed: int, bonus: float) -> None:
    assert points_allowed_bonus(points_allowed) == bonus


def test_score_quarterback_line() -> None:
    line = {
        "pass_yards": 300,
        "pass_touchdowns": 2,
        "interceptions": 1,
        "rush_yards": 20,
        "rush_touchdowns": 1,
    }
    # 12 + 8 - 2 + 2 + 6
    assert score_stat_line(Position.QUARTERBACK, line) == pytest.approx(26.0)


def test_score_kicker_line() -> None:
    assert score_stat_line(Position.KICKER, {"field_goals": 3, "extra_points": 2}) == pytest.approx(11.0)


def test_defense_scoring_includes_points_allowed_tier(scripted_rng) -> None:
    # sacks, def_interceptions, def_touchdowns, points_allowed
    rng = scripted_rng([2, 1, 0, 0])
    dst = Player(id=34, name="San Francisco 49ers", position=Position.DEFENSE)
    line = simulate_performance(dst, rng)
    assert line.stats == {"sacks": 2, "def_interceptions": 1, "def_touchdowns": 0, "points_allowed": 0}
    assert line.points == pytest.approx(2 + 2 + 10)


def test_defense_can_lose_points(scripted_rng) -> None:
    dst = Player(id=35, name="Dallas Cowboys", position=Position.DEFENSE)
    line = simulate_performance(dst, scripted_rng([0, 0, 0, 35]))
    assert line.points == pytest.approx(-4.0)
    assert dst.fantasy_points == pytest.approx(-4.0)


def test_draws_follow_position_ranges_in_order(scripted_rng) -> None:
    rng = scripted_rng()
    draw_stat_line(Position.QUARTERBACK, rng)
    assert rng.calls == [(150, 400), (0, 4), (0, 3), (0, 50), (0, 1)]


@pytest.mark.parametrize("position", list(Position))
def test_draws_stay_within_inclusive_ranges(position: Position) -> None:
    rng = random.Random(1234)
    ranges = STAT_RANGES[position]
    for _ in range(300):
        line = draw_stat_line(position, rng)
        assert set(line) == set(ranges)
        for key, value in line.items():
            lo, hi = ranges[key]
            assert lo <= value <= hi


def test_simulate_performance_accumulates_across_games(scripted_rng) -> None:
    wr = Player(id=15, name="Justin Jefferson", position=Position.WIDE_RECEIVER)
    first = simulate_performance(wr, scripted_rng([100, 1]))
    second = simulate_performance(wr, scripted_rng([50, 0]))

    assert first.points == pytest.approx(16.0)
    assert second.points == pytest.approx(5.0)
    assert second.season_points == pytest.approx(21.0)
    assert wr.fantasy_points == pytest.approx(21.0)
    assert wr.games_played == 2
    assert wr.stats["receiving_yards"] == 150
    assert wr.stats["receiving_touchdowns"] == 1
    assert wr.stats["pass_yards"] == 0


def test_same_seed_replays_same_performance() -> None:
    a = Player(id=7, name="Christian McCaffrey", position=Position.RUNNING_BACK)
    b = Player(id=7, name="Christian McCaffrey", position=Position.RUNNING_BACK)
    line_a = simulate_performance(a, random.Random(99))
    line_b = simulate_performance(b, random.Random(99))
    assert line_a.stats == line_b.stats
    assert a.fantasy_points == b.fantasy_points


def test_player_detail_shows_only_position_stats() -> None:
    k = Player(id=30, name="Justin Tucker", position=Position.KICKER, home_team="Baltimore")
    k.record_game({"field_goals": 2, "extra_points": 3}, 9.0)
    detail = k.to_detail()
    assert detail["games_played"] == 1
    assert [s["key"] for s in detail["stats"]] == ["field_goals", "extra_points"]
    assert detail["position"] == "K"


def test_player_rejects_non_positive_id() -> None:
    with pytest.raises(ValueError):
        Player(id=0, name="Nobody")


def test_position_parse_accepts_code_and_name() -> None:
    assert Position.parse("def") is Position.DEFENSE
    assert Position.parse("TIGHT_END") is Position.TIGHT_END
    with pytest.raises(ValueError):
        Position.parse("LB")
