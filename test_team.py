"""
Tests for the Team roster manager: roster edits, all-or-nothing lineups, and game scoring.
"""
import pytest

from models import Player, PlayerGameStats, Position, ScoringMode, Team
from simulation.engine import simulate_performance


def _kicker(pid: int) -> Player:
    return Player(id=pid, name=f"Kicker {pid}", position=Position.KICKER)


@pytest.fixture
def team() -> Team:
    t = Team(id=1, name="Sharks", owner="Ann")
    for pid in (30, 31, 32, 33):
        t.add_player(_kicker(pid))
    return t


def test_add_player_rejects_duplicate_id(team: Team) -> None:
    assert team.add_player(_kicker(30)) is False
    assert team.roster_count == 4


def test_remove_player_also_leaves_lineup_in_order(team: Team) -> None:
    assert team.set_lineup([30, 31, 32])
    assert team.remove_player(31) is True
    assert [p.id for p in team.roster] == [30, 32, 33]
    assert team.lineup == [30, 32]


def test_remove_missing_player_returns_false(team: Team) -> None:
    assert team.remove_player(99) is False
    assert team.roster_count == 4


def test_set_lineup_with_unknown_id_keeps_previous_lineup(team: Team) -> None:
    assert team.set_lineup([30, 31])
    before = list(team.lineup)
    assert team.set_lineup([32, 99]) is False
    assert team.lineup == before


def test_set_lineup_rejects_duplicate_ids(team: Team) -> None:
    assert team.set_lineup([30, 30]) is False
    assert team.lineup == []


def test_set_lineup_replaces_lineup(team: Team) -> None:
    assert team.set_lineup([33, 30])
    assert team.lineup == [33, 30]
    assert [p.id for p in team.lineup_players()] == [33, 30]


def test_simulate_game_with_empty_lineup_scores_zero(team: Team, scripted_rng) -> None:
    rng = scripted_rng([5, 5])
    assert team.simulate_game(simulate_performance, rng) == 0.0
    assert team.total_points == 0.0
    assert rng.calls == []
    assert all(p.games_played == 0 for p in team.roster)


def test_cumulative_scoring_sums_season_totals(team: Team, scripted_rng) -> None:
    team.set_lineup([30, 31])
    # week 1: #30 -> 1 FG 1 XP (4), #31 -> 0 FG 1 XP (1)
    assert team.simulate_game(simulate_performance, scripted_rng([1, 1, 0, 1])) == pytest.approx(5.0)
    # week 2: each kicks 1 XP; season totals are 5 and 2
    assert team.simulate_game(simulate_performance, scripted_rng([0, 1, 0, 1])) == pytest.approx(7.0)
    assert team.total_points == pytest.approx(12.0)


def test_weekly_scoring_sums_game_deltas(team: Team, scripted_rng) -> None:
    team.set_lineup([30, 31])
    team.simulate_game(simulate_performance, scripted_rng([1, 1, 0, 1]), ScoringMode.WEEKLY)
    score = team.simulate_game(simulate_performance, scripted_rng([0, 1, 0, 1]), ScoringMode.WEEKLY)
    assert score == pytest.approx(2.0)
    assert team.total_points == pytest.approx(7.0)


def test_simulate_game_uses_given_player_simulator(team: Team, scripted_rng) -> None:
    team.set_lineup([32, 33])
    rng = scripted_rng()
    seen = []

    def fixed_game(player: Player, game_rng) -> PlayerGameStats:
        seen.append((player.id, game_rng))
        return PlayerGameStats(player_id=player.id, points=3.0, season_points=10.0)

    assert team.simulate_game(fixed_game, rng, ScoringMode.WEEKLY) == pytest.approx(6.0)
    assert seen == [(32, rng), (33, rng)]
    assert team.total_points == pytest.approx(6.0)


def test_simulate_game_only_plays_lineup(team: Team, scripted_rng) -> None:
    team.set_lineup([30, 31])
    team.simulate_game(simulate_performance, scripted_rng())
    games = {p.id: p.games_played for p in team.roster}
    assert games == {30: 1, 31: 1, 32: 0, 33: 0}
    assert [line.player_id for line in team.last_game] == [30, 31]


def test_update_record() -> None:
    t = Team(id=2, name="Jets")
    t.update_record(True)
    t.update_record(False)
    t.update_record(False)
    assert (t.wins, t.losses) == (1, 2)
    assert t.to_summary()["record"] == "1-2"
