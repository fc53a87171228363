from __future__ import annotations

import pytest

from league import League, LeagueConfig


class ScriptedRng:
    """Stand-in for random.Random that replays fixed randint values and records each range asked for."""

    def __init__(self, values=()):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, lo: int, hi: int) -> int:
        self.calls.append((lo, hi))
        if not self.values:
            return lo
        return self.values.pop(0)

    def shuffle(self, seq) -> None:
        # Leave order unchanged so pairings are predictable
        return None


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def small_config() -> LeagueConfig:
    return LeagueConfig(name="Test League", max_teams=4, roster_size=3, lineup_size=2, seed=7)


@pytest.fixture
def league(small_config: LeagueConfig) -> League:
    return League(small_config)


@pytest.fixture
def ready_league(league: League) -> League:
    """Four teams, full 3-man rosters, 2-man lineups."""
    owners = ["Ann", "Ben", "Cat", "Dan"]
    for owner in owners:
        league.register_team(f"Team {owner}", owner)
    player_ids = iter(sorted(league.draft_pool.ids()))
    for _ in range(league.config.roster_size):
        for team in league.teams:
            league.draft_player(team.id, next(player_ids))
    for team in league.teams:
        league.set_team_lineup(team.id, [p.id for p in team.roster[: league.config.lineup_size]])
    return league


def assert_ownership_invariants(league: League) -> None:
    pool_ids = league.draft_pool.ids()
    seen: set[int] = set()
    for team in league.teams:
        roster_ids = [p.id for p in team.roster]
        assert len(roster_ids) == len(set(roster_ids))
        assert len(roster_ids) <= league.config.roster_size
        assert not (set(roster_ids) & pool_ids)
        assert not (set(roster_ids) & seen)
        seen.update(roster_ids)
        assert set(team.lineup) <= set(roster_ids)
        assert len(team.lineup) in (0, league.config.lineup_size)
    names = [t.name for t in league.teams]
    assert len(names) == len(set(names))
    assert len(league.teams) <= league.config.max_teams


@pytest.fixture
def check_invariants():
    return assert_ownership_invariants
