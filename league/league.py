"""
League orchestrator for the fantasy league simulator.

Owns the draft pool, the registered teams, the current week's schedule and the
single league RNG, and runs the weekly lifecycle:

    SETUP --generate_matchups--> SCHEDULED --simulate_week--> SIMULATED
      ^                              ^                            |
      |                              +------generate_matchups-----+
      +-- generate_matchups with fewer than two teams

Every operation either succeeds completely or raises ValidationError before
touching any state.  Calls that are merely premature (nothing to schedule, nothing
to simulate) return a result carrying a PreconditionNotMet instead of raising.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from generation import build_player_catalog, make_rng
from models import (
    Matchup,
    Player,
    Position,
    ScheduleResult,
    Team,
    WeekPhase,
    WeekResult,
    WeeklyReport,
)
from models.constants import WEEKLY_REPORT_TOP_PLAYERS
from simulation import generate_weekly_matchups, simulate_performance, standings_table, top_players

from . import errors
from .config import LeagueConfig
from .draft_pool import DraftPool
from .errors import PreconditionNotMet, ValidationError

logger = logging.getLogger(__name__)


class League:
    """A single fantasy season held in memory."""

    def __init__(
        self,
        config: LeagueConfig | None = None,
        players: Iterable[Player] | None = None,
    ) -> None:
        self.config = config or LeagueConfig()
        self.rng, self.seed = make_rng(self.config.seed)
        self.draft_pool = DraftPool(build_player_catalog() if players is None else players)
        self._teams: list[Team] = []
        self._next_team_id = 1
        self.schedule: list[Matchup] = []
        self.byes: list[Team] = []
        self.current_week = 1
        self.phase = WeekPhase.SETUP
        logger.info(
            "League %r created: seed=%s max_teams=%d roster_size=%d lineup_size=%d players=%d",
            self.config.name, self.seed, self.config.max_teams,
            self.config.roster_size, self.config.lineup_size, len(self.draft_pool),
        )

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def teams(self) -> list[Team]:
        """Teams in registration order (a copy)."""
        return list(self._teams)

    def get_team(self, team_id: int) -> Team:
        for team in self._teams:
            if team.id == team_id:
                return team
        raise ValidationError(errors.TEAM_NOT_FOUND, f"Team {team_id} not found.")

    def find_team(self, name: str) -> Team | None:
        for team in self._teams:
            if team.name == name:
                return team
        return None

    def all_players(self) -> list[Player]:
        """Every player in the league: rostered players (team order) then the draft pool."""
        players: list[Player] = []
        for team in self._teams:
            players.extend(team.roster)
        players.extend(self.draft_pool.players())
        return players

    def owner_of(self, player_id: int) -> Team | None:
        """Team holding *player_id*, or None if it is undrafted (or unknown)."""
        for team in self._teams:
            if team.has_player(player_id):
                return team
        return None

    def get_player(self, player_id: int) -> Player:
        player = self.draft_pool.get(player_id)
        if player is not None:
            return player
        team = self.owner_of(player_id)
        if team is not None:
            return team.get_player(player_id)
        raise ValidationError(errors.PLAYER_NOT_FOUND, f"Player {player_id} not found.")

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------

    def register_team(self, name: str, owner: str) -> Team:
        name = (name or "").strip()
        owner = (owner or "").strip()
        if not name:
            raise ValidationError(errors.INVALID_TEAM_NAME, "Team name cannot be empty.")
        if len(self._teams) >= self.config.max_teams:
            raise ValidationError(
                errors.LEAGUE_FULL,
                f"Maximum number of teams reached ({self.config.max_teams}).",
            )
        if self.find_team(name) is not None:
            raise ValidationError(
                errors.DUPLICATE_TEAM_NAME,
                f"Team name {name!r} already exists. Please choose another name.",
            )
        team = Team(id=self._next_team_id, name=name, owner=owner)
        self._next_team_id += 1
        self._teams.append(team)
        logger.info("Team %r registered (owner %r, id %d)", team.name, team.owner, team.id)
        return team

    def list_teams(self) -> list[dict[str, Any]]:
        rows = []
        for number, team in enumerate(self._teams, start=1):
            row = team.to_summary()
            row["number"] = number
            rows.append(row)
        return rows

    def team_roster(self, team_id: int) -> list[dict[str, Any]]:
        return [p.to_summary() for p in self.get_team(team_id).roster]

    def team_lineup(self, team_id: int) -> list[dict[str, Any]]:
        return [p.to_summary() for p in self.get_team(team_id).lineup_players()]

    def all_teams_have_full_rosters(self) -> bool:
        if not self._teams:
            return False
        return all(t.roster_count >= self.config.roster_size for t in self._teams)

    def teams_without_lineup(self) -> list[str]:
        return [t.name for t in self._teams if not t.has_lineup]

    # ------------------------------------------------------------------
    # Draft
    # ------------------------------------------------------------------

    def draft_player(self, team_id: int, player_id: int) -> Player:
        """Move *player_id* from the draft pool onto the team's roster."""
        team = self.get_team(team_id)
        if player_id not in self.draft_pool:
            raise ValidationError(
                errors.PLAYER_NOT_AVAILABLE,
                f"Player ID {player_id} not found in available players.",
            )
        if team.roster_count >= self.config.roster_size:
            raise ValidationError(
                errors.ROSTER_FULL,
                f"Team roster is full ({self.config.roster_size} players maximum).",
            )

        player = self.draft_pool.take(player_id)
        if not team.add_player(player):
            self.draft_pool.put_back(player)
            raise ValidationError(
                errors.PLAYER_NOT_AVAILABLE,
                f"Player {player_id} is already on the {team.name} roster.",
            )
        logger.info("%s has been drafted to %s", player.name, team.name)
        return player

    def release_player(self, team_id: int, player_id: int) -> Player:
        """Move a rostered player back into the draft pool (and out of the lineup)."""
        team = self.get_team(team_id)
        player = team.get_player(player_id)
        if player is None:
            raise ValidationError(
                errors.PLAYER_NOT_ON_ROSTER,
                f"Player {player_id} is not on the {team.name} roster.",
            )
        was_starter = player_id in team.lineup
        team.remove_player(player_id)
        if was_starter:
            # Lineup is all-or-nothing at league level
            team.lineup = []
            logger.info("%s lineup cleared after releasing a starter", team.name)
        self.draft_pool.put_back(player)
        logger.info("%s released by %s", player.name, team.name)
        return player

    def available_players(self, position: str | Position | None = None) -> list[dict[str, Any]]:
        pos = None
        if position is not None and position != "":
            try:
                pos = Position.parse(position)
            except ValueError as e:
                raise ValidationError(errors.INVALID_POSITION, str(e)) from e
        return [p.to_summary() for p in self.draft_pool.players(pos)]

    # ------------------------------------------------------------------
    # Lineups
    # ------------------------------------------------------------------

    def set_team_lineup(self, team_id: int, player_ids: Sequence[int]) -> list[Player]:
        team = self.get_team(team_id)
        ids = list(player_ids)
        if len(ids) != self.config.lineup_size:
            raise ValidationError(
                errors.LINEUP_SIZE,
                f"Lineup must have exactly {self.config.lineup_size} players.",
            )
        if len(set(ids)) != len(ids):
            raise ValidationError(errors.LINEUP_INVALID, "Lineup contains the same player more than once.")
        if not team.set_lineup(ids):
            missing = [pid for pid in ids if not team.has_player(pid)]
            raise ValidationError(
                errors.LINEUP_INVALID,
                f"Failed to set lineup: players {missing} are not on the {team.name} roster.",
            )
        logger.info("Lineup for %s has been set: %s", team.name, ids)
        return team.lineup_players()

    # ------------------------------------------------------------------
    # Weekly lifecycle
    # ------------------------------------------------------------------

    def generate_matchups(self) -> ScheduleResult:
        """Discard the current schedule and pair teams randomly for the current week."""
        self.schedule = []
        self.byes = []
        if len(self._teams) < 2:
            self.phase = WeekPhase.SETUP
            cond = PreconditionNotMet(errors.NOT_ENOUGH_TEAMS, "Need at least 2 teams to generate matchups.")
            logger.warning(cond.message)
            return ScheduleResult(week=self.current_week, precondition=cond)

        self.schedule, self.byes = generate_weekly_matchups(self._teams, self.rng)
        self.phase = WeekPhase.SCHEDULED
        return ScheduleResult(
            week=self.current_week,
            matchups=[m.to_result() for m in self.schedule],
            byes=[t.name for t in self.byes],
        )

    def simulate_week(self) -> WeekResult:
        """Play every scheduled matchup and advance the week by one."""
        if not self.schedule:
            cond = PreconditionNotMet(errors.EMPTY_SCHEDULE, "No matchups scheduled. Generate matchups first.")
            logger.warning(cond.message)
            return WeekResult(week=self.current_week, precondition=cond)
        if self.phase is WeekPhase.SIMULATED:
            cond = PreconditionNotMet(
                errors.WEEK_ALREADY_SIMULATED,
                f"Week {self.current_week - 1} has already been played. Generate matchups first.",
            )
            logger.warning(cond.message)
            return WeekResult(week=self.current_week, precondition=cond)

        week = self.current_week
        logger.info("Simulating week %d (%d matchups)", week, len(self.schedule))
        results = [
            m.simulate(simulate_performance, self.rng, self.config.scoring_mode)
            for m in self.schedule
        ]
        self.current_week += 1
        self.phase = WeekPhase.SIMULATED
        return WeekResult(week=week, results=results, byes=[t.name for t in self.byes])

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def standings(self) -> list[dict[str, Any]]:
        return standings_table(self._teams)

    def player_stats(self, player_id: int) -> dict[str, Any]:
        player = self.get_player(player_id)
        detail = player.to_detail()
        team = self.owner_of(player_id)
        detail["fantasy_team"] = team.name if team is not None else None
        return detail

    def player_leaderboard(self, limit: int | None = None) -> list[dict[str, Any]]:
        """Every player with fantasy points, pool included, best first."""
        return [self._leader_row(p) for p in top_players(self.all_players(), limit)]

    def weekly_report(self) -> WeeklyReport:
        if self.phase is not WeekPhase.SIMULATED:
            if self.current_week > 1:
                message = (
                    f"Week {self.current_week - 1} report was superseded by the new schedule "
                    f"for week {self.current_week}. Simulate the week first."
                )
            else:
                message = "No matchups have been simulated yet."
            cond = PreconditionNotMet(errors.EMPTY_SCHEDULE, message)
            return WeeklyReport(week=self.current_week - 1, precondition=cond)

        rostered = [p for team in self._teams for p in team.roster]
        return WeeklyReport(
            week=self.current_week - 1,
            results=[m.to_result() for m in self.schedule if m.completed],
            byes=[t.name for t in self.byes],
            standings=self.standings(),
            top_players=[self._leader_row(p) for p in top_players(rostered, WEEKLY_REPORT_TOP_PLAYERS)],
        )

    def summary(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "config": self.config.to_dict(),
            "seed": self.seed,
            "current_week": self.current_week,
            "phase": self.phase.value,
            "team_count": len(self._teams),
            "available_players": len(self.draft_pool),
            "all_rosters_full": self.all_teams_have_full_rosters(),
            "teams_without_lineup": self.teams_without_lineup(),
        }

    def _leader_row(self, player: Player) -> dict[str, Any]:
        row = player.to_summary()
        team = self.owner_of(player.id)
        row["fantasy_team"] = team.name if team is not None else None
        return row
