"""
Team DTO and roster manager for the fantasy league simulator.
A team owns its drafted players and an active lineup drawn from them; the lineup is what scores each week.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Any, List, Optional, Sequence

from .constants import ScoringMode
from .game_result import PlayerGameStats
from .player import Player

logger = logging.getLogger(__name__)

# Plays one player's game and records it on the player
PerformanceFn = Callable[[Player, random.Random], PlayerGameStats]


@dataclass
class Team:
    """A fantasy team. Roster capacity and lineup size are enforced by the league, not here."""

    id: int
    name: str = ""
    owner: str = ""
    roster: List[Player] = field(default_factory=list)
    lineup: List[int] = field(default_factory=list)  # player ids, subset of roster
    wins: int = 0
    losses: int = 0
    total_points: float = 0.0
    last_game: List[PlayerGameStats] = field(default_factory=list)

    # --- Roster ---

    def get_player(self, player_id: int) -> Optional[Player]:
        for player in self.roster:
            if player.id == player_id:
                return player
        return None

    def has_player(self, player_id: int) -> bool:
        return self.get_player(player_id) is not None

    def add_player(self, player: Player) -> bool:
        """Append *player* unless its id is already on this roster."""
        if self.has_player(player.id):
            return False
        self.roster.append(player)
        return True

    def remove_player(self, player_id: int) -> bool:
        """Drop a player from the roster and, if present, from the lineup. False if absent."""
        player = self.get_player(player_id)
        if player is None:
            return False
        self.roster.remove(player)
        if player_id in self.lineup:
            self.lineup.remove(player_id)
        return True

    @property
    def roster_count(self) -> int:
        return len(self.roster)

    # --- Lineup ---

    def set_lineup(self, player_ids: Sequence[int]) -> bool:
        """Replace the lineup with *player_ids*, all or nothing.

        Fails, leaving the previous lineup untouched, if any id is repeated
        or is not on the roster.
        """
        ids = list(player_ids)
        if len(set(ids)) != len(ids):
            return False
        if not all(self.has_player(pid) for pid in ids):
            return False
        self.lineup = ids
        return True

    def lineup_players(self) -> List[Player]:
        by_id = {p.id: p for p in self.roster}
        return [by_id[pid] for pid in self.lineup if pid in by_id]

    @property
    def has_lineup(self) -> bool:
        return bool(self.lineup)

    # --- Scoring ---

    def simulate_game(
        self,
        simulate_player: PerformanceFn,
        rng: random.Random,
        scoring_mode: ScoringMode = ScoringMode.CUMULATIVE,
    ) -> float:
        """Simulate every lineup player's game and return the team's score.

        ``simulate_player`` plays one player's game against *rng* and applies it
        to that player's season totals (``simulation.engine.simulate_performance``).
        In CUMULATIVE mode the score is the sum of each starter's season-to-date
        fantasy points after this game; in WEEKLY mode only this game's deltas.
        The score is added to ``total_points``. An empty lineup scores 0 and
        changes nothing.
        """
        if not self.lineup:
            logger.warning("Team %r has no active lineup; scoring 0", self.name)
            return 0.0

        lines = [simulate_player(p, rng) for p in self.lineup_players()]
        if scoring_mode is ScoringMode.WEEKLY:
            score = sum(line.points for line in lines)
        else:
            score = sum(line.season_points for line in lines)
        self.last_game = lines
        self.total_points += score
        return score

    def update_record(self, is_win: bool) -> None:
        if is_win:
            self.wins += 1
        else:
            self.losses += 1

    # --- Views ---

    def to_summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "owner": self.owner,
            "roster_count": len(self.roster),
            "lineup_count": len(self.lineup),
            "wins": self.wins,
            "losses": self.losses,
            "record": f"{self.wins}-{self.losses}",
            "total_points": round(self.total_points, 1),
        }
