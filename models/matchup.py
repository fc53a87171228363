"""
Matchup DTO for the fantasy league simulator.
One head-to-head pairing for a week. Exact ties count as a loss for both teams.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from .constants import ScoringMode
from .game_result import EMPTY_LINEUP, MatchupResult, PreconditionNotMet
from .team import PerformanceFn, Team

logger = logging.getLogger(__name__)


@dataclass
class Matchup:
    """Home vs away for one week. Created fresh by each scheduling round."""

    home: Team
    away: Team
    home_score: float = 0.0
    away_score: float = 0.0
    completed: bool = False

    def __post_init__(self) -> None:
        if self.home is self.away or self.home.id == self.away.id:
            raise ValueError(f"a team cannot play itself: {self.home.name!r}")

    def simulate(
        self,
        simulate_player: PerformanceFn,
        rng: random.Random,
        scoring_mode: ScoringMode = ScoringMode.CUMULATIVE,
    ) -> MatchupResult:
        """Score both sides and update records.

        Skipped (not completed, ``empty_lineup`` precondition on the result) if
        either lineup is empty.
        """
        if not self.home.has_lineup or not self.away.has_lineup:
            missing = [t.name for t in (self.home, self.away) if not t.has_lineup]
            logger.warning(
                "Skipping %s vs %s: no active lineup for %s",
                self.home.name, self.away.name, ", ".join(missing),
            )
            result = self.to_result()
            result.precondition = PreconditionNotMet(
                EMPTY_LINEUP, "No active lineup: " + ", ".join(missing)
            )
            return result

        self.home_score = self.home.simulate_game(simulate_player, rng, scoring_mode)
        self.away_score = self.away.simulate_game(simulate_player, rng, scoring_mode)

        if self.home_score > self.away_score:
            self.home.update_record(True)
            self.away.update_record(False)
        elif self.away_score > self.home_score:
            self.home.update_record(False)
            self.away.update_record(True)
        else:
            # Tie: both sides take a loss
            self.home.update_record(False)
            self.away.update_record(False)

        self.completed = True
        return self.to_result()

    def to_result(self) -> MatchupResult:
        return MatchupResult(
            home_team_id=self.home.id,
            home_team=self.home.name,
            away_team_id=self.away.id,
            away_team=self.away.name,
            home_score=self.home_score,
            away_score=self.away_score,
            completed=self.completed,
        )
