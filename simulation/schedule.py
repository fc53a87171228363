"""
Weekly matchup generation for the fantasy league simulator.

Each week the teams are shuffled into a uniformly random order and paired
off consecutively (0-1, 2-3, ...).  Home/away follows shuffled order.  With
an odd number of teams the last team in the shuffle sits out on a bye.
"""
from __future__ import annotations

import logging
import random
from typing import Sequence

from models.matchup import Matchup
from models.team import Team

logger = logging.getLogger(__name__)


def generate_weekly_matchups(
    teams: Sequence[Team],
    rng: random.Random,
) -> tuple[list[Matchup], list[Team]]:
    """Pair *teams* randomly for one week.

    Parameters
    ----------
    teams : Sequence[Team]
        Teams in league order; not modified.
    rng : random.Random
        Shared league RNG used for the shuffle.

    Returns
    -------
    (matchups, byes)
        ``byes`` holds at most one team.  Fewer than two teams yields
        ``([], [])``; callers report that condition.
    """
    if len(teams) < 2:
        return [], []

    order = list(teams)
    rng.shuffle(order)

    matchups: list[Matchup] = []
    byes: list[Team] = []
    for i in range(0, len(order), 2):
        if i + 1 >= len(order):
            byes.append(order[i])
            logger.info("%s has a bye this week", order[i].name)
            continue
        matchup = Matchup(home=order[i], away=order[i + 1])
        logger.info("Matchup: %s vs %s", matchup.home.name, matchup.away.name)
        matchups.append(matchup)

    return matchups, byes
