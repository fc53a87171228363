"""
Seed catalog and RNG seeding for the fantasy league simulator.
Players are created once, at league construction, from PLAYER_CATALOG; ids are 1..N.
"""
import hashlib
import random

from models import Player
from models.constants import PLAYER_CATALOG


def seed_rng(seed: int | str | None) -> int:
    """Convert optional seed to int; if None, draw one so it can be logged and replayed.

    String seeds go through sha256 so the same text gives the same league in every process.
    """
    if seed is None:
        return random.SystemRandom().randint(0, 2**31 - 1)
    if isinstance(seed, str):
        digest = hashlib.sha256(seed.encode("utf-8")).hexdigest()
        return int(digest[:8], 16) % (2**31)
    return int(seed)


def make_rng(seed: int | str | None) -> tuple[random.Random, int]:
    """Return a fresh league RNG and the integer seed it was built from."""
    resolved = seed_rng(seed)
    return random.Random(resolved), resolved


def build_player_catalog() -> list[Player]:
    """Create a fresh Player for every catalog entry, ordered by id."""
    players = [
        Player(id=pid, name=name, position=position, home_team=home_team)
        for pid, name, position, home_team in PLAYER_CATALOG
    ]
    ids = [p.id for p in players]
    if len(set(ids)) != len(ids):
        raise ValueError("PLAYER_CATALOG contains duplicate ids")
    return sorted(players, key=lambda p: p.id)
