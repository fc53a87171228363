"""
Player catalog generation for the fantasy league simulator.
Builds the fixed seed catalog and the league's random source.
"""
from .generate import build_player_catalog, make_rng, seed_rng

__all__ = ["build_player_catalog", "make_rng", "seed_rng"]
