"""
Draft pool: the league's undrafted players, kept in id order.
Players leave with take() and come back with put_back(); the pool never copies a Player.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from models.constants import Position
from models.player import Player


class DraftPool:
    """Undrafted players keyed by id."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: dict[int, Player] = {}
        for player in players:
            if player.id in self._players:
                raise ValueError(f"duplicate player id in draft pool: {player.id}")
            self._players[player.id] = player

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players())

    def get(self, player_id: int) -> Optional[Player]:
        return self._players.get(player_id)

    def ids(self) -> set[int]:
        return set(self._players)

    def players(self, position: Position | None = None) -> list[Player]:
        """Available players in id order, optionally filtered to one position."""
        found = sorted(self._players.values(), key=lambda p: p.id)
        if position is not None:
            found = [p for p in found if p.position is position]
        return found

    def take(self, player_id: int) -> Player:
        """Remove and return a player. KeyError if it is not in the pool."""
        return self._players.pop(player_id)

    def put_back(self, player: Player) -> None:
        if player.id in self._players:
            raise ValueError(f"player {player.id} is already in the draft pool")
        self._players[player.id] = player
