"""Shared fixtures and helpers for simulation tests."""

from __future__ import annotations

import pytest

from crawler.sim.core.entities import Enemy, Player
from crawler.sim.core.game_state import GameState
from crawler.sim.core.rng import GameRNG
from crawler.sim.dungeon.map_gen import DungeonMap, Room


class ScriptedRNG(GameRNG):
    """GameRNG that returns queued integers before falling back to the seed.

    Lets tests pin d100 rolls: ``ScriptedRNG([0, 99])`` makes the first
    ``chance()`` call succeed and the second fail.
    """

    def __init__(self, values: list[int] | None = None, seed: int = 0) -> None:
        super().__init__(seed)
        self.values = list(values or [])

    def random_int(self, low: int, high: int) -> int:
        if self.values:
            value = self.values.pop(0)
            assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
            return value
        return super().random_int(low, high)


def open_map(width: int = 40, height: int = 20) -> DungeonMap:
    """A map that is one big room inside a one-cell wall border."""
    dungeon = DungeonMap.solid(width, height)
    room = Room(1, 1, width - 2, height - 2)
    dungeon.carve_room(room)
    dungeon.rooms.append(room)
    return dungeon


def make_state(
    player_pos: tuple[int, int] = (10, 10),
    enemies: list[Enemy] | None = None,
    player: Player | None = None,
    dungeon: DungeonMap | None = None,
) -> GameState:
    """Build a GameState on an open map with the given placements."""
    player = player or Player()
    player.set_position(*player_pos)
    return GameState(
        player=player,
        enemies=enemies or [],
        dungeon=dungeon or open_map(),
    )


@pytest.fixture
def rng() -> GameRNG:
    return GameRNG(42)
