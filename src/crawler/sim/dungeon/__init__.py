"""Dungeon module -- floor generation and enemy spawning."""

from crawler.sim.dungeon.map_gen import DungeonGenerator, DungeonMap, Room
from crawler.sim.dungeon.spawning import roll_enemy_type, spawn_enemies

__all__ = [
    "DungeonGenerator",
    "DungeonMap",
    "Room",
    "roll_enemy_type",
    "spawn_enemies",
]
