"""Enemy spawning for a freshly generated floor.

Spawns ``base_count + floor`` enemies on random floor cells.  Positions
are sampled independently, so two enemies may start on the same cell.

Variant roll (d100, per enemy):
- floor >= 3 and roll < 15: Dragon
- roll < 50: Orc
- otherwise: Goblin

On floors 1-2 the Dragon band simply falls through to Orc.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from crawler.sim.enemies import create_enemy

if TYPE_CHECKING:
    from crawler.sim.core.entities import Enemy
    from crawler.sim.core.rng import GameRNG
    from crawler.sim.dungeon.map_gen import DungeonMap

logger = logging.getLogger(__name__)

DEFAULT_BASE_COUNT = 3
DRAGON_MIN_FLOOR = 3
_DRAGON_ROLL = 15
_ORC_ROLL = 50


def roll_enemy_type(floor: int, roll: int) -> str:
    """Map a d100 *roll* on *floor* to an enemy id."""
    if floor >= DRAGON_MIN_FLOOR and roll < _DRAGON_ROLL:
        return "dragon"
    if roll < _ORC_ROLL:
        return "orc"
    return "goblin"


def spawn_enemies(
    dungeon: DungeonMap,
    floor: int,
    rng: GameRNG,
    base_count: int = DEFAULT_BASE_COUNT,
) -> list[Enemy]:
    """Create this floor's enemies, each with a stable ``slot_id``."""
    enemies: list[Enemy] = []
    for slot_id in range(base_count + floor):
        x, y = dungeon.random_floor_cell(rng)
        enemy_id = roll_enemy_type(floor, rng.roll_percent())
        enemies.append(create_enemy(enemy_id, x=x, y=y, slot_id=slot_id))

    logger.debug(
        "Spawned %d enemies on floor %d: %s",
        len(enemies), floor, ", ".join(e.name for e in enemies),
    )
    return enemies
