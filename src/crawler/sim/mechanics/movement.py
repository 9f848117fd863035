"""Grid movement and collision for the player and enemies.

Walls and living enemies block everyone; enemies also never step onto
the player.  A blocked move is discarded whole.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crawler.sim.core.entities import Enemy
    from crawler.sim.core.game_state import GameState
    from crawler.sim.core.rng import GameRNG


class Direction(Enum):
    """Unit step ``(dx, dy)``; y grows downward."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    WEST = (-1, 0)
    EAST = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


ENEMY_MOVE_CHANCE = 70


def move_player(state: GameState, direction: Direction) -> list[str]:
    """Step the player one cell in *direction* if the cell is free."""
    player = state.player
    new_x, new_y = player.x + direction.dx, player.y + direction.dy

    if not state.dungeon.is_walkable(new_x, new_y):
        return ["You can't walk through walls!"]
    if state.enemy_at(new_x, new_y) is not None:
        return ["An enemy blocks your path!"]

    player.set_position(new_x, new_y)
    return []


def step_toward(enemy: Enemy, target_x: int, target_y: int) -> tuple[int, int]:
    """Tentative one-cell step along the axis with the larger offset.

    Ties go to the x axis.
    """
    dx = target_x - enemy.x
    dy = target_y - enemy.y
    if abs(dx) >= abs(dy):
        return enemy.x + (1 if dx > 0 else -1), enemy.y
    return enemy.x, enemy.y + (1 if dy > 0 else -1)


def advance_enemy(state: GameState, enemy: Enemy, distance: int, rng: GameRNG) -> bool:
    """Maybe move *enemy* one cell toward the player.

    Enemies already in melee range (*distance* <= 1) hold position.
    Returns True when the enemy actually moved.
    """
    if distance <= 1 or not rng.chance(ENEMY_MOVE_CHANCE):
        return False

    player = state.player
    new_x, new_y = step_toward(enemy, player.x, player.y)
    if not state.dungeon.is_walkable(new_x, new_y):
        return False
    if state.enemy_at(new_x, new_y, exclude=enemy) is not None:
        return False
    if (new_x, new_y) == player.position:
        return False

    enemy.set_position(new_x, new_y)
    return True
