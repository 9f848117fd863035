"""Session state for a dungeon crawl.

Houses the full mutable state of one game (``GameState``): the player,
the enemy arena for the current floor, the floor's dungeon layout and the
phase of the session state machine.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from crawler.sim.core.entities import Enemy, Player


class Phase(str, Enum):
    """Where the session is in its state machine.

    ``EXPLORING`` is the only phase that accepts commands.  A floor whose
    enemies are all dead sits in ``FLOOR_CLEARED`` until the session
    descends.  ``GAME_OVER`` and ``QUIT`` are terminal.
    """

    EXPLORING = "EXPLORING"
    FLOOR_CLEARED = "FLOOR_CLEARED"
    GAME_OVER = "GAME_OVER"
    QUIT = "QUIT"


class GameState(BaseModel):
    """Top-level state for a single game session."""

    model_config = {"arbitrary_types_allowed": True}

    player: Player = Field(default_factory=Player)
    enemies: list[Enemy] = Field(default_factory=list)
    """Enemy arena for the current floor, in spawn order.

    Enemies killed mid-turn stay in the list (marked dead) until
    :meth:`compact_enemies` runs between turns."""

    dungeon: Any = Field(default=None, exclude=True)
    """Current floor's ``DungeonMap``.  Excluded from serialization."""

    floor: int = Field(default=1, ge=1)
    turn: int = 0
    phase: Phase = Phase.EXPLORING

    # -- queries -------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self.phase not in (Phase.GAME_OVER, Phase.QUIT)

    @property
    def living_enemies(self) -> list[Enemy]:
        return [e for e in self.enemies if e.is_alive]

    @property
    def is_floor_cleared(self) -> bool:
        return all(not e.is_alive for e in self.enemies)

    def enemy_at(self, x: int, y: int, exclude: Enemy | None = None) -> Enemy | None:
        """Return the first living enemy standing on ``(x, y)``."""
        for enemy in self.enemies:
            if enemy is exclude or not enemy.is_alive:
                continue
            if enemy.x == x and enemy.y == y:
                return enemy
        return None

    # -- arena maintenance ---------------------------------------------------

    def compact_enemies(self) -> int:
        """Drop dead enemies from the arena.  Returns how many were removed."""
        before = len(self.enemies)
        self.enemies = self.living_enemies
        return before - len(self.enemies)
