"""Session configuration.

Everything is set in code or from CLI flags; there are no config files
or environment variables.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from crawler.sim.dungeon.map_gen import DEFAULT_HEIGHT, DEFAULT_WIDTH
from crawler.sim.dungeon.spawning import DEFAULT_BASE_COUNT


class GameConfig(BaseModel):
    """Tunable parameters for one game session."""

    seed: int | None = None
    """Master RNG seed.  ``None`` picks one from the system clock."""

    map_width: int = Field(default=DEFAULT_WIDTH, ge=15)
    map_height: int = Field(default=DEFAULT_HEIGHT, ge=12)

    base_enemy_count: int = Field(default=DEFAULT_BASE_COUNT, ge=0)
    """Enemies per floor are ``base_enemy_count + floor``."""

    floor_clear_heal: int = Field(default=30, ge=0)
    floor_clear_mana: int = Field(default=20, ge=0)
    mana_regen: int = Field(default=2, ge=0)
    """Mana restored at the end of every turn."""

    max_turns: int | None = Field(default=None, ge=1)
    """Stop headless runs after this many turns.  ``None`` means no cap."""
