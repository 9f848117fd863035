"""Entity models for the dungeon crawler simulation.

All data classes use Pydantic v2 BaseModel for validation and
serialization.  Enemy variants (Goblin, Orc, Dragon) live in
:mod:`crawler.sim.enemies`.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

from crawler.sim.core.abilities import Ability, default_abilities

if TYPE_CHECKING:
    from crawler.sim.core.rng import GameRNG


# ---------------------------------------------------------------------------
# Entity base
# ---------------------------------------------------------------------------

class Entity(BaseModel):
    """Common base for anything with health and a grid position."""

    name: str
    max_health: int = Field(gt=0)
    health: int
    attack: int = Field(default=0, ge=0)
    defense: int = Field(default=0, ge=0)
    x: int = 0
    y: int = 0
    glyph: str = Field(default="?", min_length=1, max_length=1)

    @model_validator(mode="after")
    def _check_health(self) -> Entity:
        if not 0 <= self.health <= self.max_health:
            raise ValueError(
                f"health must be within [0, {self.max_health}], got {self.health}"
            )
        return self

    # -- queries -------------------------------------------------------------

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    # -- damage / heal -------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Apply *amount* incoming damage reduced by defense.

        At least 1 point always gets through.  Returns the health actually
        lost, which is smaller than the net damage when it overkills.
        """
        if amount < 0:
            raise ValueError(f"take_damage amount must be >= 0, got {amount}")
        return self.lose_health(max(1, amount - self.defense))

    def lose_health(self, amount: int) -> int:
        """Remove *amount* health directly, bypassing defense."""
        if amount < 0:
            raise ValueError(f"lose_health amount must be >= 0, got {amount}")
        lost = min(self.health, amount)
        self.health -= lost
        return lost

    def heal(self, amount: int) -> int:
        """Heal *amount* health, capped at ``max_health``.  Returns the gain."""
        if amount < 0:
            raise ValueError(f"heal amount must be >= 0, got {amount}")
        before = self.health
        self.health = min(self.max_health, self.health + amount)
        return self.health - before


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------

XP_PER_LEVEL = 100


class Player(Entity):
    """The player character."""

    name: str = "Hero"
    max_health: int = 100
    health: int = 100
    attack: int = 15
    defense: int = 5
    glyph: str = "@"

    mana: int = Field(default=50, ge=0)
    max_mana: int = Field(default=50, ge=0)
    experience: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    abilities: list[Ability] = Field(default_factory=default_abilities, max_length=3)

    @model_validator(mode="after")
    def _check_mana(self) -> Player:
        if self.mana > self.max_mana:
            raise ValueError(f"mana must be <= {self.max_mana}, got {self.mana}")
        return self

    @property
    def next_level_xp(self) -> int:
        """Experience needed to reach the next level."""
        return self.level * XP_PER_LEVEL

    # -- experience ----------------------------------------------------------

    def gain_experience(self, amount: int) -> list[int]:
        """Add *amount* experience, levelling up once per threshold crossed.

        Returns the list of levels reached (empty when no level-up).
        """
        if amount < 0:
            raise ValueError(f"gain_experience amount must be >= 0, got {amount}")
        self.experience += amount
        reached: list[int] = []
        while self.experience >= self.next_level_xp:
            self.experience -= self.next_level_xp
            self.level_up()
            reached.append(self.level)
        return reached

    def level_up(self) -> None:
        self.level += 1
        self.max_health += 20
        self.health = self.max_health
        self.attack += 3
        self.defense += 2
        self.max_mana += 10
        self.mana = self.max_mana

    # -- mana ----------------------------------------------------------------

    def spend_mana(self, amount: int) -> bool:
        """Deduct *amount* mana if affordable.  Returns False (and changes
        nothing) otherwise."""
        if amount < 0:
            raise ValueError(f"spend_mana amount must be >= 0, got {amount}")
        if self.mana < amount:
            return False
        self.mana -= amount
        return True

    def restore_mana(self, amount: int) -> int:
        """Restore *amount* mana, capped at ``max_mana``.  Returns the gain."""
        if amount < 0:
            raise ValueError(f"restore_mana amount must be >= 0, got {amount}")
        before = self.mana
        self.mana = min(self.max_mana, self.mana + amount)
        return self.mana - before

    # -- abilities -----------------------------------------------------------

    def tick_abilities(self) -> None:
        for ability in self.abilities:
            ability.tick()


# ---------------------------------------------------------------------------
# Enemy
# ---------------------------------------------------------------------------

class Enemy(Entity):
    """Base for AI-controlled monsters.

    Subclasses implement :meth:`resolve_turn`, the per-turn attack hook.
    Movement is handled separately by the turn engine.
    """

    exp_value: int = Field(default=0, ge=0)
    """Experience granted to the player when this enemy dies."""

    slot_id: int = -1
    """Arena index assigned at spawn time.  Unique within a floor and kept
    through compaction, so the turn engine tracks kills by it."""

    @abstractmethod
    def resolve_turn(self, player: Player, distance: int, rng: GameRNG) -> list[str]:
        """Run this enemy's attack behaviour against *player*.

        *distance* is the Manhattan distance to the player at the start of
        the enemy's turn.  Returns the event messages produced.
        """
