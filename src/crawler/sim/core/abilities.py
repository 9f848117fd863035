"""Ability catalog -- named, cooldown-gated player actions."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class AbilityType(str, Enum):
    """Effect tag that selects how an ability resolves."""

    NONE = "NONE"
    CLEAVE = "CLEAVE"
    HEAL = "HEAL"
    FIRE_BLAST = "FIRE_BLAST"


class Ability(BaseModel):
    """A special action with a mana cost and a per-use cooldown."""

    name: str
    ability_type: AbilityType = AbilityType.NONE
    cooldown: int = Field(ge=0)
    """Turns the ability stays unavailable after each use."""

    current_cooldown: int = Field(default=0, ge=0)
    """Turns remaining until the ability is ready again (0 = ready)."""

    mana_cost: int = Field(default=0, ge=0)

    @property
    def is_ready(self) -> bool:
        return self.current_cooldown == 0

    def use(self) -> None:
        """Start the cooldown.  Mana is paid by the caller."""
        self.current_cooldown = self.cooldown

    def tick(self) -> None:
        """Advance the cooldown by one turn, never below zero."""
        if self.current_cooldown > 0:
            self.current_cooldown -= 1


# Area-of-effect parameters (Chebyshev radius, raw damage) for the
# damaging ability types.  Cleave damage scales with attack instead.
CLEAVE_RADIUS = 2
CLEAVE_ATTACK_MULTIPLIER = 2
FIRE_BLAST_RADIUS = 3
FIRE_BLAST_DAMAGE = 30
HEAL_AMOUNT = 40


def default_abilities() -> list[Ability]:
    """Return fresh copies of the player's three fixed ability slots."""
    return [
        Ability(name="Cleave", ability_type=AbilityType.CLEAVE, cooldown=3, mana_cost=15),
        Ability(name="Heal", ability_type=AbilityType.HEAL, cooldown=5, mana_cost=20),
        Ability(name="Fire Blast", ability_type=AbilityType.FIRE_BLAST, cooldown=4, mana_cost=25),
    ]
