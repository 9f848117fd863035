"""Enemy variants and their per-turn attack behaviour.

Each variant is an :class:`~crawler.sim.core.entities.Enemy` subclass with
its own stats and a ``resolve_turn`` hook:

- **Goblin**: aggressive, 70 % chance to hit when adjacent.
- **Orc**: hits harder (+5) but only 60 % of the time.
- **Dragon**: fire breath at range (25 damage, ignores defense, 3-turn
  cooldown, 40 % chance), otherwise claws when adjacent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from crawler.sim.core.entities import Enemy, Player

if TYPE_CHECKING:
    from crawler.sim.core.rng import GameRNG


MELEE_RANGE = 1


class Goblin(Enemy):
    name: str = "Goblin"
    max_health: int = 30
    health: int = 30
    attack: int = 8
    defense: int = 2
    glyph: str = "g"
    exp_value: int = 25

    hit_chance: int = 70

    def resolve_turn(self, player: Player, distance: int, rng: GameRNG) -> list[str]:
        if distance <= MELEE_RANGE and rng.chance(self.hit_chance):
            dealt = player.take_damage(self.attack)
            return [f"{self.name} attacks you for {dealt} damage!"]
        return []


class Orc(Enemy):
    name: str = "Orc"
    max_health: int = 50
    health: int = 50
    attack: int = 12
    defense: int = 4
    glyph: str = "O"
    exp_value: int = 40

    hit_chance: int = 60
    smash_bonus: int = 5

    def resolve_turn(self, player: Player, distance: int, rng: GameRNG) -> list[str]:
        if distance <= MELEE_RANGE and rng.chance(self.hit_chance):
            dealt = player.take_damage(self.attack + self.smash_bonus)
            return [f"{self.name} smashes you for {dealt} damage!"]
        return []


class Dragon(Enemy):
    name: str = "Dragon"
    max_health: int = 120
    health: int = 120
    attack: int = 20
    defense: int = 8
    glyph: str = "D"
    exp_value: int = 100

    breath_cooldown: int = Field(default=0, ge=0, le=3)
    """Turns until fire breath is available again."""

    breath_range: int = 3
    breath_chance: int = 40
    breath_damage: int = 25
    breath_recharge: int = 3

    def resolve_turn(self, player: Player, distance: int, rng: GameRNG) -> list[str]:
        if self.breath_cooldown > 0:
            self.breath_cooldown -= 1

        if (
            distance <= self.breath_range
            and self.breath_cooldown == 0
            and rng.chance(self.breath_chance)
        ):
            # Fire breath ignores armour entirely.
            dealt = player.lose_health(self.breath_damage)
            self.breath_cooldown = self.breath_recharge
            return [f"{self.name} breathes fire for {dealt} damage!"]

        if distance <= MELEE_RANGE:
            dealt = player.take_damage(self.attack)
            return [f"{self.name} claws you for {dealt} damage!"]
        return []


ENEMY_TYPES: dict[str, type[Enemy]] = {
    "goblin": Goblin,
    "orc": Orc,
    "dragon": Dragon,
}


def create_enemy(enemy_id: str, x: int = 0, y: int = 0, slot_id: int = -1) -> Enemy:
    """Instantiate a fresh enemy of the given variant at ``(x, y)``."""
    try:
        cls = ENEMY_TYPES[enemy_id.lower()]
    except KeyError:
        raise KeyError(f"Unknown enemy_id: {enemy_id!r}") from None
    return cls(x=x, y=y, slot_id=slot_id)
