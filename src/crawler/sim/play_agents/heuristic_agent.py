"""Heuristic-based agent that uses game knowledge to pick commands.

The ``HeuristicAgent`` is a hand-crafted policy evaluated as a priority
waterfall every turn:

1. **Survive**: Heal when health drops below ``heal_threshold``.
2. **Area damage**: Fire Blast, then Cleave, when at least
   ``aoe_min_targets`` enemies are inside the ability's radius.
3. **Melee**: Attack when an enemy is adjacent.
4. **Hunt**: Step toward the nearest enemy, trying the dominant axis
   first.  With no open step it wanders in a random direction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from crawler.sim.commands import ABILITY_SLOTS, MOVE_DIRECTIONS, Command
from crawler.sim.core.abilities import (
    CLEAVE_RADIUS,
    FIRE_BLAST_RADIUS,
    AbilityType,
)
from crawler.sim.core.rng import GameRNG
from crawler.sim.mechanics.targeting import enemies_within, melee_target, nearest_enemy
from crawler.sim.play_agents.base import CommandSource

if TYPE_CHECKING:
    from crawler.sim.core.entities import Player
    from crawler.sim.core.game_state import GameState

_SLOT_COMMANDS = {slot: command for command, slot in ABILITY_SLOTS.items()}


class HeuristicAgent(CommandSource):
    """Priority-based policy for automated play.

    Parameters
    ----------
    rng:
        Seeded RNG used only to break out of dead ends.
    heal_threshold:
        Fraction of max health below which the agent heals.
    aoe_min_targets:
        Enemies required in range before spending mana on an area ability.
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        heal_threshold: float = 0.4,
        aoe_min_targets: int = 2,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._heal_threshold = heal_threshold
        self._aoe_min_targets = aoe_min_targets

    def choose_command(self, state: GameState) -> str:
        player = state.player

        if player.health < player.max_health * self._heal_threshold:
            heal = self._ready_slot(player, AbilityType.HEAL)
            if heal is not None:
                return heal

        for ability_type, radius in (
            (AbilityType.FIRE_BLAST, FIRE_BLAST_RADIUS),
            (AbilityType.CLEAVE, CLEAVE_RADIUS),
        ):
            in_range = enemies_within(player, state.enemies, radius)
            if len(in_range) >= self._aoe_min_targets:
                command = self._ready_slot(player, ability_type)
                if command is not None:
                    return command

        if melee_target(player, state.enemies) is not None:
            return Command.ATTACK.value

        return self._hunt(state)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _ready_slot(player: Player, ability_type: AbilityType) -> str | None:
        """Command for the first ready, affordable ability of *ability_type*."""
        for slot, ability in enumerate(player.abilities):
            if (
                ability.ability_type is ability_type
                and ability.is_ready
                and player.mana >= ability.mana_cost
                and slot in _SLOT_COMMANDS
            ):
                return _SLOT_COMMANDS[slot].value
        return None

    def _hunt(self, state: GameState) -> str:
        player = state.player
        target = nearest_enemy(player, state.enemies)
        moves = list(MOVE_DIRECTIONS.items())
        if target is None:
            return self._rng.random_choice(moves)[0].value

        dx, dy = target.x - player.x, target.y - player.y

        def preference(item: tuple[Command, object]) -> int:
            direction = MOVE_DIRECTIONS[item[0]]
            # Larger projection onto the offset ranks first.
            return -(direction.dx * dx + direction.dy * dy)

        for command, direction in sorted(moves, key=preference):
            if direction.dx * dx + direction.dy * dy <= 0:
                break
            nx, ny = player.x + direction.dx, player.y + direction.dy
            if state.dungeon.is_walkable(nx, ny) and state.enemy_at(nx, ny) is None:
                return command.value

        return self._rng.random_choice(moves)[0].value
