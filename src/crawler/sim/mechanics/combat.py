"""Player-initiated combat: melee strikes and ability resolution.

Every function here returns the event messages it produced.  Failed
actions (no target, ability on cooldown, not enough mana) report why and
leave the state untouched; they never raise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from crawler.sim.core.abilities import (
    CLEAVE_ATTACK_MULTIPLIER,
    CLEAVE_RADIUS,
    FIRE_BLAST_DAMAGE,
    FIRE_BLAST_RADIUS,
    HEAL_AMOUNT,
    Ability,
    AbilityType,
)
from crawler.sim.mechanics.targeting import enemies_within, melee_target

if TYPE_CHECKING:
    from crawler.sim.core.entities import Enemy
    from crawler.sim.core.game_state import GameState

logger = logging.getLogger(__name__)


def award_kill(state: GameState, enemy: Enemy) -> list[str]:
    """Grant experience for a defeated *enemy* and announce level-ups."""
    messages = [f"{enemy.name} has been defeated! (+{enemy.exp_value} XP)"]
    for level in state.player.gain_experience(enemy.exp_value):
        messages.append(f"*** LEVEL UP! You are now level {level} ***")
    return messages


def strike(state: GameState, enemy: Enemy, amount: int) -> tuple[int, list[str]]:
    """Hit *enemy* for *amount* raw damage (defense applies).

    Returns ``(health_lost, messages)``; messages only cover the kill.
    """
    lost = enemy.take_damage(amount)
    if enemy.is_alive:
        return lost, []
    return lost, award_kill(state, enemy)


# ---------------------------------------------------------------------------
# Melee
# ---------------------------------------------------------------------------

def melee_attack(state: GameState) -> list[str]:
    """Attack one adjacent enemy with the player's base attack."""
    target = melee_target(state.player, state.enemies)
    if target is None:
        return ["No enemy in range!"]

    lost, kill_messages = strike(state, target, state.player.attack)
    return [f"You attack {target.name} for {lost} damage!", *kill_messages]


# ---------------------------------------------------------------------------
# Abilities
# ---------------------------------------------------------------------------

def use_ability(state: GameState, index: int) -> tuple[bool, list[str]]:
    """Use the player's ability in slot *index* (0-based).

    Returns ``(used, messages)``.  ``used`` is False when the slot is
    invalid, the ability is cooling down or mana is short; mana and
    cooldown are untouched in that case.
    """
    player = state.player
    if not 0 <= index < len(player.abilities):
        return False, ["Invalid ability!"]

    ability = player.abilities[index]
    if not ability.is_ready:
        return False, [f"{ability.name} is on cooldown ({ability.current_cooldown} turns)"]

    if not player.spend_mana(ability.mana_cost):
        return False, [f"Not enough mana! ({ability.name} costs {ability.mana_cost} MP)"]

    ability.use()
    handler = _ABILITY_HANDLERS.get(ability.ability_type)
    if handler is None:
        logger.warning("No handler for ability type %s", ability.ability_type)
        return True, [f"{ability.name} fizzles."]
    return True, handler(state, ability)


def _area_blast(
    state: GameState, radius: int, amount: int,
) -> tuple[int, list[str]]:
    """Damage every living enemy in *radius*.  Returns ``(hits, kill_messages)``."""
    targets = enemies_within(state.player, state.enemies, radius)
    messages: list[str] = []
    for enemy in targets:
        _, kill_messages = strike(state, enemy, amount)
        messages.extend(kill_messages)
    return len(targets), messages


def _resolve_cleave(state: GameState, ability: Ability) -> list[str]:
    amount = state.player.attack * CLEAVE_ATTACK_MULTIPLIER
    hits, kill_messages = _area_blast(state, CLEAVE_RADIUS, amount)
    return [f"You cleave through {hits} enemies!", *kill_messages]


def _resolve_heal(state: GameState, ability: Ability) -> list[str]:
    healed = state.player.heal(HEAL_AMOUNT)
    return [f"You heal for {healed} HP!"]


def _resolve_fire_blast(state: GameState, ability: Ability) -> list[str]:
    hits, kill_messages = _area_blast(state, FIRE_BLAST_RADIUS, FIRE_BLAST_DAMAGE)
    return [f"Fire engulfs the area, scorching {hits} enemies!", *kill_messages]


_ABILITY_HANDLERS: dict[AbilityType, Callable[[GameState, Ability], list[str]]] = {
    AbilityType.CLEAVE: _resolve_cleave,
    AbilityType.HEAL: _resolve_heal,
    AbilityType.FIRE_BLAST: _resolve_fire_blast,
}
