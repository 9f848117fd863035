"""Game mechanics -- combat, abilities, movement and targeting."""

from crawler.sim.mechanics.combat import award_kill, melee_attack, strike, use_ability
from crawler.sim.mechanics.movement import Direction, advance_enemy, move_player, step_toward
from crawler.sim.mechanics.targeting import (
    chebyshev,
    enemies_within,
    manhattan,
    melee_target,
    nearest_enemy,
)

__all__ = [
    # combat
    "award_kill",
    "melee_attack",
    "strike",
    "use_ability",
    # movement
    "Direction",
    "advance_enemy",
    "move_player",
    "step_toward",
    # targeting
    "chebyshev",
    "enemies_within",
    "manhattan",
    "melee_target",
    "nearest_enemy",
]
