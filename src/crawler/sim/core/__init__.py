"""Core simulation primitives for the dungeon crawler."""

from crawler.sim.core.abilities import Ability, AbilityType, default_abilities
from crawler.sim.core.entities import Enemy, Entity, Player
from crawler.sim.core.game_state import GameState, Phase
from crawler.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # abilities
    "Ability",
    "AbilityType",
    "default_abilities",
    # entities
    "Entity",
    "Player",
    "Enemy",
    # game_state
    "GameState",
    "Phase",
]
