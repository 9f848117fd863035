"""Telemetry data models for per-run statistics.

``RunTelemetry`` captures everything needed to compare play agents
without storing the entire game-state history.  It is a plain
``dataclass`` (not a Pydantic model) to keep collection cheap during
batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RunTelemetry:
    """Stats from a single game session.

    Attributes
    ----------
    seed:
        The master RNG seed used for this run.
    final_result:
        ``"death"``, ``"quit"`` or ``"turn_limit"``.
    floors_reached:
        Floor the player was on when the run ended.
    final_level:
        Player level at the end of the run.
    turns:
        Number of turns that consumed a player action.
    kills_by_enemy:
        Breakdown of defeated enemies: ``enemy name -> count``.
    damage_dealt:
        Total health removed from enemies by the player.
    damage_taken:
        Total health the player lost to enemies.
    abilities_used:
        Successful ability activations: ``ability name -> count``.
    """

    seed: int
    final_result: str = "quit"
    floors_reached: int = 1
    final_level: int = 1
    turns: int = 0
    kills_by_enemy: dict[str, int] = field(default_factory=dict)
    damage_dealt: int = 0
    damage_taken: int = 0
    abilities_used: dict[str, int] = field(default_factory=dict)

    @property
    def total_kills(self) -> int:
        return sum(self.kills_by_enemy.values())

    def record_kill(self, enemy_name: str) -> None:
        self.kills_by_enemy[enemy_name] = self.kills_by_enemy.get(enemy_name, 0) + 1

    def record_ability(self, ability_name: str) -> None:
        self.abilities_used[ability_name] = self.abilities_used.get(ability_name, 0) + 1
