"""Turn engine -- drives a game session one player command at a time.

Per-turn order:

1. Render HUD and map.
2. Floor-clear check: with every enemy dead the session enters
   ``FLOOR_CLEARED``, then descends to a new floor (fresh dungeon, new
   enemies, heal/mana bonus) and goes back to 1 without consuming a
   command.
3. Read one command.  Unknown input is rejected and re-prompted.
4. Resolve the command: a move, a melee attack, an ability, or quit.
5. Tick ability cooldowns.
6. Enemy pass: every living enemy attacks (variant hook) and may step
   toward the player, in arena order.
7. Passive mana regeneration.
8. Death check.

Dead enemies stay in the arena during a turn and are compacted away once
the turn has resolved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from crawler.config import GameConfig
from crawler.render import render_frame, render_summary
from crawler.sim.commands import ABILITY_SLOTS, MOVE_DIRECTIONS, Command, parse_command
from crawler.sim.core.game_state import GameState, Phase
from crawler.sim.core.rng import GameRNG
from crawler.sim.dungeon.map_gen import DungeonGenerator
from crawler.sim.dungeon.spawning import spawn_enemies
from crawler.sim.mechanics.combat import melee_attack, use_ability
from crawler.sim.mechanics.movement import advance_enemy, move_player
from crawler.sim.mechanics.targeting import manhattan
from crawler.sim.play_agents.base import CommandSource
from crawler.sim.telemetry import RunTelemetry

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Outcome of feeding one command to :meth:`GameSession.play_turn`."""

    command: Command | None
    """Parsed command, or ``None`` when the input was rejected."""

    messages: list[str] = field(default_factory=list)
    consumed: bool = False
    """True when the turn advanced (cooldowns, enemies and regen ran)."""


class GameSession:
    """A single game from the first floor to death or quitting.

    Parameters
    ----------
    config:
        Session parameters.  Defaults to ``GameConfig()``.
    rng:
        Master RNG.  When omitted one is built from ``config.seed`` (or the
        clock if that is ``None``).  Forked per sub-system so the layout of
        floor *n* depends only on the seed.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: GameRNG | None = None,
    ) -> None:
        self.config = config or GameConfig()
        if rng is None:
            seed = self.config.seed if self.config.seed is not None else int(time.time())
            rng = GameRNG(seed)
        self.rng = rng
        self._ai_rng = rng.fork("ai")
        self.generator = DungeonGenerator(self.config.map_width, self.config.map_height)
        self.telemetry = RunTelemetry(seed=rng.seed)
        self.state = GameState()
        self._enter_floor(1)

    # ------------------------------------------------------------------
    # Floors
    # ------------------------------------------------------------------

    def _enter_floor(self, floor: int) -> None:
        """Replace the dungeon and enemies with a freshly generated floor."""
        state = self.state
        state.floor = floor
        state.enemies = []
        state.dungeon = self.generator.generate(self.rng.fork(f"dungeon:{floor}"))

        spawn_rng = self.rng.fork(f"spawn:{floor}")
        state.player.set_position(*state.dungeon.random_floor_cell(spawn_rng))
        state.enemies = spawn_enemies(
            state.dungeon, floor, spawn_rng, base_count=self.config.base_enemy_count,
        )
        state.phase = Phase.EXPLORING
        logger.debug(
            "Entered floor %d: player at %s, %d enemies",
            floor, state.player.position, len(state.enemies),
        )

    def check_floor_clear(self) -> list[str]:
        """Move to ``FLOOR_CLEARED`` once every enemy is dead.

        Returns the announcement, or an empty list while enemies remain.
        The session stays cleared until :meth:`descend` is called.
        """
        state = self.state
        if state.phase is not Phase.EXPLORING or not state.is_floor_cleared:
            return []
        state.phase = Phase.FLOOR_CLEARED
        logger.debug("Floor %d cleared on turn %d", state.floor, state.turn)
        return [f"*** Floor {state.floor} cleared! ***"]

    def descend(self) -> list[str]:
        """Build the next floor and grant the clear bonus."""
        state = self.state
        if state.phase is not Phase.FLOOR_CLEARED:
            raise RuntimeError(f"Cannot descend from phase {state.phase.value}")

        self._enter_floor(state.floor + 1)
        player = state.player
        healed = player.heal(self.config.floor_clear_heal)
        restored = player.restore_mana(self.config.floor_clear_mana)
        self.telemetry.floors_reached = state.floor
        return [f"You descend to floor {state.floor} (+{healed} HP, +{restored} MP)."]

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    def play_turn(self, raw: str) -> TurnResult:
        """Resolve one raw command.

        Rejected input changes nothing.  ``q`` ends the session at once.
        """
        state = self.state
        if state.phase is not Phase.EXPLORING:
            raise RuntimeError(f"Not accepting commands (phase={state.phase.value})")

        command = parse_command(raw)
        if command is None:
            return TurnResult(command=None, messages=["Invalid input!"])

        if command is Command.QUIT:
            state.phase = Phase.QUIT
            return TurnResult(command=command, messages=["You flee the dungeon."])

        player = state.player
        enemy_health_before = sum(e.health for e in state.enemies)
        alive_before = {e.slot_id for e in state.living_enemies}

        if command in MOVE_DIRECTIONS:
            messages = move_player(state, MOVE_DIRECTIONS[command])
        elif command is Command.ATTACK:
            messages = melee_attack(state)
        else:
            slot = ABILITY_SLOTS[command]
            used, messages = use_ability(state, slot)
            if used:
                self.telemetry.record_ability(player.abilities[slot].name)

        self.telemetry.damage_dealt += enemy_health_before - sum(e.health for e in state.enemies)
        for enemy in state.enemies:
            if enemy.slot_id in alive_before and not enemy.is_alive:
                self.telemetry.record_kill(enemy.name)

        player.tick_abilities()

        health_before = player.health
        messages.extend(self._run_enemy_pass())
        self.telemetry.damage_taken += health_before - player.health

        player.restore_mana(self.config.mana_regen)
        state.turn += 1
        self.telemetry.turns += 1

        if not player.is_alive:
            state.phase = Phase.GAME_OVER
            messages.append("You have been slain!")
            logger.debug("Player died on floor %d at level %d", state.floor, player.level)

        state.compact_enemies()
        return TurnResult(command=command, messages=messages, consumed=True)

    def _run_enemy_pass(self) -> list[str]:
        state = self.state
        messages: list[str] = []
        for enemy in state.enemies:
            if not enemy.is_alive:
                continue
            distance = manhattan(state.player, enemy)
            messages.extend(enemy.resolve_turn(state.player, distance, self._ai_rng))
            advance_enemy(state, enemy, distance, self._ai_rng)
        return messages

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(
        self,
        source: CommandSource,
        output: Callable[[str], None] | None = None,
    ) -> RunTelemetry:
        """Play until death, quit or the turn cap.  Returns telemetry.

        *output* receives every block of player-facing text; by default
        nothing is shown, which suits batch simulation.
        """
        emit = output or (lambda text: None)
        state = self.state
        max_turns = self.config.max_turns

        while state.running:
            if max_turns is not None and state.turn >= max_turns:
                logger.warning("Turn limit %d reached on floor %d", max_turns, state.floor)
                break

            emit(render_frame(state))

            cleared = self.check_floor_clear()
            if cleared:
                for message in cleared + self.descend():
                    emit(message)
                continue

            raw = source.choose_command(state)
            result = self.play_turn(raw)
            if result.command is None:
                logger.debug("Rejected command %r", raw)
            for message in result.messages:
                emit(message)

        self._finish_telemetry()
        emit(render_summary(self.telemetry))
        return self.telemetry

    def _finish_telemetry(self) -> None:
        state = self.state
        telemetry = self.telemetry
        if state.phase is Phase.GAME_OVER:
            telemetry.final_result = "death"
        elif state.phase is Phase.QUIT:
            telemetry.final_result = "quit"
        else:
            telemetry.final_result = "turn_limit"
        telemetry.floors_reached = state.floor
        telemetry.final_level = state.player.level
