"""Random agents -- the simplest possible command sources.

``RandomAgent`` is the baseline for batch simulation runs: it lets us
verify that the whole turn loop works end-to-end and gives a lower bound
on how far a player gets without any strategy.  ``ScriptedAgent`` replays
a fixed command list, which makes engine tests read like a transcript.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from crawler.sim.commands import Command
from crawler.sim.core.rng import GameRNG
from crawler.sim.play_agents.base import CommandSource

if TYPE_CHECKING:
    from crawler.sim.core.game_state import GameState


class RandomAgent(CommandSource):
    """Agent that picks a uniformly random command each turn.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    allow_quit:
        Whether ``q`` is in the command pool.  Off by default so batch
        runs end by death or turn limit.
    """

    def __init__(self, rng: GameRNG | None = None, allow_quit: bool = False) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._commands = [
            c.value for c in Command if allow_quit or c is not Command.QUIT
        ]

    def choose_command(self, state: GameState) -> str:
        return self._rng.random_choice(self._commands)


class ScriptedAgent(CommandSource):
    """Replays *commands* in order, then quits."""

    def __init__(self, commands: Iterable[str]) -> None:
        self._commands = list(commands)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._commands) - self._index

    def choose_command(self, state: GameState) -> str:
        if self._index >= len(self._commands):
            return Command.QUIT.value
        command = self._commands[self._index]
        self._index += 1
        return command
