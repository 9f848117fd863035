"""Batch simulation runner -- plays many headless games with an agent.

Each game gets its own seed (``base_seed + i``) and its own agent RNG
forked from that seed, so a batch is fully reproducible.  Games run one
after another in the calling process.
"""

from __future__ import annotations

import logging

from crawler.config import GameConfig
from crawler.sim.core.rng import GameRNG
from crawler.sim.engine import GameSession
from crawler.sim.play_agents.base import CommandSource
from crawler.sim.play_agents.random_agent import RandomAgent
from crawler.sim.telemetry import RunTelemetry

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 2000


def run_single_game(
    agent: CommandSource,
    seed: int,
    config: GameConfig | None = None,
) -> RunTelemetry:
    """Play one headless game with *agent* and return its telemetry."""
    base = config or GameConfig(max_turns=DEFAULT_MAX_TURNS)
    session = GameSession(base.model_copy(update={"seed": seed}))
    return session.run(agent)


class BatchRunner:
    """Runs many games with a given agent class."""

    def __init__(
        self,
        agent_class: type[CommandSource] = RandomAgent,
        config: GameConfig | None = None,
    ) -> None:
        self.agent_class = agent_class
        self.config = config or GameConfig(max_turns=DEFAULT_MAX_TURNS)

    def run_batch(self, n_runs: int, base_seed: int = 42) -> list[RunTelemetry]:
        """Play *n_runs* games with seeds ``base_seed .. base_seed + n_runs - 1``."""
        if n_runs < 0:
            raise ValueError(f"n_runs must be >= 0, got {n_runs}")

        results: list[RunTelemetry] = []
        for seed in range(base_seed, base_seed + n_runs):
            agent = self._make_agent(GameRNG(seed).fork("agent"))
            results.append(run_single_game(agent, seed, self.config))

        logger.info(
            "Finished %d runs with %s (base_seed=%d)",
            n_runs, self.agent_class.__name__, base_seed,
        )
        return results

    def _make_agent(self, rng: GameRNG) -> CommandSource:
        try:
            return self.agent_class(rng=rng)  # type: ignore[call-arg]
        except TypeError:
            return self.agent_class()
