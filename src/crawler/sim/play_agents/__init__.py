"""Command sources: keyboard-free agents that drive the turn engine."""

from crawler.sim.play_agents.base import CommandSource
from crawler.sim.play_agents.heuristic_agent import HeuristicAgent
from crawler.sim.play_agents.random_agent import RandomAgent, ScriptedAgent

__all__ = [
    "CommandSource",
    "HeuristicAgent",
    "RandomAgent",
    "ScriptedAgent",
]
