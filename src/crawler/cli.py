"""Command-line entry point.

Usage:
    crawler play [--seed N] [--log-level LEVEL]
    crawler simulate [--runs N] [--agent random|heuristic] [--seed N] [--max-turns N]
"""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING, Callable

from crawler.config import GameConfig
from crawler.sim.commands import Command
from crawler.sim.engine import GameSession
from crawler.sim.play_agents.base import CommandSource
from crawler.sim.play_agents.heuristic_agent import HeuristicAgent
from crawler.sim.play_agents.random_agent import RandomAgent
from crawler.sim.runner import DEFAULT_MAX_TURNS, BatchRunner

if TYPE_CHECKING:
    from crawler.sim.core.game_state import GameState

_AGENTS: dict[str, type[CommandSource]] = {
    "random": RandomAgent,
    "heuristic": HeuristicAgent,
}


class KeyboardSource(CommandSource):
    """Reads one line per prompt from stdin.  End of input quits."""

    def __init__(self, read_line: Callable[[str], str] | None = None) -> None:
        self._read_line = read_line

    def choose_command(self, state: GameState) -> str:
        read_line = self._read_line or input
        try:
            return read_line("> ")
        except EOFError:
            return Command.QUIT.value


def _count(minimum: int) -> Callable[[str], int]:
    """argparse type for integers no smaller than *minimum*."""

    def count(text: str) -> int:
        value = int(text)
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {value}")
        return value

    return count


def _play(args: argparse.Namespace) -> int:
    session = GameSession(GameConfig(seed=args.seed))
    print("=== TACTICAL DUNGEON CRAWLER ===")
    print("Survive the dungeon and defeat all enemies!")
    session.run(KeyboardSource(), output=print)
    return 0


def _simulate(args: argparse.Namespace) -> int:
    runner = BatchRunner(
        agent_class=_AGENTS[args.agent],
        config=GameConfig(max_turns=args.max_turns),
    )
    results = runner.run_batch(args.runs, base_seed=args.seed)
    if not results:
        print("No runs requested.")
        return 0

    deaths = sum(1 for r in results if r.final_result == "death")
    avg_floor = sum(r.floors_reached for r in results) / len(results)
    avg_level = sum(r.final_level for r in results) / len(results)
    avg_kills = sum(r.total_kills for r in results) / len(results)
    print(f"Runs: {len(results)} ({args.agent} agent, base seed {args.seed})")
    print(f"  Deaths: {deaths}/{len(results)}")
    print(f"  Avg floor reached: {avg_floor:.2f} (max {max(r.floors_reached for r in results)})")
    print(f"  Avg final level: {avg_level:.2f}")
    print(f"  Avg kills: {avg_kills:.1f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="crawler", description="Turn-based ASCII dungeon crawler")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Play interactively (default)")
    play.add_argument("--seed", type=int, default=None, help="Dungeon seed (default: clock)")
    play.set_defaults(handler=_play)

    simulate = sub.add_parser("simulate", help="Run headless games with an agent")
    simulate.add_argument("--runs", type=_count(0), default=100, help="Number of games")
    simulate.add_argument("--agent", choices=sorted(_AGENTS), default="heuristic")
    simulate.add_argument("--seed", type=int, default=42, help="Base seed")
    simulate.add_argument(
        "--max-turns", type=_count(1), default=DEFAULT_MAX_TURNS,
        help=f"Turn cap per game (default: {DEFAULT_MAX_TURNS})",
    )
    simulate.set_defaults(handler=_simulate)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        args.seed = None
        args.handler = _play
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
