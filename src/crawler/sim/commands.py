"""Single-character player commands."""

from __future__ import annotations

from enum import Enum

from crawler.sim.mechanics.movement import Direction


class Command(str, Enum):
    """Every command the turn engine accepts, keyed by its input character."""

    NORTH = "w"
    WEST = "a"
    SOUTH = "s"
    EAST = "d"
    ATTACK = "f"
    ABILITY_1 = "1"
    ABILITY_2 = "2"
    ABILITY_3 = "3"
    QUIT = "q"


MOVE_DIRECTIONS: dict[Command, Direction] = {
    Command.NORTH: Direction.NORTH,
    Command.WEST: Direction.WEST,
    Command.SOUTH: Direction.SOUTH,
    Command.EAST: Direction.EAST,
}

ABILITY_SLOTS: dict[Command, int] = {
    Command.ABILITY_1: 0,
    Command.ABILITY_2: 1,
    Command.ABILITY_3: 2,
}

COMMAND_HELP = "(w/a/s/d) move | (f) attack | (1-3) abilities | (q) quit"


def parse_command(raw: str) -> Command | None:
    """Return the command for the first non-blank character of *raw*.

    Returns ``None`` for empty input or an unknown character.
    """
    text = raw.strip()
    if not text:
        return None
    try:
        return Command(text[0])
    except ValueError:
        return None
