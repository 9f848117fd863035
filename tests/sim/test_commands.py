"""Tests for command parsing."""

import pytest

from crawler.sim.commands import ABILITY_SLOTS, MOVE_DIRECTIONS, Command, parse_command
from crawler.sim.mechanics.movement import Direction


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("w", Command.NORTH),
        ("a", Command.WEST),
        ("s", Command.SOUTH),
        ("d", Command.EAST),
        ("f", Command.ATTACK),
        ("1", Command.ABILITY_1),
        ("3", Command.ABILITY_3),
        ("q", Command.QUIT),
        ("  f  ", Command.ATTACK),
        ("fight", Command.ATTACK),
    ],
)
def test_parse_valid(raw, expected):
    assert parse_command(raw) is expected


@pytest.mark.parametrize("raw", ["", "   ", "x", "4", "0", "W", "Q", "\n"])
def test_parse_invalid(raw):
    assert parse_command(raw) is None


def test_tables_cover_commands():
    assert MOVE_DIRECTIONS[Command.NORTH] is Direction.NORTH
    assert sorted(ABILITY_SLOTS.values()) == [0, 1, 2]
    routed = set(MOVE_DIRECTIONS) | set(ABILITY_SLOTS) | {Command.ATTACK, Command.QUIT}
    assert routed == set(Command)
