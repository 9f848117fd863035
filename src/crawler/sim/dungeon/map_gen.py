"""Dungeon generator -- rooms carved into solid rock, joined by L corridors.

Generation for one floor:

1. Fill a ``width x height`` grid (40x20 by default) with walls.
2. Place ``5 + random(0..3)`` rooms one after another.  Each room is
   5-12 cells wide and 4-9 cells tall, positioned inside a wall margin.
3. Every room after the first is joined to the previous one: a
   horizontal run along the previous room's centre row, then a vertical
   run along the new room's centre column.

Rooms and corridors may overlap; that only produces more floor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from crawler.sim.core.entities import Enemy, Player
    from crawler.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

WALL = "#"
FLOOR = "."

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 20

_MIN_ROOMS = 5
_EXTRA_ROOMS = 3
_ROOM_WIDTH = (5, 12)
_ROOM_HEIGHT = (4, 9)


@dataclass(frozen=True)
class Room:
    """Axis-aligned rectangular room (top-left origin)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def center(self) -> tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass
class DungeonMap:
    """One generated floor: a tile grid plus the rooms that were carved.

    ``tiles`` is indexed ``tiles[y][x]``.
    """

    width: int
    height: int
    tiles: list[list[str]]
    rooms: list[Room] = field(default_factory=list)

    @classmethod
    def solid(cls, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> DungeonMap:
        """Return a map that is entirely wall."""
        return cls(width, height, [[WALL] * width for _ in range(height)])

    # -- queries -------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        """True for floor cells, False for walls and anything out of bounds."""
        return self.in_bounds(x, y) and self.tiles[y][x] == FLOOR

    def floor_cells(self) -> list[tuple[int, int]]:
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.tiles[y][x] == FLOOR
        ]

    def random_floor_cell(self, rng: GameRNG) -> tuple[int, int]:
        """Rejection-sample a uniformly random floor cell.

        The map must contain at least one floor cell; generated maps
        always do.
        """
        while True:
            x = rng.random_int(0, self.width - 1)
            y = rng.random_int(0, self.height - 1)
            if self.tiles[y][x] == FLOOR:
                return (x, y)

    # -- carving -------------------------------------------------------------

    def carve(self, x: int, y: int) -> None:
        self.tiles[y][x] = FLOOR

    def carve_room(self, room: Room) -> None:
        for yy in range(room.y, room.y + room.height):
            for xx in range(room.x, room.x + room.width):
                self.carve(xx, yy)

    def carve_corridor(self, start: tuple[int, int], end: tuple[int, int]) -> None:
        """Carve an L-shaped corridor: horizontal along ``start``'s row,
        then vertical along ``end``'s column."""
        (sx, sy), (ex, ey) = start, end
        for xx in range(min(sx, ex), max(sx, ex) + 1):
            self.carve(xx, sy)
        for yy in range(min(sy, ey), max(sy, ey) + 1):
            self.carve(ex, yy)

    # -- rendering -----------------------------------------------------------

    def render(self, player: Player, enemies: Iterable[Enemy] = ()) -> list[str]:
        """Project entity glyphs onto the grid without mutating it.

        The player wins its cell; otherwise the first alive enemy found
        at a cell is drawn over the terrain.
        """
        overlay: dict[tuple[int, int], str] = {}
        for enemy in enemies:
            if enemy.is_alive:
                overlay.setdefault((enemy.x, enemy.y), enemy.glyph)
        overlay[(player.x, player.y)] = player.glyph

        return [
            "".join(overlay.get((x, y), self.tiles[y][x]) for x in range(self.width))
            for y in range(self.height)
        ]


class DungeonGenerator:
    """Builds a fresh :class:`DungeonMap` for each floor."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        # The largest room plus its margins has to fit on the grid.
        if width < _ROOM_WIDTH[1] + 3 or height < _ROOM_HEIGHT[1] + 3:
            raise ValueError(
                f"map must be at least {_ROOM_WIDTH[1] + 3}x{_ROOM_HEIGHT[1] + 3}, "
                f"got {width}x{height}"
            )
        self.width = width
        self.height = height

    def generate(self, rng: GameRNG) -> DungeonMap:
        """Generate one floor's layout from *rng*."""
        dungeon = DungeonMap.solid(self.width, self.height)
        num_rooms = _MIN_ROOMS + rng.random_int(0, _EXTRA_ROOMS)

        for i in range(num_rooms):
            room = self._roll_room(rng)
            dungeon.carve_room(room)
            dungeon.rooms.append(room)

            if i > 0:
                dungeon.carve_corridor(dungeon.rooms[i - 1].center, room.center)

        logger.debug(
            "Generated %dx%d dungeon with %d rooms (seed=%s)",
            self.width, self.height, num_rooms, rng.seed,
        )
        return dungeon

    def _roll_room(self, rng: GameRNG) -> Room:
        width = rng.random_int(*_ROOM_WIDTH)
        height = rng.random_int(*_ROOM_HEIGHT)
        x = rng.random_int(1, self.width - width - 2)
        y = rng.random_int(1, self.height - height - 2)
        return Room(x, y, width, height)
