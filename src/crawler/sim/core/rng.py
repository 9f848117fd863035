"""Seeded dice for the dungeon.

A session owns one ``GameRNG`` built from its seed and hands named forks
to the dungeon generator, the spawner and the enemy AI.  Each fork is a
separate stream, so extra rolls in combat never shift the layout of the
next floor.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Reproducible random stream with named, independent children."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def random_int(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``, both ends included."""
        return self._random.randint(low, high)

    def random_choice(self, options: Sequence[T]) -> T:
        return self._random.choice(options)

    def roll_percent(self) -> int:
        """d100 roll, ``0..99``."""
        return self.random_int(0, 99)

    def chance(self, percent: int) -> bool:
        """Succeed when a d100 roll lands under *percent*."""
        return self.roll_percent() < percent

    def fork(self, name: str) -> GameRNG:
        """Child stream keyed by ``(seed, name)``.

        Only the seed and *name* feed the child, never the parent's
        position, so ``fork("dungeon:3")`` yields the same floor no matter
        how much the parent has rolled.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        return GameRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
