"""Grid distances and target selection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from crawler.sim.core.entities import Enemy, Entity


def manhattan(a: Entity, b: Entity) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def chebyshev(a: Entity, b: Entity) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y))


def enemies_within(source: Entity, enemies: Iterable[Enemy], radius: int) -> list[Enemy]:
    """Living enemies whose Chebyshev distance to *source* is <= *radius*,
    in arena order."""
    return [e for e in enemies if e.is_alive and chebyshev(source, e) <= radius]


def melee_target(source: Entity, enemies: Iterable[Enemy]) -> Enemy | None:
    """Pick the adjacent enemy (8-neighbourhood) to strike.

    Every neighbour counts as equally close, so the earliest living one in
    the arena wins, diagonal or not.
    """
    candidates = enemies_within(source, enemies, 1)
    return candidates[0] if candidates else None


def nearest_enemy(source: Entity, enemies: Iterable[Enemy]) -> Enemy | None:
    """Closest living enemy by Manhattan distance (first wins ties)."""
    living = [e for e in enemies if e.is_alive]
    if not living:
        return None
    return min(living, key=lambda e: manhattan(source, e))
