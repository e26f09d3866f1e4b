# search/successors.py
from collections.abc import Iterator

from astar_grid.domain.grid import NON_WALKABLE, GridOracle
from astar_grid.domain.position import Position

# Order matters: it decides which of several equal-sum successors is expanded first.
CARDINAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


def walkable_successors(
    oracle: GridOracle,
    position: Position,
    came_from: Position | None,
    *,
    threshold: int = NON_WALKABLE,
) -> Iterator[Position]:
    """
    Yield the walkable cardinal neighbours of ``position``.

    ``came_from`` is the parent's position and is never yielded back, which
    rules out trivial two-step cycles. The start node passes ``None``.
    """
    for dx, dy in CARDINAL_OFFSETS:
        c = Position(position.x + dx, position.y + dy)
        if oracle(c.x, c.y) >= threshold:
            continue
        if came_from is not None and c == came_from:
            continue
        yield c
