# search/node.py
from dataclasses import dataclass

from astar_grid.domain.position import Position


class ArenaExhausted(RuntimeError):
    """Raised when a bounded arena has no free node left."""


@dataclass
class SearchNode:
    handle: int
    position: Position
    cost: float = 0.0  # g
    distance: float = 0.0  # h
    cost_distance_sum: float = 0.0  # f
    parent: int | None = None
    child: int | None = None  # filled only once a solution is found

    def reinitialize(self, position: Position) -> None:
        self.position = position
        self.cost = self.distance = self.cost_distance_sum = 0.0
        self.parent = self.child = None


class NodeArena:
    """
    Handle-indexed node pool owned by one engine.

    ``reset()`` truncates the logical length but keeps the node objects, so
    repeated searches reuse them instead of reallocating.
    """

    def __init__(self, capacity: int | None = None):
        if capacity is not None and capacity < 1:
            raise ValueError(f"arena capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._nodes: list[SearchNode] = []
        self._count = 0
        self.high_water = 0

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, handle: int) -> SearchNode:
        if not 0 <= handle < self._count:
            raise IndexError(f"stale or unknown node handle {handle}")
        return self._nodes[handle]

    def allocate(self, position: Position) -> int:
        if self.capacity is not None and self._count >= self.capacity:
            raise ArenaExhausted(f"node arena exhausted at {self.capacity} nodes")
        handle = self._count
        if handle < len(self._nodes):
            self._nodes[handle].reinitialize(position)
        else:
            self._nodes.append(SearchNode(handle=handle, position=position))
        self._count += 1
        self.high_water = max(self.high_water, self._count)
        return handle

    def reset(self) -> None:
        self._count = 0
        self.high_water = 0

    @property
    def reserved(self) -> int:
        """Node objects kept alive for reuse (>= len(self))."""
        return len(self._nodes)
