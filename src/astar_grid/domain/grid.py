# domain/grid.py
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

# 9+ impassable, 0..8 traversal weight
NON_WALKABLE = 9


@runtime_checkable
class GridOracle(Protocol):
    """
    Responsibilities:
      • Return the cost of entering cell (x, y).
      • Return a value >= the non-walkable threshold for blocked or off-grid cells.
    Must be pure; the engine calls it arbitrarily often and never caches results.
    """

    def __call__(self, x: int, y: int) -> int: ...


class ArrayGrid(GridOracle):
    """
    Flat numpy cost grid, indexed ``costs[y, x]``.

    Off-grid cells read as ``max(off_grid_cost, threshold)`` so they stay
    impassable whatever threshold the engine runs with.
    """

    def __init__(
        self, costs, *, off_grid_cost: int = NON_WALKABLE, threshold: int = NON_WALKABLE
    ):
        arr = np.asarray(costs)
        if arr.ndim != 2:
            raise ValueError(f"cost grid must be 2-D, got shape {arr.shape}")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"cost grid must hold integers, got dtype {arr.dtype}")
        self.costs = arr
        self.threshold = int(threshold)
        self.off_grid_cost = max(int(off_grid_cost), self.threshold)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], **kw) -> "ArrayGrid":
        return cls(np.array(rows), **kw)

    def for_threshold(self, threshold: int) -> "ArrayGrid":
        """Same costs, with off-grid reads raised to at least ``threshold``."""
        if self.off_grid_cost >= threshold:
            return self
        return ArrayGrid(self.costs, off_grid_cost=self.off_grid_cost, threshold=threshold)

    @property
    def width(self) -> int:
        return int(self.costs.shape[1])

    @property
    def height(self) -> int:
        return int(self.costs.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __call__(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return self.off_grid_cost
        return int(self.costs[y, x])

    def is_walkable(self, x: int, y: int, threshold: int | None = None) -> bool:
        return self(x, y) < (self.threshold if threshold is None else threshold)
