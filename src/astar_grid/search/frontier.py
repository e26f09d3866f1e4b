# search/frontier.py
import heapq

from astar_grid.domain.position import Position
from astar_grid.search.node import SearchNode


class OpenList:
    """
    Frontier ordered by ``cost_distance_sum`` only.

    Ties keep insertion order via a monotonic sequence number. Superseded
    entries are dropped from the position index and skipped lazily on pop,
    so each position has at most one live entry.
    """

    def __init__(self):
        self._q: list[tuple[float, int, int, Position]] = []
        self._seq = 0
        self._live: dict[Position, int] = {}  # position -> handle
        self.high_water = 0

    def __len__(self) -> int:
        return len(self._live)

    def __contains__(self, position: Position) -> bool:
        return position in self._live

    def push(self, node: SearchNode) -> None:
        self._seq += 1
        heapq.heappush(self._q, (node.cost_distance_sum, self._seq, node.handle, node.position))
        self._live[node.position] = node.handle
        self.high_water = max(self.high_water, len(self._live))

    def pop(self) -> int | None:
        while self._q:
            _, _, handle, pos = heapq.heappop(self._q)
            if self._live.get(pos) == handle:
                del self._live[pos]
                return handle
        return None

    def find(self, position: Position) -> int | None:
        return self._live.get(position)

    def remove(self, position: Position) -> None:
        self._live.pop(position, None)

    def clear(self) -> None:
        self._q.clear()
        self._live.clear()
        self._seq = 0

    def reset(self) -> None:
        self.clear()
        self.high_water = 0
