# search/closed.py
from astar_grid.domain.position import Position


class ClosedSet:
    """Expanded nodes by position; an entry can be superseded and reopened."""

    def __init__(self):
        self._by_pos: dict[Position, int] = {}
        self.high_water = 0

    def __len__(self) -> int:
        return len(self._by_pos)

    def __contains__(self, position: Position) -> bool:
        return position in self._by_pos

    def add(self, position: Position, handle: int) -> None:
        self._by_pos[position] = handle
        self.high_water = max(self.high_water, len(self._by_pos))

    def find(self, position: Position) -> int | None:
        return self._by_pos.get(position)

    def remove(self, position: Position) -> None:
        self._by_pos.pop(position, None)

    def clear(self) -> None:
        self._by_pos.clear()

    def reset(self) -> None:
        self.clear()
        self.high_water = 0
