# search/hooks.py
from typing import Protocol

from astar_grid.domain.position import Position


class SearchHooks(Protocol):
    def search_start(self, *, start: Position, goal: Position): ...
    def expand(self, position: Position, *, steps, open_size, closed_size): ...
    def search_end(self, *, state, reason, steps, path_len, **extra): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass
