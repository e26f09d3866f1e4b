# search/engine.py

import math
import time
from dataclasses import dataclass, field
from enum import Enum

from astar_grid.domain.grid import NON_WALKABLE, ArrayGrid, GridOracle
from astar_grid.domain.position import Position, PositionLike
from astar_grid.search.closed import ClosedSet
from astar_grid.search.frontier import OpenList
from astar_grid.search.hooks import NoopHooks, SearchHooks
from astar_grid.search.node import ArenaExhausted, NodeArena, SearchNode
from astar_grid.search.path import extract_path, link_solution
from astar_grid.search.successors import walkable_successors


class SearchState(Enum):
    NOT_INITIALIZED = "not_initialized"
    SEARCHING = "searching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    OUT_OF_MEMORY = "out_of_memory"


class FailureReason(Enum):
    UNREACHABLE = "unreachable"
    CANCELLED = "cancelled"
    EXHAUSTED = "exhausted"


TERMINAL = frozenset({SearchState.SUCCEEDED, SearchState.FAILED, SearchState.OUT_OF_MEMORY})


@dataclass(frozen=True)
class SearchStats:
    steps: int = 0
    nodes_allocated: int = 0
    open_high_water: int = 0
    closed_high_water: int = 0


@dataclass(frozen=True)
class SearchResult:
    state: SearchState
    reason: FailureReason | None = None
    path: list[Position] = field(default_factory=list)
    stats: SearchStats = SearchStats()

    @property
    def ok(self) -> bool:
        return self.state is SearchState.SUCCEEDED


def distance_estimate(a: Position, b: Position) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


class AStarSearch:
    """
    Stepwise A* over a grid oracle.

    ``calculate`` is the blocking entry point. ``seed``/``step`` expose the
    same state machine for callers that want to interleave work or poll.
    One search in flight per instance; lists are cleared on every ``seed``.
    """

    def __init__(
        self,
        oracle: GridOracle,
        *,
        non_walkable_threshold: int = NON_WALKABLE,
        max_nodes: int | None = None,
        hooks: SearchHooks | None = None,
    ):
        if isinstance(oracle, ArrayGrid):
            oracle = oracle.for_threshold(non_walkable_threshold)
        self.oracle = oracle
        self.threshold = non_walkable_threshold
        self._hooks = hooks or NoopHooks()
        self._arena = NodeArena(capacity=max_nodes)
        self._open = OpenList()
        self._closed = ClosedSet()
        self._state = SearchState.NOT_INITIALIZED
        self._reason: FailureReason | None = None
        self._cancel = False
        self._steps = 0
        self._start: int | None = None
        self._goal: int | None = None
        self._solution: list[Position] = []
        self._t0 = 0.0

    # ---------------- public -----------------

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def reason(self) -> FailureReason | None:
        return self._reason

    @property
    def stats(self) -> SearchStats:
        return SearchStats(
            steps=self._steps,
            nodes_allocated=self._arena.high_water,
            open_high_water=self._open.high_water,
            closed_high_water=self._closed.high_water,
        )

    def cancel(self) -> None:
        self._cancel = True

    def solution(self) -> list[Position]:
        return list(self._solution)

    def seed(self, start: PositionLike, goal: PositionLike) -> None:
        start, goal = Position.of(start), Position.of(goal)
        self._cancel = False
        self._arena.reset()
        self._open.reset()
        self._closed.reset()
        self._solution = []
        self._reason = None
        self._steps = 0
        self._t0 = time.perf_counter()
        self._state = SearchState.SEARCHING
        self._hooks.search_start(start=start, goal=goal)

        try:
            self._start = self._arena.allocate(start)
            self._goal = self._arena.allocate(goal)
        except ArenaExhausted:
            self._finish(SearchState.OUT_OF_MEMORY, FailureReason.EXHAUSTED)
            return

        if self.oracle(goal.x, goal.y) >= self.threshold:
            self._finish(SearchState.FAILED, FailureReason.UNREACHABLE)
            return

        node = self._arena[self._start]
        node.cost = 0.0
        node.distance = distance_estimate(start, goal)
        node.cost_distance_sum = node.distance
        self._open.push(node)

    def step(self) -> SearchState:
        if self._state is SearchState.NOT_INITIALIZED:
            raise RuntimeError("step() called before seed()")
        if self._state in TERMINAL:
            return self._state

        if self._cancel:
            return self._finish(SearchState.FAILED, FailureReason.CANCELLED)
        handle = self._open.pop()
        if handle is None:
            return self._finish(SearchState.FAILED, FailureReason.UNREACHABLE)

        self._steps += 1
        node = self._arena[handle]
        goal = self._arena[self._goal]
        self._hooks.expand(
            node.position,
            steps=self._steps,
            open_size=len(self._open),
            closed_size=len(self._closed),
        )

        if node.position == goal.position:
            goal.parent, goal.cost = node.parent, node.cost
            if handle != self._start:
                link_solution(self._arena, self._start, self._goal)
            self._solution = extract_path(self._arena, self._start)
            return self._finish(SearchState.SUCCEEDED, None)

        try:
            self._expand(node, goal)
        except ArenaExhausted:
            return self._finish(SearchState.OUT_OF_MEMORY, FailureReason.EXHAUSTED)

        self._closed.add(node.position, handle)
        return self._state

    def search(self, start: PositionLike, goal: PositionLike) -> SearchResult:
        self.seed(start, goal)
        while self._state is SearchState.SEARCHING:
            self.step()
        return SearchResult(
            state=self._state, reason=self._reason, path=self.solution(), stats=self.stats
        )

    def calculate(self, start: PositionLike, goal: PositionLike) -> list[Position]:
        return self.search(start, goal).path

    # ---------------- internals -----------------

    def _expand(self, node: SearchNode, goal: SearchNode) -> None:
        came_from = self._arena[node.parent].position if node.parent is not None else None
        # allocate all successors first so exhaustion leaves the lists untouched
        successors = [
            self._arena.allocate(pos)
            for pos in walkable_successors(
                self.oracle, node.position, came_from, threshold=self.threshold
            )
        ]

        for h in successors:
            succ = self._arena[h]
            pos = succ.position
            new_cost = node.cost + self.oracle(pos.x, pos.y)

            on_open = self._open.find(pos)
            if on_open is not None and self._arena[on_open].cost <= new_cost:
                continue
            on_closed = self._closed.find(pos)
            if on_closed is not None and self._arena[on_closed].cost <= new_cost:
                continue

            succ.parent = node.handle
            succ.cost = new_cost
            succ.distance = distance_estimate(pos, goal.position)
            succ.cost_distance_sum = succ.cost + succ.distance

            if on_closed is not None:
                self._closed.remove(pos)
            if on_open is not None:
                self._open.remove(pos)
            self._open.push(succ)

    def _finish(self, state: SearchState, reason: FailureReason | None) -> SearchState:
        self._state, self._reason = state, reason
        self._open.clear()
        self._closed.clear()
        stats = self.stats
        self._hooks.search_end(
            state=state,
            reason=reason,
            steps=stats.steps,
            path_len=len(self._solution),
            nodes_allocated=stats.nodes_allocated,
            open_high_water=stats.open_high_water,
            closed_high_water=stats.closed_high_water,
            wall_ms=(time.perf_counter() - self._t0) * 1000,
        )
        return state
