# search/path.py
from astar_grid.domain.position import Position
from astar_grid.search.node import NodeArena


def link_solution(arena: NodeArena, start: int, goal: int) -> None:
    """Set ``child`` links backwards from ``goal`` to ``start`` along parents."""
    child = goal
    parent = arena[goal].parent
    while child != start:
        if parent is None:
            raise RuntimeError(f"broken parent chain at node {child}")
        arena[parent].child = child
        child, parent = parent, arena[parent].parent


def extract_path(arena: NodeArena, start: int) -> list[Position]:
    path = [arena[start].position]
    nxt = arena[start].child
    while nxt is not None:
        node = arena[nxt]
        path.append(node.position)
        nxt = node.child
    return path
