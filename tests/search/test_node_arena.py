# tests/search/test_node_arena.py
import pytest

from astar_grid.domain.position import Position
from astar_grid.search.node import ArenaExhausted, NodeArena


def test_allocate_hands_out_sequential_handles():
    arena = NodeArena()
    a = arena.allocate(Position(0, 0))
    b = arena.allocate(Position(1, 0))
    assert (a, b) == (0, 1)
    assert arena[b].position == Position(1, 0)
    assert arena[b].handle == b
    assert len(arena) == 2


def test_reset_reuses_node_objects_and_clears_fields():
    arena = NodeArena()
    h = arena.allocate(Position(0, 0))
    node = arena[h]
    node.cost, node.parent, node.child = 4.0, 7, 9

    arena.reset()
    assert len(arena) == 0
    h2 = arena.allocate(Position(5, 5))
    assert arena[h2] is node
    assert node.position == Position(5, 5)
    assert (node.cost, node.distance, node.cost_distance_sum) == (0.0, 0.0, 0.0)
    assert node.parent is None and node.child is None
    assert arena.reserved == 1


def test_stale_handles_are_rejected_after_reset():
    arena = NodeArena()
    arena.allocate(Position(0, 0))
    arena.reset()
    with pytest.raises(IndexError):
        arena[0]


def test_bounded_arena_raises_when_full():
    arena = NodeArena(capacity=2)
    arena.allocate(Position(0, 0))
    arena.allocate(Position(0, 1))
    with pytest.raises(ArenaExhausted):
        arena.allocate(Position(0, 2))
    assert arena.high_water == 2


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        NodeArena(capacity=0)
