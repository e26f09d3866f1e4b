# tests/search/test_frontier.py
from astar_grid.domain.position import Position
from astar_grid.search.closed import ClosedSet
from astar_grid.search.frontier import OpenList
from astar_grid.search.node import SearchNode


def _node(handle, x, y, f):
    return SearchNode(handle=handle, position=Position(x, y), cost_distance_sum=f)


def test_pops_lowest_sum_first():
    q = OpenList()
    q.push(_node(0, 0, 0, 5.0))
    q.push(_node(1, 1, 0, 2.0))
    q.push(_node(2, 2, 0, 3.5))
    assert [q.pop(), q.pop(), q.pop()] == [1, 2, 0]
    assert q.pop() is None


def test_equal_sums_keep_insertion_order():
    q = OpenList()
    for h in range(5):
        q.push(_node(h, h, 0, 1.0))
    assert [q.pop() for _ in range(5)] == [0, 1, 2, 3, 4]


def test_removed_and_superseded_entries_are_skipped():
    q = OpenList()
    q.push(_node(0, 0, 0, 1.0))
    q.push(_node(1, 1, 0, 2.0))
    q.push(_node(2, 2, 0, 3.0))

    q.remove(Position(0, 0))
    # cheaper replacement for (2, 0) under a new handle
    q.remove(Position(2, 0))
    q.push(_node(3, 2, 0, 1.5))

    assert len(q) == 2
    assert Position(0, 0) not in q
    assert q.find(Position(2, 0)) == 3
    assert [q.pop(), q.pop(), q.pop()] == [3, 1, None]


def test_high_water_tracks_live_entries():
    q = OpenList()
    for h in range(3):
        q.push(_node(h, h, 0, float(h)))
    q.pop()
    q.push(_node(3, 9, 9, 0.0))
    assert q.high_water == 3
    q.reset()
    assert len(q) == 0 and q.high_water == 0


def test_closed_set_lookup_and_removal():
    c = ClosedSet()
    c.add(Position(1, 1), 4)
    c.add(Position(2, 1), 5)
    assert c.find(Position(1, 1)) == 4
    assert Position(2, 1) in c
    c.remove(Position(1, 1))
    c.remove(Position(7, 7))  # absent positions are ignored
    assert c.find(Position(1, 1)) is None
    assert len(c) == 1 and c.high_water == 2
