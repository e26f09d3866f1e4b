# tests/app/test_build.py
from astar_grid.app.build import build
from astar_grid.config.models import EngineModel
from astar_grid.domain.grid import ArrayGrid
from astar_grid.domain.position import Position
from astar_grid.io.search_logging import SearchLogging
from astar_grid.search.engine import AStarSearch, SearchState

GRID = ArrayGrid.from_rows([[1, 5, 1], [1, 1, 1]])


def test_build_from_mapping_applies_search_settings():
    engine = build({"search": {"non_walkable_threshold": 5}}, GRID, use_logging=False)
    assert isinstance(engine, AStarSearch)
    path = engine.calculate((0, 0), (2, 0))
    assert Position(1, 0) not in path
    assert len(path) == 5


def test_build_bounded_arena():
    cfg = EngineModel.model_validate({"search": {"max_nodes": 2}})
    engine = build(cfg, GRID, use_logging=False)
    assert engine.search((0, 0), (2, 0)).state is SearchState.OUT_OF_MEMORY


def test_build_with_logging_uses_search_logging():
    engine = build(EngineModel(run_id="demo"), GRID)
    assert isinstance(engine._hooks, SearchLogging)
    assert engine._hooks.run_id == "demo"
    assert engine.calculate((0, 0), (0, 1)) == [Position(0, 0), Position(0, 1)]


def test_threshold_above_nine_keeps_off_grid_cells_blocked():
    walled = ArrayGrid.from_rows([[1, 50, 1], [50, 50, 1]])
    engine = build({"search": {"non_walkable_threshold": 10}}, walled, use_logging=False)
    result = engine.search((0, 0), (2, 0))
    assert result.state is SearchState.FAILED
    assert result.path == []

    # a cost-9 cell is walkable at this threshold, the plane around it is not
    strip = ArrayGrid.from_rows([[1, 9, 1]])
    engine = build({"search": {"non_walkable_threshold": 10}}, strip, use_logging=False)
    assert engine.calculate((0, 0), (2, 0)) == [Position(0, 0), Position(1, 0), Position(2, 0)]
