# astar_grid/app/build.py
from collections.abc import Mapping

from astar_grid.config.models import EngineModel
from astar_grid.domain.grid import GridOracle
from astar_grid.io.search_logging import SearchLogging
from astar_grid.search.engine import AStarSearch
from astar_grid.search.hooks import NoopHooks


def build(
    cfg: EngineModel | Mapping, oracle: GridOracle, *, use_logging: bool = True
) -> AStarSearch:
    # 0) Validate config
    model = cfg if isinstance(cfg, EngineModel) else EngineModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Engine bound to the oracle
    return AStarSearch(
        oracle,
        non_walkable_threshold=model.search.non_walkable_threshold,
        max_nodes=model.search.max_nodes,
        hooks=hooks,
    )
