# src/astar_grid/io/config.py
from pathlib import Path

from astar_grid.config.models import EngineModel


def load_config(path: str | Path) -> EngineModel:
    """Read a JSON engine config; raises pydantic.ValidationError on bad fields."""
    return EngineModel.model_validate_json(Path(path).read_text(encoding="utf-8"))
