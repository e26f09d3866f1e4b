from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from astar_grid.domain.grid import NON_WALKABLE


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    non_walkable_threshold: int = Field(default=NON_WALKABLE, ge=1)
    max_nodes: int | None = None  # None => unbounded arena

    @field_validator("max_nodes")
    @classmethod
    def _room_for_endpoints(cls, v: int | None, info: ValidationInfo) -> int | None:
        # start and goal are allocated before anything else
        if v is not None and v < 2:
            raise ValueError(f"{info.field_name} must be >= 2 or null")
        return v


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "astar"
    run_id: str = "local"
    search: SearchModel = Field(default_factory=SearchModel)
    log: LogModel = LogModel()
