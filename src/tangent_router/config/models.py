from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

Pair = tuple[float, float]


def _check_finite(p: Pair, what: str) -> Pair:
    if not all(isfinite(float(c)) for c in p):
        raise ValueError(f"{what} coordinates must be finite, got {p}")
    return p


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_depth: int = 32
    max_nodes: int = 20_000

    @field_validator("max_depth", "max_nodes")
    @classmethod
    def _at_least_one(cls, v: int, info: ValidationInfo) -> int:
        if v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v


# ----------------- WAYPOINT GENERATORS ---------------------


class WaypointsGridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["grid_neighbors"] = "grid_neighbors"
    step: float = 1.0
    clip_negative: bool = True

    @field_validator("step")
    @classmethod
    def _step_positive(cls, v: float) -> float:
        if not isfinite(v) or v <= 0:
            raise ValueError("step must be a finite value > 0")
        return v


WaypointsUnion = Annotated[WaypointsGridModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    search: SearchModel = SearchModel()
    waypoints: WaypointsUnion = Field(default_factory=WaypointsGridModel)
    obstacles: list[list[Pair]] = Field(default_factory=list)
    start: Pair | None = None
    end: Pair | None = None

    @field_validator("obstacles")
    @classmethod
    def _finite_vertices(cls, v: list[list[Pair]]) -> list[list[Pair]]:
        for i, poly in enumerate(v):
            for p in poly:
                _check_finite(p, f"obstacle {i}")
        return v

    @field_validator("start", "end")
    @classmethod
    def _finite_endpoint(cls, v: Pair | None, info: ValidationInfo) -> Pair | None:
        if v is None:
            return v
        return _check_finite(v, info.field_name)
