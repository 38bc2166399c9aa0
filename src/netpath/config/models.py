import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # cumulative: sum of per-phase durations; span: one wall-clock span per query
    timing: Literal["cumulative", "span"] = "cumulative"


# ----------------- DATASET ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = Field(min_length=1)
    x: int = 0
    y: int = 0


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    source: str
    target: str
    distance: int

    @field_validator("distance")
    @classmethod
    def _nonneg(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class DatasetInlineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["inline"] = "inline"
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)


class DatasetByPathModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["path"] = "path"
    file: str
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


DatasetUnion = Annotated[
    DatasetInlineModel | DatasetByPathModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    log: LogModel = LogModel()
    engine: EngineModel = EngineModel()
    dataset: DatasetUnion = Field(default_factory=DatasetInlineModel)
