# io/dataset.py
import logging
from pathlib import Path

from netpath.app.protocols import Dataset, DatasetSource
from netpath.config.models import DatasetByPathModel, DatasetInlineModel
from netpath.domain.entities.network import Edge, Node
from netpath.domain.errors import DatasetError

log = logging.getLogger(__name__)


def resolve_dataset(model: DatasetInlineModel) -> Dataset:
    """Turn validated records into Nodes and Edges. Node names are keys; the last record wins."""
    by_name: dict[str, Node] = {}
    for rec in model.nodes:
        by_name[rec.name] = Node(rec.name, rec.x, rec.y)

    edges: list[Edge] = []
    for i, rec in enumerate(model.edges):
        missing = [n for n in (rec.source, rec.target) if n not in by_name]
        if missing:
            raise DatasetError(f"edge {i} references unknown node(s) {missing}")
        edges.append(Edge(by_name[rec.source], by_name[rec.target], rec.distance))

    log.debug("resolved dataset: %d nodes, %d edges", len(by_name), len(edges))
    return Dataset(tuple(by_name.values()), tuple(edges))


class InlineDataset(DatasetSource):
    def __init__(self, model: DatasetInlineModel):
        self.model = model

    def load(self) -> Dataset:
        return resolve_dataset(self.model)


class JsonFileDataset(DatasetSource):
    """JSON document shaped like the inline dataset: {"nodes": [...], "edges": [...]}."""

    def __init__(self, file: str | Path, must_exist: bool = True):
        self.path, self.must_exist = Path(file), must_exist

    @classmethod
    def from_model(cls, cfg: DatasetByPathModel) -> "JsonFileDataset":
        return cls(cfg.file, must_exist=cfg.must_exist)

    def load(self) -> Dataset:
        if not self.path.exists():
            if self.must_exist:
                raise FileNotFoundError(self.path)
            log.warning("dataset file %s not found, using an empty dataset", self.path)
            return Dataset()
        model = DatasetInlineModel.model_validate_json(self.path.read_text(encoding="utf-8"))
        return resolve_dataset(model)
