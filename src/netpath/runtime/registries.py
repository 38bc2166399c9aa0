# runtime/registries.py
from collections.abc import Callable

from netpath.app.protocols import DatasetSource
from netpath.config.models import DatasetByPathModel, DatasetInlineModel, DatasetUnion
from netpath.io.dataset import InlineDataset, JsonFileDataset

DatasetFactory = Callable[[DatasetUnion], DatasetSource]

_dataset_registry: dict[str, DatasetFactory] = {}


def register_dataset(kind: str):
    def deco(fn: DatasetFactory):
        _dataset_registry[kind] = fn
        return fn

    return deco


def make_dataset(cfg: DatasetUnion) -> DatasetSource:
    try:
        factory = _dataset_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown dataset kind {cfg.kind!r}") from None
    return factory(cfg)


@register_dataset("inline")
def _make_inline(cfg: DatasetInlineModel):
    return InlineDataset(cfg)


@register_dataset("path")
def _make_path(cfg: DatasetByPathModel):
    return JsonFileDataset.from_model(cfg)
