# netpath/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from netpath.app.hooks import NoopHooks
from netpath.app.protocols import Dataset
from netpath.config.models import ScenarioModel
from netpath.domain.graph import Graph, build_graph
from netpath.io.query_logging import QueryLogging  # JSON logs
from netpath.runtime.registries import make_dataset
from netpath.services.shortest_path import ShortestPathService


@dataclass
class App:
    config: ScenarioModel
    dataset: Dataset
    graph: Graph
    paths: ShortestPathService


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Dataset -> Graph
    dataset = make_dataset(model.dataset).load()
    graph = build_graph(dataset.nodes, dataset.edges)

    # 2) Hooks
    hooks = (
        QueryLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 3) Service
    paths = ShortestPathService(graph, timing=model.engine.timing, hooks=hooks)
    return App(model, dataset, graph, paths)
