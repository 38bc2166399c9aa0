# netpath/services/shortest_path.py
from dataclasses import replace
from typing import Literal

from netpath.app.hooks import NoopHooks, QueryHooks
from netpath.domain.entities.network import Node
from netpath.domain.entities.route import ShortestPath
from netpath.domain.errors import UnknownNodeError
from netpath.domain.graph import Graph
from netpath.domain.search.dijkstra import path_metadata, reconstruct_path, shortest_paths_from
from netpath.timing.stopwatch import Stopwatch, ns_to_ms

Timing = Literal["cumulative", "span"]
NodeRef = Node | str


class ShortestPathService:
    """
    Answers "shortest path from A to B" over one immutable Graph.

    Resolves names to Nodes before touching the core, so an unknown name is
    reported as UnknownNodeError instead of failing inside the search.
    """

    def __init__(self, graph: Graph, *, timing: Timing = "cumulative", hooks: QueryHooks | None = None):
        if timing not in ("cumulative", "span"):
            raise ValueError(f"Unknown timing mode {timing!r}")
        self._graph = graph
        self.timing = timing
        self._hooks = hooks or NoopHooks()
        self._by_name = {n.name: n for n in graph.adjacency}

    @property
    def graph(self) -> Graph:
        return self._graph

    def node(self, name: str) -> Node:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    def _resolve(self, ref: NodeRef) -> Node:
        name = ref.name if isinstance(ref, Node) else ref
        try:
            return self.node(name)
        except UnknownNodeError:
            self._hooks.error(reason="unknown_node", node=name)
            raise

    def shortest_path(self, source: NodeRef, target: NodeRef) -> ShortestPath:
        src, dst = self._resolve(source), self._resolve(target)
        self._hooks.query_start(
            source=src.name,
            target=dst.name,
            nodes=len(self._graph),
            edges=len(self._graph.edges),
        )

        span = Stopwatch.started()
        search = shortest_paths_from(self._graph, src)
        self._hooks.phase("search", ms=ns_to_ms(search.elapsed_ns))
        route = reconstruct_path(search, src, dst)
        self._hooks.phase("reconstruct", ms=ns_to_ms(route.elapsed_ns))

        if self.timing == "cumulative":
            result = path_metadata(self._graph, route, elapsed_ns=search.elapsed_ns)
        else:
            result = path_metadata(self._graph, route.nodes)
            result = replace(result, total_calculation_time=ns_to_ms(span.stop()))

        self._hooks.query_end(
            source=src.name,
            target=dst.name,
            distance=result.total_distance,
            edges=result.total_edges,
            found=result.found,
            ms=result.total_calculation_time,
            timing=self.timing,
        )
        return result
