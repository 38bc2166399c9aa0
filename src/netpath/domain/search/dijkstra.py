"""Single-source shortest paths, path reconstruction and path metadata.

Each phase measures and returns its own duration; callers add the durations
up (see ``ShortestPathService``) instead of sharing a mutable timer.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from netpath.domain.entities.network import Node
from netpath.domain.entities.route import Route, ShortestPath
from netpath.domain.errors import UnknownNodeError
from netpath.domain.graph import Graph
from netpath.domain.search.frontier import Frontier
from netpath.timing.stopwatch import Stopwatch, ns_to_ms

# Comparison sentinel only, never a real distance.
INFINITY = sys.maxsize

Predecessors = Mapping[Node, Node | None]


@dataclass(frozen=True)
class SearchResult:
    source: Node
    predecessors: Predecessors
    distances: Mapping[Node, int]
    elapsed_ns: int = 0

    def reachable(self, node: Node) -> bool:
        return self.distances.get(node, INFINITY) != INFINITY

    def distance_to(self, node: Node) -> int | None:
        d = self.distances.get(node, INFINITY)
        return None if d == INFINITY else d


def shortest_paths_from(graph: Graph, source: Node) -> SearchResult:
    if source not in graph:
        raise UnknownNodeError(source.name)

    sw = Stopwatch.started()
    adj = graph.adjacency
    dist: dict[Node, int] = {}
    prev: dict[Node, Node | None] = {}
    frontier = Frontier()
    for node in adj:
        dist[node] = INFINITY
        prev[node] = None
        frontier.push(node, INFINITY, node.name)

    dist[source] = 0
    frontier.update(source, 0, source.name)

    while frontier:
        d, u = frontier.pop()
        if d == INFINITY:
            # everything left is unreachable
            continue
        for v, w in adj[u].items():
            cand = d + w
            if cand < dist[v]:
                dist[v] = cand
                prev[v] = u
                frontier.update(v, cand, v.name)

    return SearchResult(source, MappingProxyType(prev), MappingProxyType(dist), sw.stop())


def reconstruct_path(
    predecessors: SearchResult | Predecessors, source: Node, target: Node
) -> Route:
    sw = Stopwatch.started()
    prev = predecessors.predecessors if isinstance(predecessors, SearchResult) else predecessors

    walk: list[Node] = []
    if target == source or prev.get(target) is not None:
        node: Node | None = target
        while node is not None:
            walk.append(node)
            node = prev.get(node)
    walk.reverse()
    return Route(tuple(walk), sw.stop())


def path_metadata(
    graph: Graph, path: Route | Sequence[Node], *, elapsed_ns: int = 0
) -> ShortestPath:
    """
    Sum edge weights along ``path`` and count its hops.

    total_calculation_time covers ``elapsed_ns`` (earlier phases), the route's own
    reconstruction time when ``path`` is a Route, and this call.
    """
    sw = Stopwatch.started()
    if isinstance(path, Route):
        nodes, elapsed_ns = path.nodes, elapsed_ns + path.elapsed_ns
    else:
        nodes = tuple(path)

    adj = graph.adjacency
    total = sum(adj[a][b] for a, b in zip(nodes, nodes[1:]))
    hops = max(len(nodes) - 1, 0)
    return ShortestPath(nodes, total, hops, ns_to_ms(elapsed_ns + sw.stop()))
