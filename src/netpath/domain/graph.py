# domain/graph.py
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from netpath.domain.entities.network import Edge, Node
from netpath.domain.errors import UnknownNodeError

Adjacency = Mapping[Node, Mapping[Node, int]]


def build_adjacency(edges: Iterable[Edge], nodes: Iterable[Node] = ()) -> Adjacency:
    """
    One pass over the edges, both directions per edge. A repeated pair keeps the
    last weight seen. Nodes listed in `nodes` always get an entry, empty if isolated.
    """
    adj: dict[Node, dict[Node, int]] = {n: {} for n in nodes}
    for e in edges:
        adj.setdefault(e.source, {})[e.target] = e.distance
        adj.setdefault(e.target, {})[e.source] = e.distance
    return MappingProxyType({n: MappingProxyType(nbrs) for n, nbrs in adj.items()})


def _plain(adj: Adjacency) -> dict[Node, dict[Node, int]]:
    return {n: dict(nbrs) for n, nbrs in adj.items()}


class Graph:
    """Weighted undirected graph, read-only once built."""

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]):
        self._nodes = tuple(nodes)
        self._edges = tuple(edges)
        self._adj = build_adjacency(self._edges, self._nodes)

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def adjacency(self) -> Adjacency:
        return self._adj

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def neighbours(self, node: Node) -> Mapping[Node, int]:
        try:
            return self._adj[node]
        except KeyError:
            raise UnknownNodeError(getattr(node, "name", str(node))) from None

    def weight(self, a: Node, b: Node) -> int:
        return self.neighbours(a)[b]

    def with_edges(self, edges: Iterable[Edge]) -> Graph:
        # replacing the edge list means a full rebuild
        return Graph(self._nodes, edges)

    # ----------------- display -----------------------

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self._nodes],
            "edges": [e.to_dict() for e in self._edges],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return _plain(self._adj) == _plain(other._adj)

    def __hash__(self) -> int:
        return hash(frozenset((n, frozenset(nbrs.items())) for n, nbrs in self._adj.items()))

    def __str__(self) -> str:
        lines = ["Adjacency List:"]
        for src, nbrs in self._adj.items():
            rendered = ", ".join(f"{dst.name} ({w})" for dst, w in nbrs.items())
            lines.append(f"{src.name} --> {rendered}" if rendered else f"{src.name} -->")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._adj)}, edges={len(self._edges)})"


def build_graph(nodes: Iterable[Node], edges: Iterable[Edge]) -> Graph:
    return Graph(nodes, edges)
