from dataclasses import dataclass, field

from netpath.domain.entities.network import Node


@dataclass(frozen=True)
class Route:
    nodes: tuple[Node, ...]  # source -> target inclusive, empty if unreachable
    elapsed_ns: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.nodes


@dataclass(frozen=True)
class ShortestPath:
    """
    Query result: the path plus its metadata.

    total_calculation_time is in milliseconds and is excluded from equality,
    two runs of the same query compare equal.
    """

    path: tuple[Node, ...]
    total_distance: int
    total_edges: int
    total_calculation_time: float = field(default=0.0, compare=False)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def names(self) -> list[str]:
        return [n.name for n in self.path]

    def to_dict(self) -> dict:
        return {
            "shortestPath": [n.to_dict() for n in self.path],
            "totalDistance": self.total_distance,
            "totalEdges": self.total_edges,
            "totalCalculationTime": self.total_calculation_time,
        }
