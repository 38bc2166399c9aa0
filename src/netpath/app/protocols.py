from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from netpath.domain.entities.network import Edge, Node


@dataclass(frozen=True)
class Dataset:
    nodes: tuple[Node, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)


@runtime_checkable
class DatasetSource(Protocol):
    """
    Responsibilities:
      • Supply the node list and the edge list a Graph is built from.
      • Resolve every edge endpoint to a Node of the node list.
    """

    def load(self) -> Dataset: ...
