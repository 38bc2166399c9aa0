from dataclasses import dataclass, field


# Identity is the name; coordinates are display-only.
@dataclass(frozen=True)
class Node:
    name: str
    x: int = field(default=0, compare=False)
    y: int = field(default=0, compare=False)

    def to_dict(self) -> dict:
        return {"name": self.name, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class Edge:
    """Undirected weighted link. Equal edges share the ordered (source, target) pair."""

    source: Node
    target: Node
    distance: int = field(default=0, compare=False)

    @property
    def is_loop(self) -> bool:
        return self.source == self.target

    def to_dict(self) -> dict:
        return {
            "source": self.source.name,
            "target": self.target.name,
            "distance": self.distance,
        }
