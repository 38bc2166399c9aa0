class NetpathError(Exception):
    pass


class UnknownNodeError(NetpathError, KeyError):
    """A node name or reference that the graph does not contain."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown node {self.name!r}"


class DatasetError(NetpathError, ValueError):
    pass
