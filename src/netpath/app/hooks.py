# app/hooks.py
from typing import Protocol


class QueryHooks(Protocol):
    def query_start(self, *, source, target, nodes, edges): ...
    def phase(self, name: str, *, ms: float): ...
    def query_end(self, *, source, target, distance, edges, found, ms, timing): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def query_start(self, **_):
        pass

    def phase(self, *_, **__):
        pass

    def query_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
