import io
import json
import logging

from netpath.domain.entities.network import Edge, Node
from netpath.domain.graph import build_graph
from netpath.io.query_logging import QueryLogging, _JsonFormatter
from netpath.services.shortest_path import ShortestPathService


def _capture(name: str, level=logging.DEBUG):
    buf = io.StringIO()
    logger = logging.getLogger(name)
    logger.handlers.clear()
    h = logging.StreamHandler(buf)
    h.setFormatter(_JsonFormatter())
    logger.addHandler(h)
    logger.setLevel(level)
    logger.propagate = False
    return logger, buf


def _records(buf):
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def test_query_end_is_logged_as_json():
    logger, buf = _capture("netpath.test.info", logging.INFO)
    hooks = QueryLogging(run_id="r-7", logger=logger)
    g = build_graph([Node("A"), Node("B")], [Edge(Node("A"), Node("B"), 3)])
    ShortestPathService(g, hooks=hooks).shortest_path("A", "B")

    (rec,) = _records(buf)
    assert rec["msg"] == "shortest_path"
    assert rec["level"] == "INFO"
    assert rec["run_id"] == "r-7"
    assert (rec["source"], rec["target"], rec["distance"], rec["edges"]) == ("A", "B", 3, 1)
    assert rec["found"] is True
    assert rec["timing"] == "cumulative"
    assert hooks.queries == 1


def test_debug_adds_phase_records():
    logger, buf = _capture("netpath.test.debug")
    hooks = QueryLogging(logger=logger, debug=True)
    g = build_graph([Node("A")], [])
    ShortestPathService(g, hooks=hooks).shortest_path("A", "A")

    msgs = [r["msg"] for r in _records(buf)]
    assert msgs == ["query_start", "phase", "phase", "shortest_path"]


def test_errors_are_logged():
    logger, buf = _capture("netpath.test.error")
    QueryLogging(logger=logger).error(reason="unknown_node", node="Z")
    (rec,) = _records(buf)
    assert rec["level"] == "ERROR"
    assert rec["reason"] == "unknown_node"
    assert rec["node"] == "Z"
