# io/query_logging.py
import json
import logging
import sys

from netpath.app.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="netpath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class QueryLogging(NoopHooks):
    """
    Structured JSON logs for shortest-path queries.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)
        self.queries = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def query_start(self, *, source, target, nodes, edges):
        self.queries += 1
        if self.debug:
            self._emit("DEBUG", "query_start", source=source, target=target, nodes=nodes, edges=edges)

    def phase(self, name: str, *, ms: float):
        if self.debug:
            self._emit("DEBUG", "phase", phase=name, ms=ms)

    def query_end(self, *, source, target, distance, edges, found, ms, timing):
        self._emit(
            "INFO",
            "shortest_path",
            source=source,
            target=target,
            distance=distance,
            edges=edges,
            found=found,
            ms=ms,
            timing=timing,
            seq=self.queries,
        )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "query_error", reason=reason, **kw)
