# timing/stopwatch.py
from __future__ import annotations

import time
from dataclasses import dataclass

NS_PER_MS = 1_000_000


def ns_to_ms(ns: int) -> float:
    return ns / NS_PER_MS


@dataclass
class Stopwatch:
    """Measures one span with the high-resolution counter. Not an accumulator."""

    start_ns: int | None = None
    stop_ns: int | None = None

    @classmethod
    def started(cls) -> Stopwatch:
        return cls(start_ns=time.perf_counter_ns())

    def start(self) -> Stopwatch:
        self.start_ns, self.stop_ns = time.perf_counter_ns(), None
        return self

    def stop(self) -> int:
        if self.start_ns is None:
            raise RuntimeError("stopwatch was never started")
        self.stop_ns = time.perf_counter_ns()
        return self.elapsed_ns

    @property
    def elapsed_ns(self) -> int:
        if self.start_ns is None:
            return 0
        end = self.stop_ns if self.stop_ns is not None else time.perf_counter_ns()
        return end - self.start_ns

    @property
    def elapsed_ms(self) -> float:
        return ns_to_ms(self.elapsed_ns)

    def __enter__(self) -> Stopwatch:
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()
