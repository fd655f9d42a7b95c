"""
Cumulative wall-clock counters for algorithm diagnostics.

Counters are observability only: algorithms reset them once at the start of a
run and only ever add to them afterwards.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field


def now() -> float:
    return time.perf_counter()


def elapsed_seconds(begin: float, end: float) -> float:
    return end - begin


def average(total: float, count: int) -> float:
    return total / count if count else 0.0


@dataclass
class PerformanceCounters:
    """Named, monotonically non-decreasing time accumulators (seconds)."""

    names: tuple[str, ...] = ()
    totals: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.totals = {name: 0.0 for name in self.names}

    def add(self, name: str, seconds: float) -> None:
        if name not in self.totals:
            raise KeyError(f"Unknown performance counter '{name}'. Known: {', '.join(self.names)}")
        # Clock adjustments must never make a counter go backwards.
        self.totals[name] += max(0.0, float(seconds))

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        begin = now()
        try:
            yield
        finally:
            self.add(name, elapsed_seconds(begin, now()))

    def __getitem__(self, name: str) -> float:
        return self.totals[name]

    def as_dict(self) -> dict[str, float]:
        return dict(self.totals)


__all__ = ["PerformanceCounters", "now", "elapsed_seconds", "average"]
