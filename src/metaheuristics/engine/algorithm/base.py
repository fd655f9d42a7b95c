"""
Shared surface of every metaheuristic.

Each algorithm owns its random engine, its configuration and its performance
counters. Drivers interact with it through ``execute_algorithm``,
``reset_algorithm`` and the performance report.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from metaheuristics.foundation.rng.engine import RandomEngine
from metaheuristics.foundation.timing import PerformanceCounters

if TYPE_CHECKING:
    from metaheuristics.foundation.problem.base import Problem

_logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of ``execute_algorithm``.

    ``success`` is False only when the run was refused (invalid
    configuration); in that case ``cost`` is the cost passed in and the
    problem was not touched.
    """

    success: bool
    cost: float
    stats: dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.success


class Metaheuristic(ABC):
    """Base class for all algorithms of the engine."""

    #: Human readable algorithm name used in logs and reports.
    name: str = "metaheuristic"
    #: Names of the cumulative timers this algorithm maintains.
    timers: tuple[str, ...] = ("total",)

    def __init__(self, engine: RandomEngine | None = None) -> None:
        self.engine = engine if engine is not None else RandomEngine()
        self.performance = PerformanceCounters(self.timers)

    def seed(self, entropy: int | None = None) -> None:
        """Reseed this algorithm's engine (OS entropy when ``entropy`` is None)."""
        self.engine.seed(entropy)

    def reset_algorithm(self) -> None:
        """Set counters (time, iterations, ...) back to their initial state."""
        self.performance.reset()

    @abstractmethod
    def execute_algorithm(self, problem: "Problem", cost: float) -> RunResult:
        """Improve ``problem``'s solution, starting from ``cost``."""

    @abstractmethod
    def performance_report(self) -> str:
        """Human readable timing summary of the last run."""

    def print_performance(self) -> None:
        _logger.info("%s", self.performance_report())

    @staticmethod
    def _report(title: str, rows: list[tuple[str, Any]]) -> str:
        width = max(len(label) for label, _ in rows) + 1
        lines = [title]
        for label, value in rows:
            text = f"{value:.6g} s" if isinstance(value, float) else str(value)
            lines.append(f"    {label + ':':<{width}} {text}")
        return "\n".join(lines)


__all__ = ["Metaheuristic", "RunResult"]
