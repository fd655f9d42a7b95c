"""
Execution helpers for running a single algorithm instance.

Wraps ``execute_algorithm`` with wall-clock timing so drivers do not have to.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from metaheuristics.engine.algorithm.base import Metaheuristic, RunResult

if TYPE_CHECKING:
    from metaheuristics.foundation.problem.base import Problem

_logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """The algorithm's own result plus the elapsed wall-clock time."""

    result: RunResult
    elapsed_ms: float

    @property
    def success(self) -> bool:
        return self.result.success

    @property
    def cost(self) -> float:
        return self.result.cost


def execute(algorithm: Metaheuristic, problem: "Problem", cost: float) -> ExecutionResult:
    start = time.perf_counter()
    result = algorithm.execute_algorithm(problem, cost)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    _logger.info(
        "%s finished in %.3f ms (success=%s, cost=%s)",
        algorithm.name,
        elapsed_ms,
        result.success,
        result.cost,
    )
    return ExecutionResult(result=result, elapsed_ms=elapsed_ms)


__all__ = ["execute", "ExecutionResult"]
