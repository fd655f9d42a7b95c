"""Local search: climb the neighbourhood of a solution until no move improves it.

Each iteration asks the problem for an improving neighbour under the configured
policy (first or best improvement). The neighbour is adopted when its cost is
strictly larger than the current one; otherwise the search has converged.
At most ``max_iterations`` moves are adopted.

Example:
    >>> from metaheuristics.engine.algorithm.config import LocalSearchConfig
    >>> from metaheuristics.engine.algorithm.local_search import LocalSearch
    >>> ls = LocalSearch(LocalSearchConfig().max_iterations(100).policy("first").fixed())
    >>> result = ls.execute_algorithm(problem, cost=problem.random_construct(rng, 0.5))
    >>> result.cost
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from metaheuristics.engine.algorithm.base import Metaheuristic, RunResult
from metaheuristics.engine.algorithm.config import LocalSearchConfig, LocalSearchConfigData
from metaheuristics.foundation.problem.types import LocalSearchPolicy
from metaheuristics.foundation.rng.engine import RandomEngine
from metaheuristics.foundation.timing import average

if TYPE_CHECKING:
    from metaheuristics.foundation.problem.base import Problem

_logger = logging.getLogger(__name__)


class LocalSearch(Metaheuristic):
    """Iterative neighbourhood climbing.

    Parameters
    ----------
    config : LocalSearchConfigData, optional
        Iteration budget (``None`` means unbounded), policy and sanity checks.
        Defaults to an unbounded best-improvement search.
    engine : RandomEngine, optional
        Unused by the search itself; kept so every algorithm can be built
        the same way.
    """

    name = "Local Search"
    timers = ("total", "neighbourhood")

    def __init__(self, config: LocalSearchConfigData | None = None, engine: RandomEngine | None = None) -> None:
        super().__init__(engine)
        self.cfg = config if config is not None else LocalSearchConfig.default()
        self.iterations = 0
        self.moves = 0
        self.trajectory: list[float] = []

    @property
    def max_iterations(self) -> int | None:
        return self.cfg.max_iterations

    @property
    def policy(self) -> LocalSearchPolicy:
        return self.cfg.policy

    def reset_algorithm(self) -> None:
        super().reset_algorithm()
        self.iterations = 0
        self.moves = 0
        self.trajectory = []

    def _budget_left(self) -> bool:
        return self.max_iterations is None or self.moves < self.max_iterations

    def execute_algorithm(self, problem: "Problem", cost: float) -> RunResult:
        self.reset_algorithm()
        current = cost
        converged = False

        _logger.debug("%s: start cost=%s policy=%s budget=%s", self.name, current, self.policy, self.max_iterations)
        with self.performance.measure("total"):
            while self._budget_left():
                self.iterations += 1
                with self.performance.measure("neighbourhood"):
                    neighbour, neighbour_cost = problem.best_neighbour(current, self.policy)

                if neighbour is None or not neighbour_cost > current:
                    converged = True
                    break

                problem.copy_from(neighbour)
                current = neighbour_cost
                self.moves += 1
                self.trajectory.append(current)

                if self.cfg.check_sanity and not problem.sanity_check():
                    _logger.warning("%s: sanity check failed on the solution adopted at move %d.", self.name, self.moves)
                _logger.debug(
                    "%s: move %d cost=%s neighbours explored=%d",
                    self.name,
                    self.moves,
                    current,
                    problem.n_neighbours_explored,
                )

        return RunResult(
            success=True,
            cost=current,
            stats={
                "iterations": self.iterations,
                "moves": self.moves,
                "converged": converged,
                "trajectory": list(self.trajectory),
            },
        )

    def performance_report(self) -> str:
        total = self.performance["total"]
        neighbourhood = self.performance["neighbourhood"]
        return self._report(
            "Local Search algorithm performance:",
            [
                ("Number of iterations", self.iterations),
                ("Number of adopted moves", self.moves),
                ("Total execution time", total),
                ("Average iteration time", average(total, self.iterations)),
                ("Total neighbourhood exploration time", neighbourhood),
                ("Average neighbourhood exploration time", average(neighbourhood, self.iterations)),
            ],
        )


__all__ = ["LocalSearch"]
