"""GRASP (Greedy Randomized Adaptive Search Procedure).

Every iteration builds a fresh solution with a restricted candidate list
(``alpha`` = 0 is greedy, ``alpha`` = 1 is uniformly random among feasible
candidates) and improves it with local search. The best solution found over
all iterations is copied into the caller's problem.

A construction that raises ``InfeasibleError`` only costs its iteration: it is
counted and the loop moves on. If every construction fails the caller's
problem is left untouched and the returned cost is ``-inf``.

Example:
    >>> from metaheuristics.engine.algorithm.config import GRASPConfig
    >>> from metaheuristics.engine.algorithm.grasp import GRASP
    >>> grasp = GRASP(GRASPConfig().max_iterations(50).local_iterations(100).alpha(0.3).fixed())
    >>> result = grasp.execute_algorithm(problem, cost=0.0)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from metaheuristics.engine.algorithm.base import Metaheuristic, RunResult
from metaheuristics.engine.algorithm.config import GRASPConfigData, LocalSearchConfigData
from metaheuristics.engine.algorithm.local_search import LocalSearch
from metaheuristics.foundation.exceptions import InfeasibleError
from metaheuristics.foundation.rng.discrete import DiscreteRandom
from metaheuristics.foundation.rng.engine import RandomEngine
from metaheuristics.foundation.timing import average

if TYPE_CHECKING:
    from metaheuristics.foundation.problem.base import Problem

_logger = logging.getLogger(__name__)


class GRASP(Metaheuristic):
    """Repeated randomized construction followed by local search.

    Parameters
    ----------
    config : GRASPConfigData
        Number of GRASP iterations, local search budget, ``alpha`` and the
        local search policy.
    engine : RandomEngine, optional
        Engine of the discrete generator handed to ``random_construct``.
        Defaults to a fixed-seed engine; call :meth:`seed` for OS entropy.
    """

    name = "GRASP"
    timers = ("total", "construct", "local_search")

    def __init__(self, config: GRASPConfigData, engine: RandomEngine | None = None) -> None:
        super().__init__(engine)
        self.cfg = config
        self.rng = DiscreteRandom(self.engine)
        self.local_search = LocalSearch(
            LocalSearchConfigData(
                max_iterations=config.local_iterations,
                policy=config.policy,
                check_sanity=config.check_sanity,
            ),
            engine=self.engine,
        )
        self.n_infeasible = 0
        self.best_history: list[float] = []

    @property
    def alpha(self) -> float:
        return self.cfg.alpha

    def reset_algorithm(self) -> None:
        super().reset_algorithm()
        self.n_infeasible = 0
        self.best_history = []

    def _check(self, problem: "Problem", stage: str, iteration: int) -> None:
        if self.cfg.check_sanity and not problem.sanity_check():
            _logger.warning("%s: sanity check failed on the solution returned by %s (iteration %d).", self.name, stage, iteration)

    def execute_algorithm(self, problem: "Problem", cost: float) -> RunResult:
        self.reset_algorithm()
        current_best_f = -math.inf

        with self.performance.measure("total"):
            for it in range(1, self.cfg.max_iterations + 1):
                scratch = problem.empty()
                try:
                    with self.performance.measure("construct"):
                        constructed = scratch.random_construct(self.rng, self.alpha)
                except InfeasibleError as exc:
                    self.n_infeasible += 1
                    _logger.debug("%s: iteration %d construction infeasible: %s", self.name, it, exc.message)
                    self.best_history.append(current_best_f)
                    continue
                self._check(scratch, "random_construct", it)
                _logger.debug(
                    "%s: iteration %d constructed cost=%s%s",
                    self.name,
                    it,
                    constructed,
                    " (new best)" if constructed > current_best_f else "",
                )

                with self.performance.measure("local_search"):
                    improved = self.local_search.execute_algorithm(scratch, constructed).cost
                self._check(scratch, "local search", it)

                if improved > current_best_f:
                    current_best_f = improved
                    problem.copy_from(scratch)
                    _logger.debug("%s: iteration %d local search cost=%s (new best)", self.name, it, improved)
                self.best_history.append(current_best_f)

        if self.n_infeasible == self.cfg.max_iterations:
            _logger.info("%s: every construction was infeasible; the problem was left unchanged.", self.name)

        return RunResult(
            success=True,
            cost=current_best_f,
            stats={
                "iterations": self.cfg.max_iterations,
                "infeasible": self.n_infeasible,
                "best_history": list(self.best_history),
            },
        )

    def performance_report(self) -> str:
        n = self.cfg.max_iterations
        total = self.performance["total"]
        construct = self.performance["construct"]
        local = self.performance["local_search"]
        return self._report(
            f"GRASP metaheuristic performance (for a total of {n} iterations):",
            [
                ("Infeasible constructions", self.n_infeasible),
                ("Total execution time", total),
                ("Average iteration time", average(total, n)),
                ("Total construction time", construct),
                ("Average construction time", average(construct, n)),
                ("Total local search time", local),
                ("Average local search time", average(local, n)),
            ],
        )


__all__ = ["GRASP"]
