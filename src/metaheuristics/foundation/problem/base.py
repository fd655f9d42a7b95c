"""
Base class for problems optimised by the metaheuristics in this package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from metaheuristics.foundation.problem.types import LocalSearchPolicy

if TYPE_CHECKING:
    from metaheuristics.foundation.genome.chromosome import Chromosome
    from metaheuristics.foundation.rng.discrete import DiscreteRandom


class Problem(ABC):
    """Contract between a concrete combinatorial problem and the algorithms.

    A problem instance holds the data of the instance plus its current
    solution. Algorithms only ever talk to it through the methods below.

    **Costs are maximised.** A minimisation problem returns its cost negated,
    so "larger is better" holds everywhere in the engine.

    **Infeasibility** is signalled by raising
    :class:`~metaheuristics.foundation.exceptions.InfeasibleError` from
    :meth:`decode` or :meth:`random_construct`. Algorithms recover from it.

    **Ownership.** Objects returned by :meth:`empty`, :meth:`clone` and
    :meth:`best_neighbour` belong to the caller, which either keeps them or
    drops them; algorithms never hold on to them past the call that
    produced them.

    Example::

        class OneMax(Problem):
            def __init__(self, n):
                super().__init__()
                self.bits = [0] * n

            def empty(self):
                return OneMax(len(self.bits))

            def clone(self):
                other = OneMax(len(self.bits))
                other.copy_from(self)
                return other

            def copy_from(self, other):
                self.bits = list(other.bits)

            def decode(self, chromosome):
                self.bits = [1 if g >= 0.5 else 0 for g in chromosome]
                return float(sum(self.bits))

            ...
    """

    def __init__(self) -> None:
        self.n_neighbours_explored = 0

    # ------------------------------------------------------------------
    # Memory handling
    # ------------------------------------------------------------------

    @abstractmethod
    def empty(self) -> "Problem":
        """Fresh instance of the same problem with no solution assigned."""

    @abstractmethod
    def clone(self) -> "Problem":
        """Deep, independent copy of this instance, solution included."""

    @abstractmethod
    def copy_from(self, other: Any) -> None:
        """Copy ``other``'s state (solution included) into ``self``, in place."""

    # ------------------------------------------------------------------
    # Solution construction
    # ------------------------------------------------------------------

    @abstractmethod
    def decode(self, chromosome: "Chromosome") -> float:
        """Build this instance's solution from ``chromosome`` and return its cost.

        Must be deterministic and must not modify the chromosome. Raises
        ``InfeasibleError`` when no feasible solution corresponds to it.
        """

    @abstractmethod
    def random_construct(self, rng: "DiscreteRandom", alpha: float) -> float:
        """Build a solution with a restricted candidate list and return its cost.

        ``alpha`` = 0 is fully greedy, ``alpha`` = 1 picks uniformly among all
        feasible candidates. Raises ``InfeasibleError`` when construction fails.
        """

    @abstractmethod
    def best_neighbour(self, current_cost: float, policy: LocalSearchPolicy) -> tuple["Problem | None", float]:
        """Explore the neighbourhood of the current solution.

        Returns ``(neighbour, cost)`` for a neighbour strictly better than
        ``current_cost`` (the first one found under first improvement, the best
        one under best improvement), or ``(None, current_cost)`` if there is
        no improving neighbour.
        """

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    @abstractmethod
    def sanity_check(self) -> bool:
        """Re-verify the feasibility of the current solution."""

    def reset_neighbour_count(self) -> None:
        self.n_neighbours_explored = 0

    def describe(self) -> dict[str, Any]:
        return {"problem": type(self).__name__, "n_neighbours_explored": self.n_neighbours_explored}


__all__ = ["Problem"]
