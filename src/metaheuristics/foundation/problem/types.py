from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from metaheuristics.foundation.genome.chromosome import Chromosome
    from metaheuristics.foundation.rng.discrete import DiscreteRandom


class LocalSearchPolicy(str, Enum):
    """How a neighbourhood is explored.

    - First improvement: stop at the first neighbour strictly better than the
      current solution.
    - Best improvement: explore the whole neighbourhood and keep the best.
    """

    FIRST_IMPROVEMENT = "first"
    BEST_IMPROVEMENT = "best"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "LocalSearchPolicy | str") -> "LocalSearchPolicy":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        aliases = {
            "first": cls.FIRST_IMPROVEMENT,
            "first_improvement": cls.FIRST_IMPROVEMENT,
            "best": cls.BEST_IMPROVEMENT,
            "best_improvement": cls.BEST_IMPROVEMENT,
        }
        try:
            return aliases[key]
        except KeyError as exc:
            raise ValueError(f"Unknown local search policy '{value}'. Use 'first' or 'best'.") from exc


@runtime_checkable
class ProblemProtocol(Protocol):
    n_neighbours_explored: int

    def empty(self) -> "ProblemProtocol": ...

    def clone(self) -> "ProblemProtocol": ...

    def copy_from(self, other: Any) -> None: ...

    def decode(self, chromosome: "Chromosome") -> float: ...

    def random_construct(self, rng: "DiscreteRandom", alpha: float) -> float: ...

    def best_neighbour(
        self, current_cost: float, policy: LocalSearchPolicy
    ) -> tuple["ProblemProtocol | None", float]: ...

    def sanity_check(self) -> bool: ...


__all__ = ["LocalSearchPolicy", "ProblemProtocol"]
