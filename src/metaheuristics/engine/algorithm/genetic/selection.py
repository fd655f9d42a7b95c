"""Parent-selection strategies of the genetic algorithm framework.

A strategy decides three things: how many elite individuals are carried over
verbatim, how the elite set is derived from a population, and how the two
parents of every crossover child are drawn.

- :class:`UniformParentSelection` (RKGA): both parents uniformly from the whole
  population, the second resampled until it differs from the first.
- :class:`EliteBiasedParentSelection` (BRKGA): the first parent uniformly from
  the elite set, the second uniformly from the non-elite individuals.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from metaheuristics.engine.algorithm.genetic.state import GeneticState
from metaheuristics.foundation.exceptions import InvalidPopulationSizesError


@runtime_checkable
class ParentSelection(Protocol):
    name: str
    n_elite: int

    def validate(self, pop_size: int, n_mutants: int) -> InvalidPopulationSizesError | None:
        """Return the size error this strategy cannot run with, if any."""
        ...

    def prepare(self, state: GeneticState) -> None:
        """Derive the per-generation data (elite set) from ``state.population``."""
        ...

    def select(self, state: GeneticState) -> tuple[int, int]:
        """Indices of (parent 1, parent 2) in ``state.population``."""
        ...


class UniformParentSelection:
    name = "uniform"
    n_elite = 0

    def validate(self, pop_size: int, n_mutants: int) -> InvalidPopulationSizesError | None:
        # There must be at least one crossover individual and two distinct parents.
        if n_mutants < pop_size and pop_size >= 2:
            return None
        return InvalidPopulationSizesError(pop_size, n_mutants)

    def prepare(self, state: GeneticState) -> None:
        state.elite_set = np.empty(0, dtype=int)
        state.elite_mask = np.zeros(state.pop_size, dtype=bool)

    def select(self, state: GeneticState) -> tuple[int, int]:
        rng = state.population_rng
        p1 = rng.get_uniform()
        p2 = rng.get_uniform()
        while p2 == p1:
            p2 = rng.get_uniform()
        return p1, p2


class EliteBiasedParentSelection:
    name = "elite_biased"

    def __init__(self, n_elite: int) -> None:
        if int(n_elite) <= 0:
            raise ValueError(f"Elite-biased selection needs a positive elite size, got {n_elite}.")
        self.n_elite = int(n_elite)

    def validate(self, pop_size: int, n_mutants: int) -> InvalidPopulationSizesError | None:
        # There must be at least one crossover individual.
        if self.n_elite + n_mutants < pop_size:
            return None
        return InvalidPopulationSizesError(pop_size, n_mutants, self.n_elite)

    def prepare(self, state: GeneticState) -> None:
        # Rank by fitness, best first; ties resolved by lower population index.
        state.elite_set = state.population.ranked_indices(self.n_elite)
        mask = np.zeros(state.pop_size, dtype=bool)
        mask[state.elite_set] = True
        state.elite_mask = mask

    def select(self, state: GeneticState) -> tuple[int, int]:
        p1 = int(state.elite_set[state.elite_rng.get_uniform()])
        rng = state.population_rng
        p2 = rng.get_uniform()
        while p2 == p1 or state.is_elite(p2):
            p2 = rng.get_uniform()
        return p1, p2


__all__ = ["ParentSelection", "UniformParentSelection", "EliteBiasedParentSelection"]
