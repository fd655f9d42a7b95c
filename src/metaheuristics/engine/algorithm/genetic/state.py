"""Run state of the genetic algorithm framework.

The current population, the buffer the next generation is written into, the
elite set and the bookkeeping of the last generation live here so that the
parent-selection strategies can read them without reaching into the
algorithm object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from metaheuristics.foundation.genome.population import Population
from metaheuristics.foundation.rng.continuous import ContinuousRandom
from metaheuristics.foundation.rng.discrete import DiscreteRandom

OriginKind = Literal["initial", "elite", "mutant", "crossover"]


@dataclass(frozen=True)
class SlotOrigin:
    """How the individual in one population slot was produced.

    ``parents`` are slot indices in the previous generation: the copied
    individual for ``elite``, (parent 1, parent 2) for ``crossover`` and empty
    for ``mutant`` and ``initial``.
    """

    kind: OriginKind
    parents: tuple[int, ...] = ()


@dataclass
class GeneticState:
    """State for one run of a genetic algorithm.

    Attributes
    ----------
    population : Population
        Current generation.
    next_gen : Population
        Buffer the next generation is written into; swapped with
        ``population`` at the end of each generation.
    zero_one_rng : ContinuousRandom
        Uniform values in [0, 1) for chromosomes and inheritance draws.
    population_rng : DiscreteRandom
        Uniform indices in [0, pop_size).
    elite_rng : DiscreteRandom
        Uniform positions in [0, n_elite) (elite-biased selection only).
    elite_set : np.ndarray
        Indices of the elite individuals, best first. Empty when the
        strategy keeps no elite.
    """

    population: Population
    next_gen: Population
    zero_one_rng: ContinuousRandom
    population_rng: DiscreteRandom
    elite_rng: DiscreteRandom
    elite_set: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=int))
    elite_mask: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=bool))
    generation: int = 0
    origins: list[SlotOrigin] = field(default_factory=list)
    ids: np.ndarray | None = None
    best_history: list[float] = field(default_factory=list)

    @property
    def pop_size(self) -> int:
        return len(self.population)

    def is_elite(self, idx: int) -> bool:
        return bool(self.elite_mask.size and self.elite_mask[idx])

    def swap_generations(self) -> None:
        self.population, self.next_gen = self.next_gen, self.population


__all__ = ["GeneticState", "SlotOrigin", "OriginKind"]
