"""
Population: fixed-size ordered collection of individuals.

The size never changes after construction; a new generation is written into a
second population of the same shape and the two are swapped.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from metaheuristics.foundation.genome.individual import Individual


class Population:
    __slots__ = ("_individuals", "_chrom_size")

    def __init__(self, pop_size: int, chrom_size: int) -> None:
        pop_size = int(pop_size)
        if pop_size <= 0:
            raise ValueError(f"Population size must be positive, got {pop_size}.")
        self._chrom_size = int(chrom_size)
        self._individuals = [Individual(self._chrom_size) for _ in range(pop_size)]

    @property
    def chrom_size(self) -> int:
        return self._chrom_size

    def __len__(self) -> int:
        return len(self._individuals)

    def __getitem__(self, i: int) -> Individual:
        return self._individuals[i]

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    @property
    def fitness(self) -> np.ndarray:
        return np.fromiter((ind.fitness for ind in self._individuals), dtype=float, count=len(self))

    def genes(self) -> np.ndarray:
        """Gene matrix of shape ``(pop_size, chrom_size)`` (a copy)."""
        return np.vstack([ind.chromosome.genes for ind in self._individuals])

    def best_index(self) -> int:
        """Index of the first individual with maximum fitness."""
        return int(np.argmax(self.fitness))

    def best(self) -> Individual:
        return self._individuals[self.best_index()]

    def ranked_indices(self, k: int | None = None) -> np.ndarray:
        """Indices sorted by fitness descending; ties keep population order."""
        order = np.argsort(-self.fitness, kind="stable")
        return order if k is None else order[: int(k)]

    def assign(self, other: "Population") -> None:
        if len(other) != len(self) or other.chrom_size != self.chrom_size:
            raise ValueError(
                f"Cannot assign a population of shape ({len(other)}, {other.chrom_size}) "
                f"to one of shape ({len(self)}, {self.chrom_size})."
            )
        for mine, theirs in zip(self._individuals, other._individuals):
            mine.assign(theirs)

    def copy(self) -> "Population":
        clone = Population(len(self), self._chrom_size)
        clone.assign(self)
        return clone

    def __str__(self) -> str:
        return "\n".join(f"{i}: {ind}" for i, ind in enumerate(self._individuals))


__all__ = ["Population"]
