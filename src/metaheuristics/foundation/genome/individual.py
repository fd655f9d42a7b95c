"""
Individual: a chromosome plus its fitness.

Fitness is a cached value derived by decoding the chromosome; individuals are
compared by fitness only, never by gene content.
"""

from __future__ import annotations

from metaheuristics.foundation.genome.chromosome import Chromosome


class Individual:
    __slots__ = ("_chromosome", "fitness")

    def __init__(self, n_genes: int) -> None:
        self._chromosome = Chromosome(n_genes)
        self.fitness: float = 0.0

    @property
    def chromosome(self) -> Chromosome:
        return self._chromosome

    @property
    def n_genes(self) -> int:
        return self._chromosome.size()

    def get_gene(self, i: int) -> float:
        return self._chromosome[i]

    def set_gene(self, i: int, value: float) -> None:
        self._chromosome[i] = value

    def assign(self, other: "Individual") -> None:
        """Copy genes and fitness of ``other`` into this individual."""
        self._chromosome.assign(other._chromosome)
        self.fitness = other.fitness

    def copy(self) -> "Individual":
        clone = Individual(self.n_genes)
        clone.assign(self)
        return clone

    def __str__(self) -> str:
        return f"fitness= {self.fitness:g}, chromosome= {self._chromosome}"

    def __repr__(self) -> str:
        return f"Individual({self})"


__all__ = ["Individual"]
