"""Biased random-key genetic algorithm: elite carried over, elite-biased mating."""

from __future__ import annotations

from metaheuristics.engine.algorithm.config import BRKGAConfigData
from metaheuristics.engine.algorithm.genetic.framework import GeneticAlgorithm
from metaheuristics.engine.algorithm.genetic.selection import EliteBiasedParentSelection
from metaheuristics.foundation.rng.engine import RandomEngine
from metaheuristics.hooks.genealogy import GenealogyTracker


class BRKGA(GeneticAlgorithm):
    """Genetic algorithm that keeps the ``n_elite`` best individuals.

    Every generation the elite is copied unchanged into the first slots of
    the next population, and each crossover mates one elite individual with
    one non-elite individual. Requires ``n_elite + n_mutants < pop_size``.
    """

    name = "BRKGA"

    def __init__(
        self,
        config: BRKGAConfigData,
        engine: RandomEngine | None = None,
        genealogy: GenealogyTracker | None = None,
    ) -> None:
        super().__init__(config, EliteBiasedParentSelection(config.n_elite), engine=engine, genealogy=genealogy)


__all__ = ["BRKGA"]
