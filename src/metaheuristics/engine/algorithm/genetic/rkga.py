"""Random-key genetic algorithm: uniform parent selection, no elite."""

from __future__ import annotations

from metaheuristics.engine.algorithm.config import RKGAConfigData
from metaheuristics.engine.algorithm.genetic.framework import GeneticAlgorithm
from metaheuristics.engine.algorithm.genetic.selection import UniformParentSelection
from metaheuristics.foundation.rng.engine import RandomEngine
from metaheuristics.hooks.genealogy import GenealogyTracker


class RKGA(GeneticAlgorithm):
    """Both crossover parents drawn uniformly from the whole population.

    Requires ``n_mutants < pop_size``.
    """

    name = "RKGA"

    def __init__(
        self,
        config: RKGAConfigData,
        engine: RandomEngine | None = None,
        genealogy: GenealogyTracker | None = None,
    ) -> None:
        super().__init__(config, UniformParentSelection(), engine=engine, genealogy=genealogy)


__all__ = ["RKGA"]
