"""Generic generational loop for random-key genetic algorithms.

A chromosome is a vector of random keys in [0, 1); the problem's ``decode``
turns it into a solution and its cost, which becomes the individual's
fitness. A chromosome that decodes to an infeasible solution gets fitness
``-inf``.

One generation:

1. Copy the elite individuals verbatim into the first slots (only when the
   parent-selection strategy keeps an elite).
2. Fill the next ``n_mutants`` slots with mutants: fresh random chromosomes.
3. Fill the remaining slots by crossover: for every gene, take parent 1's
   allele with probability ``inheritance_probability``, else parent 2's.
4. Replace the current population with the new one.
5. Let the strategy recompute its elite set.

The parent-selection strategy is the only thing that differs between RKGA and
BRKGA (see :mod:`metaheuristics.engine.algorithm.genetic.selection`).

Example:
    >>> from metaheuristics.engine.algorithm.config import BRKGAConfig
    >>> from metaheuristics.engine.algorithm.genetic import BRKGA
    >>> cfg = BRKGAConfig.default(chrom_size=problem.n_items, pop_size=50, n_generations=100)
    >>> result = BRKGA(cfg).execute_algorithm(problem, cost=0.0)

    Stepping one generation at a time:
    >>> ga = BRKGA(cfg)
    >>> ga.initialize(problem)
    >>> for _ in range(10):
    ...     ga.next_generation(problem)
    >>> ga.best_individual().fitness
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from metaheuristics.engine.algorithm.base import Metaheuristic, RunResult
from metaheuristics.engine.algorithm.config import RKGAConfigData
from metaheuristics.engine.algorithm.genetic.selection import ParentSelection
from metaheuristics.engine.algorithm.genetic.state import GeneticState, SlotOrigin
from metaheuristics.foundation.exceptions import InfeasibleError, InvalidPopulationSizesError
from metaheuristics.foundation.genome.individual import Individual
from metaheuristics.foundation.genome.population import Population
from metaheuristics.foundation.rng.continuous import ContinuousRandom
from metaheuristics.foundation.rng.discrete import DiscreteRandom
from metaheuristics.foundation.rng.engine import RandomEngine
from metaheuristics.foundation.timing import average
from metaheuristics.hooks.genealogy import DefaultGenealogyTracker, GenealogyTracker, NoOpGenealogyTracker

if TYPE_CHECKING:
    from metaheuristics.foundation.problem.base import Problem

_logger = logging.getLogger(__name__)


class GeneticAlgorithm(Metaheuristic):
    """Random-key genetic algorithm parameterised by a parent-selection strategy.

    Parameters
    ----------
    config : RKGAConfigData
        Population size, number of mutants, number of generations, chromosome
        size and inheritance probability (``BRKGAConfigData`` adds the elite
        size, which the strategy owns).
    selection : ParentSelection
        Decides the elite size, the elite set and the crossover parents.
    engine : RandomEngine, optional
        Shared by every generator of the algorithm. Defaults to a fixed-seed
        engine; call :meth:`seed` for OS entropy.
    genealogy : GenealogyTracker, optional
        Receives one record per individual placed in a slot. Defaults to a
        recording tracker when ``config.track_genealogy`` is set.
    """

    name = "Genetic algorithm"
    timers = ("total", "initial", "elite", "mutant", "crossover")

    def __init__(
        self,
        config: RKGAConfigData,
        selection: ParentSelection,
        engine: RandomEngine | None = None,
        genealogy: GenealogyTracker | None = None,
    ) -> None:
        super().__init__(engine)
        self.cfg = config
        self.selection = selection
        if genealogy is None:
            genealogy = DefaultGenealogyTracker() if config.track_genealogy else NoOpGenealogyTracker()
        self.genealogy = genealogy
        self._tracking = not isinstance(genealogy, NoOpGenealogyTracker)
        self._st: GeneticState | None = None
        self._previous_ids: np.ndarray | None = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def pop_size(self) -> int:
        return self.cfg.pop_size

    @property
    def n_mutants(self) -> int:
        return self.cfg.n_mutants

    @property
    def n_elite(self) -> int:
        return self.selection.n_elite

    @property
    def n_generations(self) -> int:
        return self.cfg.n_generations

    @property
    def chrom_size(self) -> int:
        return self.cfg.chrom_size

    @property
    def inheritance_probability(self) -> float:
        return self.cfg.inheritance_probability

    def validate_sizes(self) -> InvalidPopulationSizesError | None:
        return self.selection.validate(self.pop_size, self.n_mutants)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def _new_state(self) -> GeneticState:
        zero_one_rng = ContinuousRandom(self.engine)
        zero_one_rng.init_uniform(0.0, 1.0)
        population_rng = DiscreteRandom(self.engine)
        population_rng.init_uniform(0, self.pop_size - 1)
        elite_rng = DiscreteRandom(self.engine)
        if self.n_elite > 0:
            elite_rng.init_uniform(0, self.n_elite - 1)
        return GeneticState(
            population=Population(self.pop_size, self.chrom_size),
            next_gen=Population(self.pop_size, self.chrom_size),
            zero_one_rng=zero_one_rng,
            population_rng=population_rng,
            elite_rng=elite_rng,
        )

    def _require_state(self) -> GeneticState:
        if self._st is None:
            raise RuntimeError(f"{self.name}: population not initialised; call initialize() or load_population().")
        return self._st

    def _require_valid_sizes(self) -> None:
        error = self.validate_sizes()
        if error is not None:
            raise error

    @property
    def state(self) -> GeneticState:
        return self._require_state()

    @property
    def population(self) -> Population:
        return self._require_state().population

    @property
    def elite_set(self) -> np.ndarray:
        return self._require_state().elite_set.copy()

    @property
    def generation(self) -> int:
        return self._require_state().generation

    def population_size(self) -> int:
        return len(self._require_state().population)

    def individual(self, i: int) -> Individual:
        return self._require_state().population[i]

    def best_individual(self) -> Individual:
        """Individual with the largest fitness (first one on ties)."""
        population = self._require_state().population
        return population[population.best_index()]

    # ------------------------------------------------------------------
    # Population-generation functions
    # ------------------------------------------------------------------

    def evaluate_individual(self, problem: "Problem", individual: Individual) -> None:
        """Decode ``individual`` on a scratch copy of ``problem`` and store its fitness."""
        scratch = problem.clone()
        try:
            individual.fitness = float(scratch.decode(individual.chromosome))
        except InfeasibleError:
            individual.fitness = -math.inf
            return
        if self.cfg.check_sanity and not scratch.sanity_check():
            _logger.warning("%s: solution decoded from a chromosome failed its sanity check.", self.name)

    def generate_mutant(self, problem: "Problem", individual: Individual) -> None:
        """Give ``individual`` a fresh random chromosome and evaluate it."""
        self._require_state().zero_one_rng.fill_uniform(individual.chromosome.buffer)
        self.evaluate_individual(problem, individual)

    def crossover(self, problem: "Problem", parent1: int, parent2: int, child: Individual) -> None:
        """Parameterized uniform crossover of two individuals of the current population.

        Each gene of ``child`` comes from ``parent1`` when an independent
        uniform draw is <= the inheritance probability, else from ``parent2``.
        """
        st = self._require_state()
        genes1 = st.population[parent1].chromosome.genes
        genes2 = st.population[parent2].chromosome.genes
        draws = st.zero_one_rng.uniform_array(self.chrom_size)
        child.chromosome.fill(np.where(draws <= self.inheritance_probability, genes1, genes2))
        self.evaluate_individual(problem, child)

    def _record(self, st: GeneticState, slot: int, origin: SlotOrigin, individual: Individual) -> None:
        """Note how ``slot`` of the generation being built was filled."""
        st.origins[slot] = origin
        if st.ids is None:
            return
        if self._previous_ids is None:
            parents: list[int] = []
        else:
            parents = [int(self._previous_ids[p]) for p in origin.parents]
        st.ids[slot] = self.genealogy.record(st.generation, origin.kind, parents, individual.fitness)

    def copy_elite_individuals(self, start: int = 0) -> int:
        """Copy the elite set of the current population into ``next_gen``; return the next free slot."""
        st = self._require_state()
        m = start
        for idx in st.elite_set:
            st.next_gen[m].assign(st.population[int(idx)])
            self._record(st, m, SlotOrigin("elite", (int(idx),)), st.next_gen[m])
            m += 1
        return m

    def generate_mutants(self, problem: "Problem", start: int, stop: int) -> int:
        """Replace the ``next_gen`` slots in [start, stop) with mutants; return ``stop``."""
        st = self._require_state()
        for m in range(start, stop):
            self.generate_mutant(problem, st.next_gen[m])
            self._record(st, m, SlotOrigin("mutant"), st.next_gen[m])
        return stop

    def generate_crossovers(self, problem: "Problem", start: int) -> int:
        """Fill the ``next_gen`` slots from ``start`` to the end by crossover."""
        st = self._require_state()
        for m in range(start, self.pop_size):
            p1, p2 = self.selection.select(st)
            self.crossover(problem, p1, p2, st.next_gen[m])
            self._record(st, m, SlotOrigin("crossover", (p1, p2)), st.next_gen[m])
        return self.pop_size

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def _start_bookkeeping(self, st: GeneticState) -> None:
        self._previous_ids = None
        st.origins = [SlotOrigin("initial")] * self.pop_size
        if self._tracking:
            st.ids = np.full(self.pop_size, -1, dtype=int)

    def _after_replacement(self, st: GeneticState) -> None:
        self.selection.prepare(st)
        st.best_history.append(float(st.population[st.population.best_index()].fitness))

    def initialize(self, problem: "Problem") -> None:
        """Fill a new population entirely with mutants and derive the elite set."""
        self._require_valid_sizes()
        st = self._new_state()
        self._st = st
        self._start_bookkeeping(st)
        with self.performance.measure("initial"):
            for i in range(self.pop_size):
                self.generate_mutant(problem, st.population[i])
                self._record(st, i, SlotOrigin("initial"), st.population[i])
        self._after_replacement(st)

    def load_population(self, population: Population) -> None:
        """Start from a copy of an existing population instead of random mutants."""
        self._require_valid_sizes()
        if len(population) != self.pop_size or population.chrom_size != self.chrom_size:
            raise ValueError(
                f"Expected a population of shape ({self.pop_size}, {self.chrom_size}), "
                f"got ({len(population)}, {population.chrom_size})."
            )
        st = self._new_state()
        st.population.assign(population)
        self._st = st
        self._start_bookkeeping(st)
        for i in range(self.pop_size):
            self._record(st, i, SlotOrigin("initial"), st.population[i])
        self._after_replacement(st)

    def next_generation(self, problem: "Problem") -> None:
        """Produce one complete replacement population."""
        st = self._require_state()
        self._previous_ids = st.ids.copy() if st.ids is not None else None
        st.generation += 1

        with self.performance.measure("elite"):
            m = self.copy_elite_individuals(0)
        with self.performance.measure("mutant"):
            m = self.generate_mutants(problem, m, m + self.n_mutants)
        with self.performance.measure("crossover"):
            self.generate_crossovers(problem, m)

        st.swap_generations()
        self._after_replacement(st)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute_algorithm(self, problem: "Problem", cost: float) -> RunResult:
        error = self.validate_sizes()
        if error is not None:
            _logger.error("%s: %s", self.name, error.message)
            return RunResult(success=False, cost=cost, stats={"error": error.message, **error.details})

        self.reset_algorithm()
        self.initialize(problem)
        st = self._require_state()
        _logger.debug("%s: generation 0 best fitness=%s", self.name, st.best_history[-1])

        with self.performance.measure("total"):
            for g in range(1, self.n_generations + 1):
                previous_best = st.best_history[-1]
                self.next_generation(problem)
                best_fit = st.best_history[-1]
                _logger.debug(
                    "%s: generation %d/%d best fitness=%s%s",
                    self.name,
                    g,
                    self.n_generations,
                    best_fit,
                    " (improved)" if best_fit > previous_best else "",
                )

        fittest = self.best_individual()
        if st.ids is not None:
            self.genealogy.mark_final_best(int(st.ids[st.population.best_index()]))

        # Materialise the best individual's solution into the caller's problem.
        scratch = problem.clone()
        try:
            final_cost = float(scratch.decode(fittest.chromosome))
        except InfeasibleError:
            _logger.warning("%s: no feasible individual found; the problem was left unchanged.", self.name)
            final_cost = -math.inf
        else:
            problem.copy_from(scratch)

        return RunResult(
            success=True,
            cost=final_cost,
            stats={
                "generations": st.generation,
                "best_history": list(st.best_history),
                "elite_set": st.elite_set.tolist(),
            },
        )

    def performance_report(self) -> str:
        n = self.n_generations
        rows: list[tuple[str, object]] = [
            ("Initial population time", self.performance["initial"]),
            ("Total generation time", self.performance["total"]),
            ("Average generation time", average(self.performance["total"], n)),
        ]
        if self.n_elite > 0:
            rows += [
                ("Total copying elite time", self.performance["elite"]),
                ("Average copying elite time", average(self.performance["elite"], n)),
            ]
        rows += [
            ("Total mutant generation time", self.performance["mutant"]),
            ("Average mutant generation time", average(self.performance["mutant"], n)),
            ("Total crossover generation time", self.performance["crossover"]),
            ("Average crossover generation time", average(self.performance["crossover"], n)),
        ]
        return self._report(f"{self.name} algorithm performance:", rows)


__all__ = ["GeneticAlgorithm"]
