from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from metaheuristics.foundation.exceptions import InfeasibleError
from metaheuristics.foundation.problem.base import Problem
from metaheuristics.foundation.problem.knapsack import KnapsackProblem
from metaheuristics.foundation.problem.types import LocalSearchPolicy


class OneMinProblem(Problem):
    """Minimise the number of ones in a bit string; cost is the negated count."""

    def __init__(self, n_bits: int) -> None:
        super().__init__()
        self.bits = np.zeros(n_bits, dtype=bool)

    def empty(self) -> "OneMinProblem":
        return OneMinProblem(self.bits.size)

    def clone(self) -> "OneMinProblem":
        other = self.empty()
        other.copy_from(self)
        return other

    def copy_from(self, other: Any) -> None:
        self.bits = other.bits.copy()
        self.n_neighbours_explored = other.n_neighbours_explored

    def cost(self) -> float:
        return -float(self.bits.sum())

    def decode(self, chromosome) -> float:
        self.bits = chromosome.genes >= 0.5
        return self.cost()

    def random_construct(self, rng, alpha: float) -> float:
        self.bits = np.zeros(self.bits.size, dtype=bool)
        if alpha > 0.0:
            rng.init_uniform(0, 1)
            for i in range(self.bits.size):
                self.bits[i] = rng.get_uniform() == 1
        return self.cost()

    def best_neighbour(self, current_cost: float, policy: LocalSearchPolicy):
        ones = np.flatnonzero(self.bits)
        self.n_neighbours_explored += int(self.bits.size)
        if ones.size == 0:
            return None, current_cost
        neighbour = self.clone()
        neighbour.bits[ones[0]] = False
        return neighbour, neighbour.cost()

    def sanity_check(self) -> bool:
        return True


class AlwaysInfeasibleProblem(Problem):
    """Every construction and every decode fails."""

    def __init__(self) -> None:
        super().__init__()
        self.marker = "untouched"

    def empty(self) -> "AlwaysInfeasibleProblem":
        return AlwaysInfeasibleProblem()

    def clone(self) -> "AlwaysInfeasibleProblem":
        other = AlwaysInfeasibleProblem()
        other.copy_from(self)
        return other

    def copy_from(self, other: Any) -> None:
        self.marker = "overwritten"

    def decode(self, chromosome) -> float:
        raise InfeasibleError("nothing decodes")

    def random_construct(self, rng, alpha: float) -> float:
        raise InfeasibleError("nothing fits")

    def best_neighbour(self, current_cost: float, policy: LocalSearchPolicy):
        return None, current_cost

    def sanity_check(self) -> bool:
        return False


class GeneSumProblem(Problem):
    """Fitness is the plain sum of the genes; never infeasible."""

    def __init__(self) -> None:
        super().__init__()
        self.value = 0.0

    def empty(self) -> "GeneSumProblem":
        return GeneSumProblem()

    def clone(self) -> "GeneSumProblem":
        other = GeneSumProblem()
        other.copy_from(self)
        return other

    def copy_from(self, other: Any) -> None:
        self.value = other.value

    def decode(self, chromosome) -> float:
        self.value = float(np.sum(chromosome.genes))
        return self.value

    def random_construct(self, rng, alpha: float) -> float:
        raise NotImplementedError

    def best_neighbour(self, current_cost: float, policy: LocalSearchPolicy):
        return None, current_cost

    def sanity_check(self) -> bool:
        return True


@pytest.fixture
def knapsack() -> KnapsackProblem:
    return KnapsackProblem.random_instance(20, seed=3, capacity_ratio=0.6)


@pytest.fixture
def small_knapsack() -> KnapsackProblem:
    # Greedy by value/weight picks items 0 and 1 (ratios 3.0 and 2.0).
    return KnapsackProblem(values=[6.0, 4.0, 3.0, 1.0], weights=[2.0, 2.0, 3.0, 4.0], capacity=5.0)


@pytest.fixture
def one_min() -> OneMinProblem:
    return OneMinProblem(12)


@pytest.fixture
def infeasible_problem() -> AlwaysInfeasibleProblem:
    return AlwaysInfeasibleProblem()


@pytest.fixture
def gene_sum() -> GeneSumProblem:
    return GeneSumProblem()
