# problem/knapsack.py
"""
0/1 knapsack, shipped as a reference implementation of the problem contract.

Objective: maximise the total value of the selected items without exceeding
the weight capacity.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np

from metaheuristics.foundation.exceptions import InfeasibleError
from metaheuristics.foundation.genome.chromosome import Chromosome
from metaheuristics.foundation.problem.base import Problem
from metaheuristics.foundation.problem.types import LocalSearchPolicy
from metaheuristics.foundation.rng.discrete import DiscreteRandom

# A move is (item removed, item added); either side may be absent.
Move = tuple[int | None, int | None]

# Genes at or above this threshold select their item.
SELECTION_THRESHOLD = 0.5


class KnapsackProblem(Problem):
    """
    0/1 knapsack problem.

    Decoding: gene ``i >= 0.5`` selects item ``i``; an overweight selection is
    infeasible. Randomised construction ranks items by value/weight ratio.
    The neighbourhood contains every single flip and every swap of one
    selected item for one unselected item.
    """

    def __init__(
        self,
        values: Sequence[float] | np.ndarray,
        weights: Sequence[float] | np.ndarray,
        capacity: float,
    ) -> None:
        super().__init__()
        values = np.asarray(values, dtype=float)
        weights = np.asarray(weights, dtype=float)
        if values.ndim != 1 or values.shape != weights.shape:
            raise ValueError("values and weights must be 1-D arrays of the same length.")
        if values.size == 0:
            raise ValueError("A knapsack instance needs at least one item.")
        if np.any(weights <= 0.0):
            raise ValueError("Item weights must be strictly positive.")
        if np.any(values < 0.0):
            raise ValueError("Item values must be non-negative.")
        if capacity < 0:
            raise ValueError("Capacity must be non-negative.")
        # Instance data is immutable and shared between clones.
        self.values = values
        self.weights = weights
        self.capacity = float(capacity)
        self.selected = np.zeros(values.size, dtype=bool)
        self.total_value = 0.0
        self.total_weight = 0.0

    @classmethod
    def random_instance(cls, n_items: int, seed: int = 0, capacity_ratio: float = 0.5) -> "KnapsackProblem":
        rng = np.random.default_rng(seed)
        weights = rng.integers(1, 31, size=int(n_items)).astype(float)
        values = rng.integers(1, 51, size=int(n_items)).astype(float)
        return cls(values, weights, capacity_ratio * float(weights.sum()))

    @property
    def n_items(self) -> int:
        return int(self.values.size)

    # ------------------------------------------------------------------
    # Memory handling
    # ------------------------------------------------------------------

    def empty(self) -> "KnapsackProblem":
        return KnapsackProblem(self.values, self.weights, self.capacity)

    def clone(self) -> "KnapsackProblem":
        other = self.empty()
        other.copy_from(self)
        return other

    def copy_from(self, other: Any) -> None:
        if not isinstance(other, KnapsackProblem) or other.n_items != self.n_items:
            raise TypeError("copy_from expects a KnapsackProblem over the same items.")
        np.copyto(self.selected, other.selected)
        self.total_value = other.total_value
        self.total_weight = other.total_weight
        self.n_neighbours_explored = other.n_neighbours_explored

    # ------------------------------------------------------------------
    # Solution construction
    # ------------------------------------------------------------------

    def _set_selection(self, selected: np.ndarray) -> None:
        np.copyto(self.selected, selected)
        self.total_value = float(self.values[selected].sum())
        self.total_weight = float(self.weights[selected].sum())

    def _add(self, item: int) -> None:
        self.selected[item] = True
        self.total_value += float(self.values[item])
        self.total_weight += float(self.weights[item])

    def decode(self, chromosome: Chromosome) -> float:
        if len(chromosome) != self.n_items:
            raise ValueError(f"Expected a chromosome with {self.n_items} genes, got {len(chromosome)}.")
        selected = chromosome.genes >= SELECTION_THRESHOLD
        weight = float(self.weights[selected].sum())
        if weight > self.capacity:
            raise InfeasibleError(
                f"Selected items weigh {weight:g}, capacity is {self.capacity:g}.",
                details={"weight": weight, "capacity": self.capacity},
            )
        self._set_selection(selected)
        return self.total_value

    def random_construct(self, rng: DiscreteRandom, alpha: float) -> float:
        self._set_selection(np.zeros(self.n_items, dtype=bool))
        while True:
            free = self.capacity - self.total_weight
            candidates = np.flatnonzero(~self.selected & (self.weights <= free))
            if candidates.size == 0:
                break
            scores = self.values[candidates] / self.weights[candidates]
            best, worst = float(scores.max()), float(scores.min())
            if alpha >= 1.0:
                rcl = candidates
            else:
                rcl = candidates[scores >= best - alpha * (best - worst)]
            if alpha == 0.0 or rcl.size == 1:
                item = int(rcl[0])
            else:
                rng.init_uniform(0, rcl.size - 1)
                item = int(rcl[rng.get_uniform()])
            self._add(item)

        if not self.selected.any():
            raise InfeasibleError(
                "No item fits in the knapsack.",
                details={"capacity": self.capacity, "min_weight": float(self.weights.min())},
            )
        return self.total_value

    # ------------------------------------------------------------------
    # Neighbourhood
    # ------------------------------------------------------------------

    def _moves(self) -> Iterator[tuple[Move, float]]:
        inside = np.flatnonzero(self.selected)
        outside = np.flatnonzero(~self.selected)
        free = self.capacity - self.total_weight
        for j in outside:
            if self.weights[j] <= free:
                yield (None, int(j)), self.total_value + float(self.values[j])
        for i in inside:
            yield (int(i), None), self.total_value - float(self.values[i])
        for i in inside:
            room = free + float(self.weights[i])
            for j in outside:
                if self.weights[j] <= room:
                    yield (int(i), int(j)), self.total_value - float(self.values[i]) + float(self.values[j])

    def _apply(self, move: Move) -> "KnapsackProblem":
        neighbour = self.clone()
        removed, added = move
        if removed is not None:
            neighbour.selected[removed] = False
            neighbour.total_value -= float(self.values[removed])
            neighbour.total_weight -= float(self.weights[removed])
        if added is not None:
            neighbour._add(added)
        return neighbour

    def best_neighbour(
        self, current_cost: float, policy: LocalSearchPolicy
    ) -> tuple["KnapsackProblem | None", float]:
        policy = LocalSearchPolicy.parse(policy)
        best_move: Move | None = None
        best_cost = current_cost
        for move, cost in self._moves():
            self.n_neighbours_explored += 1
            if cost > best_cost:
                best_move, best_cost = move, cost
                if policy is LocalSearchPolicy.FIRST_IMPROVEMENT:
                    break
        if best_move is None:
            return None, current_cost
        return self._apply(best_move), best_cost

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def sanity_check(self) -> bool:
        weight = float(self.weights[self.selected].sum())
        value = float(self.values[self.selected].sum())
        return bool(
            weight <= self.capacity
            and np.isclose(weight, self.total_weight)
            and np.isclose(value, self.total_value)
        )

    def describe(self) -> dict[str, Any]:
        info = super().describe()
        info.update(
            {
                "n_items": self.n_items,
                "capacity": self.capacity,
                "selected": np.flatnonzero(self.selected).tolist(),
                "total_value": self.total_value,
                "total_weight": self.total_weight,
            }
        )
        return info


__all__ = ["KnapsackProblem"]
