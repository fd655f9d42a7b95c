from __future__ import annotations

import numpy as np
import pytest

from metaheuristics.foundation.exceptions import InfeasibleError
from metaheuristics.foundation.genome import Chromosome
from metaheuristics.foundation.problem import KnapsackProblem, LocalSearchPolicy, Problem, ProblemProtocol
from metaheuristics.foundation.rng import DiscreteRandom


def test_implements_problem_contract(knapsack):
    assert isinstance(knapsack, Problem)
    assert isinstance(knapsack, ProblemProtocol)


@pytest.mark.parametrize(
    "values, weights, capacity",
    [
        ([1.0, 2.0], [1.0], 3.0),
        ([], [], 1.0),
        ([1.0], [0.0], 1.0),
        ([-1.0], [1.0], 1.0),
        ([1.0], [1.0], -1.0),
    ],
)
def test_rejects_invalid_instances(values, weights, capacity):
    with pytest.raises(ValueError):
        KnapsackProblem(values, weights, capacity)


def test_decode_selects_genes_above_threshold(small_knapsack):
    cost = small_knapsack.decode(Chromosome.from_genes([0.9, 0.5, 0.1, 0.49]))
    assert cost == 10.0
    assert small_knapsack.selected.tolist() == [True, True, False, False]
    assert small_knapsack.total_weight == 4.0
    assert small_knapsack.sanity_check()


def test_decode_is_deterministic(knapsack):
    rng = np.random.default_rng(11)
    for _ in range(20):
        chrom = Chromosome.from_genes(rng.random(knapsack.n_items))
        try:
            first = knapsack.decode(chrom)
        except InfeasibleError:
            with pytest.raises(InfeasibleError):
                knapsack.decode(chrom)
            continue
        assert knapsack.decode(chrom) == first


def test_infeasible_decode_leaves_state_untouched(small_knapsack):
    small_knapsack.decode(Chromosome.from_genes([1.0, 0.0, 0.0, 0.0]))
    with pytest.raises(InfeasibleError) as excinfo:
        small_knapsack.decode(Chromosome.from_genes([1.0, 1.0, 1.0, 1.0]))
    assert excinfo.value.details["capacity"] == 5.0
    assert small_knapsack.total_value == 6.0
    assert small_knapsack.selected.tolist() == [True, False, False, False]


def test_decode_rejects_wrong_chromosome_size(small_knapsack):
    with pytest.raises(ValueError):
        small_knapsack.decode(Chromosome(3))


def test_greedy_construction_ignores_seed(small_knapsack):
    results = []
    for seed in (1, 2, 3):
        rng = DiscreteRandom()
        rng.seed(seed)
        problem = small_knapsack.empty()
        cost = problem.random_construct(rng, 0.0)
        results.append((cost, problem.selected.tolist()))
    assert results[0] == (10.0, [True, True, False, False])
    assert all(r == results[0] for r in results)


def test_random_construction_is_feasible(knapsack):
    rng = DiscreteRandom()
    for _ in range(10):
        problem = knapsack.empty()
        cost = problem.random_construct(rng, 1.0)
        assert cost == problem.total_value
        assert problem.total_weight <= problem.capacity
        assert problem.sanity_check()


def test_full_randomness_can_pick_every_candidate():
    # Ratios 0.8 and 0.3; either item fills the knapsack on its own.
    picks = set()
    for seed in range(200):
        rng = DiscreteRandom()
        rng.seed(seed)
        problem = KnapsackProblem([8.0, 3.0], [10.0, 10.0], capacity=10.0)
        problem.random_construct(rng, 1.0)
        picks.add(int(np.flatnonzero(problem.selected)[0]))
    assert picks == {0, 1}


def test_construction_fails_when_nothing_fits():
    problem = KnapsackProblem([5.0, 3.0], [4.0, 6.0], capacity=2.0)
    with pytest.raises(InfeasibleError):
        problem.random_construct(DiscreteRandom(), 0.5)


def test_clone_is_independent(small_knapsack):
    small_knapsack.decode(Chromosome.from_genes([1.0, 0.0, 0.0, 0.0]))
    clone = small_knapsack.clone()
    clone.decode(Chromosome.from_genes([0.0, 1.0, 0.0, 0.0]))
    assert small_knapsack.selected.tolist() == [True, False, False, False]
    assert clone.total_value == 4.0


def test_empty_has_no_solution(small_knapsack):
    small_knapsack.decode(Chromosome.from_genes([1.0, 1.0, 0.0, 0.0]))
    fresh = small_knapsack.empty()
    assert not fresh.selected.any()
    assert fresh.total_value == 0.0


def test_copy_from_rejects_other_instances(small_knapsack, knapsack):
    with pytest.raises(TypeError):
        small_knapsack.copy_from(knapsack)


@pytest.mark.parametrize("policy", list(LocalSearchPolicy))
def test_best_neighbour_improves_or_returns_none(small_knapsack, policy):
    small_knapsack.decode(Chromosome.from_genes([0.0, 0.0, 0.0, 1.0]))
    neighbour, cost = small_knapsack.best_neighbour(1.0, policy)
    assert neighbour is not None
    assert cost > 1.0
    assert neighbour.total_value == cost
    assert neighbour.sanity_check()
    assert small_knapsack.total_value == 1.0
    assert small_knapsack.n_neighbours_explored > 0


def test_reset_neighbour_count(small_knapsack):
    small_knapsack.decode(Chromosome.from_genes([0.0, 0.0, 0.0, 1.0]))
    small_knapsack.best_neighbour(1.0, LocalSearchPolicy.FIRST_IMPROVEMENT)
    assert small_knapsack.n_neighbours_explored > 0
    small_knapsack.reset_neighbour_count()
    assert small_knapsack.n_neighbours_explored == 0
    assert small_knapsack.describe()["n_neighbours_explored"] == 0


def test_best_improvement_picks_the_best_move(small_knapsack):
    small_knapsack.decode(Chromosome.from_genes([0.0, 0.0, 0.0, 1.0]))
    _, cost = small_knapsack.best_neighbour(1.0, LocalSearchPolicy.BEST_IMPROVEMENT)
    # Swapping item 3 for item 0 gives 6; adding item 0 is not possible (weight 6 > 5).
    assert cost == 6.0


def test_no_improving_neighbour_at_optimum(small_knapsack):
    small_knapsack.decode(Chromosome.from_genes([1.0, 1.0, 0.0, 0.0]))
    neighbour, cost = small_knapsack.best_neighbour(10.0, "best")
    assert neighbour is None
    assert cost == 10.0


def test_describe(small_knapsack):
    info = small_knapsack.describe()
    assert info["problem"] == "KnapsackProblem"
    assert info["n_items"] == 4
