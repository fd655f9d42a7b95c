from __future__ import annotations

import logging

import pytest

from metaheuristics import execute
from metaheuristics.engine.algorithm import ALGORITHMS, BRKGA, GRASP, RKGA, LocalSearch, build_algorithm, resolve_algorithm
from metaheuristics.foundation.exceptions import InvalidAlgorithmError, MissingConfigError
from metaheuristics.foundation.rng import RandomEngine


def test_all_algorithms_registered():
    assert ALGORITHMS.names() == ["brkga", "grasp", "local_search", "rkga"]


def test_builders_accept_mappings(knapsack):
    ga_cfg = {
        "pop_size": 10,
        "n_mutants": 2,
        "n_generations": 2,
        "chrom_size": knapsack.n_items,
        "inheritance_probability": 0.7,
    }
    assert isinstance(build_algorithm("rkga", ga_cfg), RKGA)
    assert isinstance(build_algorithm("BRKGA", {**ga_cfg, "n_elite": 2}), BRKGA)
    assert isinstance(build_algorithm("grasp", {"max_iterations": 3, "alpha": 0.2}), GRASP)
    assert isinstance(build_algorithm("local_search"), LocalSearch)
    assert isinstance(build_algorithm("grasp"), GRASP)


def test_genetic_builders_need_a_config():
    with pytest.raises(MissingConfigError):
        build_algorithm("brkga")


def test_engine_is_passed_through():
    engine = RandomEngine(3)
    assert build_algorithm("grasp", None, engine).engine is engine


def test_unknown_algorithm_suggests_close_names():
    with pytest.raises(InvalidAlgorithmError) as excinfo:
        resolve_algorithm("grsp")
    assert "Did you mean 'grasp'?" in str(excinfo.value)


def test_execute_times_the_run(knapsack, caplog):
    algorithm = build_algorithm("grasp", {"max_iterations": 3, "alpha": 0.3})
    with caplog.at_level(logging.INFO, logger="metaheuristics"):
        outcome = execute(algorithm, knapsack, 0.0)
    assert outcome.success
    assert outcome.elapsed_ms >= 0.0
    assert outcome.cost == outcome.result.cost
    assert "GRASP finished" in caplog.text
