from __future__ import annotations

import json

import pytest

from metaheuristics.engine.algorithm.config import (
    BRKGAConfig,
    BRKGAConfigData,
    GRASPConfig,
    LocalSearchConfig,
    RKGAConfig,
    RKGAConfigData,
)
from metaheuristics.foundation.exceptions import ConfigurationError, MissingConfigError
from metaheuristics.foundation.problem import LocalSearchPolicy


def test_local_search_defaults():
    cfg = LocalSearchConfig.default()
    assert cfg.max_iterations is None
    assert cfg.policy is LocalSearchPolicy.BEST_IMPROVEMENT
    assert not cfg.check_sanity


def test_policy_aliases():
    assert LocalSearchConfig().policy("first-improvement").fixed().policy is LocalSearchPolicy.FIRST_IMPROVEMENT
    with pytest.raises(ConfigurationError):
        LocalSearchConfig().policy("random")


def test_grasp_requires_iterations_and_alpha():
    with pytest.raises(MissingConfigError) as excinfo:
        GRASPConfig().max_iterations(10).fixed()
    assert "alpha" in str(excinfo.value)
    cfg = GRASPConfig().max_iterations(10).alpha(0.0).fixed()
    assert cfg.local_iterations is None


@pytest.mark.parametrize("alpha", [-0.1, 1.5, "half"])
def test_grasp_rejects_bad_alpha(alpha):
    with pytest.raises(ConfigurationError):
        GRASPConfig().alpha(alpha)


def test_grasp_from_dict_and_serialisation():
    cfg = GRASPConfig.from_dict({"max_iterations": 5, "alpha": 0.4, "policy": "first", "local_iterations": 50})
    data = cfg.to_dict()
    assert data["policy"] == "first"
    assert json.loads(cfg.to_json())["local_iterations"] == 50


@pytest.mark.parametrize("value", [0, -3, 2.5, "ten"])
def test_pop_size_must_be_positive_integer(value):
    with pytest.raises(ConfigurationError):
        RKGAConfig().pop_size(value)


def test_rkga_builder():
    cfg = (
        RKGAConfig()
        .pop_size(20)
        .n_mutants(0)
        .n_generations(0)
        .chrom_size(7)
        .inheritance_probability(0.6)
        .fixed()
    )
    assert isinstance(cfg, RKGAConfigData)
    assert cfg.n_elite == 0
    assert cfg.n_mutants == 0


def test_rkga_missing_field():
    with pytest.raises(MissingConfigError):
        RKGAConfig().pop_size(10).fixed()


def test_brkga_defaults():
    cfg = BRKGAConfig.default(chrom_size=12, pop_size=50)
    assert isinstance(cfg, BRKGAConfigData)
    assert (cfg.n_mutants, cfg.n_elite) == (5, 10)
    assert cfg.inheritance_probability == 0.7


def test_brkga_requires_elite():
    builder = RKGAConfig()
    assert not hasattr(builder, "n_elite")
    with pytest.raises(MissingConfigError):
        BRKGAConfig().pop_size(10).n_mutants(1).n_generations(1).chrom_size(3).inheritance_probability(0.5).fixed()


def test_from_dict_rejects_unknown_fields():
    with pytest.raises(ConfigurationError):
        RKGAConfig.from_dict({"pop_size": 10, "n_elite": 2})
    cfg = BRKGAConfig.from_dict(
        {
            "pop_size": 10,
            "n_mutants": 2,
            "n_elite": 2,
            "n_generations": 3,
            "chrom_size": 4,
            "inheritance_probability": 0.7,
        }
    )
    assert cfg.n_elite == 2


def test_sizes_relationship_is_not_checked_by_builder():
    cfg = BRKGAConfig().pop_size(5).n_mutants(5).n_elite(1).n_generations(1).chrom_size(2).inheritance_probability(0.5).fixed()
    assert cfg.pop_size == 5


def test_config_data_is_frozen():
    cfg = LocalSearchConfig.default()
    with pytest.raises(AttributeError):
        cfg.max_iterations = 3
