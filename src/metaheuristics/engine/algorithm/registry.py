"""
Algorithm registry.

Maps algorithm names to builder callables so drivers can pick an algorithm
from a string. Builders accept ``(config, engine)`` where ``config`` is either
the algorithm's ``*ConfigData`` or a plain mapping accepted by its builder's
``from_dict``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from metaheuristics.engine.algorithm.base import Metaheuristic
from metaheuristics.engine.algorithm.config import (
    BRKGAConfig,
    GRASPConfig,
    LocalSearchConfig,
    RKGAConfig,
)
from metaheuristics.engine.algorithm.genetic import BRKGA, RKGA
from metaheuristics.engine.algorithm.grasp import GRASP
from metaheuristics.engine.algorithm.local_search import LocalSearch
from metaheuristics.foundation.exceptions import InvalidAlgorithmError, MissingConfigError
from metaheuristics.foundation.registry import Registry
from metaheuristics.foundation.rng.engine import RandomEngine

AlgorithmBuilder = Callable[[Any, "RandomEngine | None"], Metaheuristic]

ALGORITHMS: Registry[AlgorithmBuilder] = Registry("Algorithms")


def _as_config(config: Any, builder: Any, default: Callable[[], Any] | None = None) -> Any:
    if config is None:
        if default is None:
            raise MissingConfigError("config", builder.__name__)
        return default()
    if isinstance(config, Mapping):
        return builder.from_dict(dict(config))
    return config


@ALGORITHMS.register("local_search")
def _build_local_search(config: Any, engine: RandomEngine | None = None) -> Metaheuristic:
    return LocalSearch(_as_config(config, LocalSearchConfig, LocalSearchConfig.default), engine=engine)


@ALGORITHMS.register("grasp")
def _build_grasp(config: Any, engine: RandomEngine | None = None) -> Metaheuristic:
    return GRASP(_as_config(config, GRASPConfig, GRASPConfig.default), engine=engine)


@ALGORITHMS.register("rkga")
def _build_rkga(config: Any, engine: RandomEngine | None = None) -> Metaheuristic:
    return RKGA(_as_config(config, RKGAConfig), engine=engine)


@ALGORITHMS.register("brkga")
def _build_brkga(config: Any, engine: RandomEngine | None = None) -> Metaheuristic:
    return BRKGA(_as_config(config, BRKGAConfig), engine=engine)


def resolve_algorithm(name: str) -> AlgorithmBuilder:
    """Builder registered under ``name`` (case-insensitive)."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise InvalidAlgorithmError(name, ALGORITHMS.names(), ALGORITHMS.suggest(name)) from None


def build_algorithm(name: str, config: Any = None, engine: RandomEngine | None = None) -> Metaheuristic:
    return resolve_algorithm(name)(config, engine)


__all__ = ["ALGORITHMS", "AlgorithmBuilder", "resolve_algorithm", "build_algorithm"]
