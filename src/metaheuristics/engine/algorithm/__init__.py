from .base import Metaheuristic, RunResult
from .config import (
    BRKGAConfig,
    BRKGAConfigData,
    GRASPConfig,
    GRASPConfigData,
    LocalSearchConfig,
    LocalSearchConfigData,
    RKGAConfig,
    RKGAConfigData,
)
from .genetic import BRKGA, RKGA, GeneticAlgorithm
from .grasp import GRASP
from .local_search import LocalSearch
from .registry import ALGORITHMS, build_algorithm, resolve_algorithm

__all__ = [
    "Metaheuristic",
    "RunResult",
    "LocalSearch",
    "LocalSearchConfig",
    "LocalSearchConfigData",
    "GRASP",
    "GRASPConfig",
    "GRASPConfigData",
    "GeneticAlgorithm",
    "RKGA",
    "RKGAConfig",
    "RKGAConfigData",
    "BRKGA",
    "BRKGAConfig",
    "BRKGAConfigData",
    "ALGORITHMS",
    "build_algorithm",
    "resolve_algorithm",
]
