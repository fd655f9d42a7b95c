from .engine.algorithm import (
    BRKGA,
    GRASP,
    RKGA,
    BRKGAConfig,
    GeneticAlgorithm,
    GRASPConfig,
    LocalSearch,
    LocalSearchConfig,
    Metaheuristic,
    RKGAConfig,
    RunResult,
    build_algorithm,
    resolve_algorithm,
)
from .execution import ExecutionResult, execute
from .foundation.exceptions import (
    ConfigurationError,
    InfeasibleError,
    InvalidAlgorithmError,
    InvalidPopulationSizesError,
    MetaheuristicsError,
)
from .foundation.genome import Chromosome, Individual, Population
from .foundation.logging import configure_metaheuristics_logging
from .foundation.problem import KnapsackProblem, LocalSearchPolicy, Problem
from .foundation.rng import ContinuousRandom, DiscreteRandom, RandomEngine
from .foundation.version import get_version

__all__ = [
    "Problem",
    "LocalSearchPolicy",
    "KnapsackProblem",
    "Chromosome",
    "Individual",
    "Population",
    "RandomEngine",
    "DiscreteRandom",
    "ContinuousRandom",
    "Metaheuristic",
    "RunResult",
    "LocalSearch",
    "LocalSearchConfig",
    "GRASP",
    "GRASPConfig",
    "GeneticAlgorithm",
    "RKGA",
    "RKGAConfig",
    "BRKGA",
    "BRKGAConfig",
    "build_algorithm",
    "resolve_algorithm",
    "execute",
    "ExecutionResult",
    "MetaheuristicsError",
    "ConfigurationError",
    "InvalidAlgorithmError",
    "InvalidPopulationSizesError",
    "InfeasibleError",
    "configure_metaheuristics_logging",
    "get_version",
]


def __getattr__(name: str):
    if name == "__version__":
        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
