"""Random number generators sharing one seeded engine."""

from metaheuristics.foundation.rng.base import RandomGenerator
from metaheuristics.foundation.rng.continuous import ContinuousRandom
from metaheuristics.foundation.rng.discrete import DiscreteRandom
from metaheuristics.foundation.rng.engine import DEFAULT_SEED, RandomEngine

__all__ = [
    "DEFAULT_SEED",
    "RandomEngine",
    "RandomGenerator",
    "DiscreteRandom",
    "ContinuousRandom",
]
