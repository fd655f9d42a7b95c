"""Genetic algorithm framework and its RKGA/BRKGA bindings."""

from .brkga import BRKGA
from .framework import GeneticAlgorithm
from .rkga import RKGA
from .selection import EliteBiasedParentSelection, ParentSelection, UniformParentSelection
from .state import GeneticState, SlotOrigin

__all__ = [
    "GeneticAlgorithm",
    "RKGA",
    "BRKGA",
    "ParentSelection",
    "UniformParentSelection",
    "EliteBiasedParentSelection",
    "GeneticState",
    "SlotOrigin",
]
