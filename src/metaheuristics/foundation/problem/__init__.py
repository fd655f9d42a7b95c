"""Problem contract and the reference knapsack problem."""

from metaheuristics.foundation.problem.base import Problem
from metaheuristics.foundation.problem.knapsack import KnapsackProblem
from metaheuristics.foundation.problem.types import LocalSearchPolicy, ProblemProtocol

__all__ = ["Problem", "ProblemProtocol", "LocalSearchPolicy", "KnapsackProblem"]
