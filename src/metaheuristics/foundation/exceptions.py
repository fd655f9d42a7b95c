"""
Metaheuristics exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All package-specific exceptions inherit from MetaheuristicsError for easy catching.

Example:
    try:
        algorithm = resolve_algorithm("tabu")
    except MetaheuristicsError as e:
        print(f"Setup failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MetaheuristicsError(Exception):
    """
    Base exception for all metaheuristics errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MetaheuristicsError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidAlgorithmError(ConfigurationError):
    """Raised when an unknown algorithm is specified."""

    def __init__(self, algorithm: str, available: list[str] | None = None, close: list[str] | None = None) -> None:
        available = available or ["local_search", "grasp", "rkga", "brkga"]
        message = f"Unknown algorithm '{algorithm}'."
        if close:
            suggestion = "Did you mean " + " or ".join(f"'{name}'" for name in close) + "?"
        else:
            suggestion = f"Available algorithms: {', '.join(available)}"
        super().__init__(message, suggestion, {"algorithm": algorithm, "available": available})


class InvalidPopulationSizesError(ConfigurationError):
    """Raised when population, mutant and elite sizes leave no room for crossover."""

    def __init__(self, pop_size: int, n_mutants: int, n_elite: int = 0) -> None:
        occupied = n_mutants + n_elite
        if occupied < pop_size < 2:
            message = f"Sizes chosen will lead to errors: crossover needs two distinct parents, pop_size is {pop_size}."
        elif n_elite:
            message = (
                "Sizes chosen will lead to errors: "
                f"n_mutants + n_elite >= pop_size ({n_mutants} + {n_elite} = {occupied} >= {pop_size})."
            )
        else:
            message = f"Sizes chosen will lead to errors: n_mutants >= pop_size ({n_mutants} >= {pop_size})."
        suggestion = "Leave at least one crossover slot: increase pop_size or reduce n_mutants/n_elite"
        super().__init__(
            message,
            suggestion,
            {"pop_size": pop_size, "n_mutants": n_mutants, "n_elite": n_elite},
        )


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(MetaheuristicsError):
    """Base class for problem-related errors."""

    pass


class InfeasibleError(ProblemError):
    """
    Raised by a problem when no feasible solution corresponds to a chromosome
    or to a construction attempt.

    This is an expected, recoverable condition: genetic algorithms turn it into
    a ``-inf`` fitness and GRASP counts the iteration as failed.
    """

    def __init__(self, message: str = "Infeasible solution.", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, None, details)


# =============================================================================
# Random Generator Errors
# =============================================================================


class GeneratorError(MetaheuristicsError):
    """Base class for random generator errors."""

    pass


class GeneratorNotInitializedError(GeneratorError):
    """Raised when drawing from a distribution that was never initialised."""

    def __init__(self, distribution: str, generator: str) -> None:
        message = f"{generator}: the {distribution} distribution has not been initialised."
        suggestion = f"Call init_{distribution}(...) before drawing numbers"
        super().__init__(message, suggestion, {"distribution": distribution, "generator": generator})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "MetaheuristicsError",
    # Configuration
    "ConfigurationError",
    "InvalidAlgorithmError",
    "InvalidPopulationSizesError",
    "MissingConfigError",
    # Problem
    "ProblemError",
    "InfeasibleError",
    # Random generators
    "GeneratorError",
    "GeneratorNotInitializedError",
]
