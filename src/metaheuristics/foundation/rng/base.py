"""
Abstract pseudo-random number generator.

Initialise whatever distribution is needed before drawing:

- ``init_uniform(a, b)`` for numbers following U[a, b].
- ``init_binomial(n, p)`` for numbers following B(n, p).

Re-initialising a distribution only stores its parameters; the state of the
underlying engine is never touched, so the stream of draws continues where it
was.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from typing import Generic, TypeVar

import numpy as np

from metaheuristics.foundation.exceptions import ConfigurationError, GeneratorNotInitializedError
from metaheuristics.foundation.rng.engine import RandomEngine

T = TypeVar("T", int, float)


class RandomGenerator(ABC, Generic[T]):
    """Interface shared by the discrete and the continuous generators."""

    def __init__(self, engine: RandomEngine | None = None) -> None:
        self.engine = engine if engine is not None else RandomEngine()
        self._uniform: tuple[T, T] | None = None
        self._binomial: tuple[int, float] | None = None

    # ------------------------------------------------------------------
    # Engine
    # ------------------------------------------------------------------

    def seed(self, entropy: int | None = None) -> None:
        """Reseed the shared engine (OS entropy when ``entropy`` is None)."""
        self.engine.seed(entropy)

    @property
    def _gen(self) -> np.random.Generator:
        return self.engine.generator

    # ------------------------------------------------------------------
    # Distributions
    # ------------------------------------------------------------------

    def init_uniform(self, a: T, b: T) -> None:
        if a > b:
            raise ConfigurationError(
                f"Invalid uniform range [{a}, {b}]: lower bound exceeds upper bound.",
                suggestion="Pass bounds with a <= b",
            )
        self._uniform = (a, b)

    def init_binomial(self, n: int, p: float) -> None:
        if int(n) < 0:
            raise ConfigurationError(f"Invalid binomial trials n={n}; expected n >= 0.")
        if not 0.0 <= float(p) <= 1.0:
            raise ConfigurationError(f"Invalid binomial probability p={p}; expected 0 <= p <= 1.")
        self._binomial = (int(n), float(p))

    def _uniform_params(self) -> tuple[T, T]:
        if self._uniform is None:
            raise GeneratorNotInitializedError("uniform", type(self).__name__)
        return self._uniform

    def _binomial_params(self) -> tuple[int, float]:
        if self._binomial is None:
            raise GeneratorNotInitializedError("binomial", type(self).__name__)
        return self._binomial

    @abstractmethod
    def uniform_array(self, size: int) -> np.ndarray:
        """Draw ``size`` independent values from the uniform distribution."""

    @abstractmethod
    def get_uniform(self) -> T:
        """Draw one value from the uniform distribution."""

    @abstractmethod
    def get_binomial(self) -> T:
        """Draw one value from the binomial distribution."""

    def fill_uniform(self, buffer: np.ndarray | MutableSequence) -> None:
        """Overwrite every position of ``buffer`` with a uniform draw."""
        values = self.uniform_array(len(buffer))
        if isinstance(buffer, np.ndarray):
            buffer[...] = values
        else:
            buffer[:] = values.tolist()


__all__ = ["RandomGenerator"]
