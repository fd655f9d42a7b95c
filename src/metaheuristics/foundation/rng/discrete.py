from __future__ import annotations

import numpy as np

from metaheuristics.foundation.rng.base import RandomGenerator


class DiscreteRandom(RandomGenerator[int]):
    """Discrete generator: uniform integers in the closed range [a, b] and binomial counts."""

    def init_uniform(self, a: int, b: int) -> None:
        super().init_uniform(int(a), int(b))

    def get_uniform(self) -> int:
        a, b = self._uniform_params()
        return int(self._gen.integers(a, b, endpoint=True))

    def get_binomial(self) -> int:
        n, p = self._binomial_params()
        return int(self._gen.binomial(n, p))

    def uniform_array(self, size: int) -> np.ndarray:
        a, b = self._uniform_params()
        return self._gen.integers(a, b, size=int(size), endpoint=True)


__all__ = ["DiscreteRandom"]
