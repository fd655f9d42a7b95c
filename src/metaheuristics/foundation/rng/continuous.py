from __future__ import annotations

import numpy as np

from metaheuristics.foundation.rng.base import RandomGenerator


class ContinuousRandom(RandomGenerator[float]):
    """Continuous generator: uniform reals in [a, b).

    The binomial distribution is available for symmetry with
    :class:`DiscreteRandom`; its count is returned as a float.
    """

    def init_uniform(self, a: float, b: float) -> None:
        super().init_uniform(float(a), float(b))

    def get_uniform(self) -> float:
        a, b = self._uniform_params()
        return float(self._gen.uniform(a, b))

    def get_binomial(self) -> float:
        n, p = self._binomial_params()
        return float(self._gen.binomial(n, p))

    def uniform_array(self, size: int) -> np.ndarray:
        a, b = self._uniform_params()
        return self._gen.uniform(a, b, size=int(size))


__all__ = ["ContinuousRandom"]
