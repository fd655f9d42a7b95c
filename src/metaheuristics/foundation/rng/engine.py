"""
Shared pseudo-random engine.

Several generators (discrete, continuous) can draw from the same engine so a
single seed controls a whole algorithm run.
"""

from __future__ import annotations

import numpy as np

# Fixed seed used until seed() is called, so unseeded runs are reproducible.
DEFAULT_SEED = 5489


class RandomEngine:
    """Owns one ``numpy.random.Generator``.

    The engine starts from :data:`DEFAULT_SEED`. Calling :meth:`seed` without
    arguments reseeds it from OS entropy; passing an integer gives a
    reproducible stream.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed: int | None = DEFAULT_SEED if seed is None else int(seed)
        self._generator = np.random.default_rng(self._seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    @property
    def seed_value(self) -> int | None:
        """The integer seed in use, or ``None`` when seeded from OS entropy."""
        return self._seed

    def seed(self, entropy: int | None = None) -> None:
        self._seed = None if entropy is None else int(entropy)
        self._generator = np.random.default_rng(self._seed)

    def __repr__(self) -> str:
        source = "os-entropy" if self._seed is None else self._seed
        return f"RandomEngine(seed={source})"


__all__ = ["DEFAULT_SEED", "RandomEngine"]
