"""
Chromosome: a fixed number of genes, each a floating point value in [0, 1].
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np


class Chromosome:
    """Fixed-length sequence of real-valued genes.

    The storage is allocated once, at construction, and is only ever
    overwritten in place (by mutation, crossover or :meth:`assign`).
    """

    __slots__ = ("_genes",)

    def __init__(self, size: int) -> None:
        size = int(size)
        if size <= 0:
            raise ValueError(f"Chromosome size must be positive, got {size}.")
        self._genes = np.zeros(size, dtype=float)

    @classmethod
    def from_genes(cls, genes: Iterable[float]) -> "Chromosome":
        values = np.asarray(list(genes) if not isinstance(genes, np.ndarray) else genes, dtype=float)
        chrom = cls(values.size)
        chrom._genes[:] = values.ravel()
        return chrom

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def genes(self) -> np.ndarray:
        """Read-only view of the genes."""
        view = self._genes.view()
        view.flags.writeable = False
        return view

    @property
    def buffer(self) -> np.ndarray:
        """Writable storage, for operators that fill genes in place."""
        return self._genes

    def size(self) -> int:
        return self._genes.size

    def __len__(self) -> int:
        return self._genes.size

    def __getitem__(self, i: int) -> float:
        return float(self._genes[i])

    def __setitem__(self, i: int, value: float) -> None:
        self._genes[i] = value

    def __iter__(self) -> Iterator[float]:
        return (float(g) for g in self._genes)

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def assign(self, other: "Chromosome") -> None:
        """Copy ``other``'s genes into this chromosome, in place."""
        if other.size() != self.size():
            raise ValueError(f"Cannot assign a chromosome of size {other.size()} to one of size {self.size()}.")
        np.copyto(self._genes, other._genes)

    def fill(self, values: Iterable[float]) -> None:
        arr = np.asarray(values if isinstance(values, np.ndarray) else list(values), dtype=float)
        if arr.size != self.size():
            raise ValueError(f"Expected {self.size()} genes, got {arr.size}.")
        self._genes[:] = arr.ravel()

    def copy(self) -> "Chromosome":
        return Chromosome.from_genes(self._genes)

    def __str__(self) -> str:
        return "{" + " ".join(f"{g:g}" for g in self._genes) + "}"

    def __repr__(self) -> str:
        return f"Chromosome({self})"


__all__ = ["Chromosome"]
