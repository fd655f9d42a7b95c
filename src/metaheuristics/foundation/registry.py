"""
Name -> component registry (algorithm builders, problem factories).
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Case-insensitive mapping from names to components.

    ``register`` works as a plain call or as a decorator:

        ALGORITHMS = Registry("Algorithms")

        @ALGORITHMS.register("grasp")
        def _build_grasp(config, engine): ...
    """

    def __init__(self, name: str = "Registry") -> None:
        self._name = name
        self._items: dict[str, T] = {}

    @property
    def name(self) -> str:
        return self._name

    @staticmethod
    def _key(key: str) -> str:
        return key.strip().lower()

    def register(self, key: str, item: T | None = None, *, override: bool = False):
        """Register ``item`` under ``key``; without ``item`` return a decorator."""

        def _add(obj: T) -> T:
            normalized = self._key(key)
            if normalized in self._items and not override:
                raise ValueError(f"'{normalized}' is already registered in {self._name}.")
            self._items[normalized] = obj
            return obj

        return _add if item is None else _add(item)

    def get(self, key: str) -> T:
        """Return the component registered under ``key``; raise KeyError otherwise."""
        try:
            return self._items[self._key(key)]
        except KeyError:
            raise KeyError(f"'{key}' is not registered in {self._name}.") from None

    def suggest(self, key: str, n: int = 3) -> list[str]:
        """Registered names close to ``key``, best match first."""
        return get_close_matches(self._key(key), list(self._items), n=n, cutoff=0.6)

    def names(self) -> list[str]:
        return sorted(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._key(key) in self._items

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Registry"]
