"""
Declarative configuration for the metaheuristics.

Each algorithm has a fluent builder (``LocalSearchConfig``, ``GRASPConfig``,
``RKGAConfig``, ``BRKGAConfig``) that yields an immutable ``*ConfigData`` via
``fixed()``. Builders validate individual values; relationships between
population sizes are checked when an algorithm is executed.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from metaheuristics.foundation.exceptions import ConfigurationError, MissingConfigError
from metaheuristics.foundation.problem.types import LocalSearchPolicy


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, LocalSearchPolicy):
                data[key] = value.value
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


@dataclass(frozen=True)
class LocalSearchConfigData(_SerializableConfig):
    max_iterations: Optional[int] = None
    policy: LocalSearchPolicy = LocalSearchPolicy.BEST_IMPROVEMENT
    check_sanity: bool = False


@dataclass(frozen=True)
class GRASPConfigData(_SerializableConfig):
    max_iterations: int
    local_iterations: Optional[int]
    alpha: float
    policy: LocalSearchPolicy = LocalSearchPolicy.BEST_IMPROVEMENT
    check_sanity: bool = False


@dataclass(frozen=True)
class RKGAConfigData(_SerializableConfig):
    pop_size: int
    n_mutants: int
    n_generations: int
    chrom_size: int
    inheritance_probability: float
    track_genealogy: bool = False
    check_sanity: bool = False

    @property
    def n_elite(self) -> int:
        return 0


@dataclass(frozen=True)
class BRKGAConfigData(RKGAConfigData):
    n_elite: int = 1


def _require_fields(cfg: Dict[str, Any], fields: Tuple[str, ...], name: str) -> None:
    missing = [field for field in fields if field not in cfg]
    if missing:
        raise MissingConfigError(missing[0], config_class=name)


def _positive_int(value: Any, field: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"'{field}' must be an integer, got {value!r}.") from exc
    if number <= 0 or number != value:
        raise ConfigurationError(f"'{field}' must be a positive integer, got {value!r}.")
    return number


def _non_negative_int(value: Any, field: str) -> int:
    if value == 0:
        return 0
    return _positive_int(value, field)


def _probability(value: Any, field: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"'{field}' must be a number, got {value!r}.") from exc
    if not 0.0 <= number <= 1.0:
        raise ConfigurationError(
            f"'{field}' must lie in [0, 1], got {value!r}.",
            suggestion=f"Pick {field} between 0.0 and 1.0",
        )
    return number


def _iterations(value: Any, field: str) -> Optional[int]:
    """Iteration budget, or None for an unbounded one."""
    if value is None:
        return None
    return _non_negative_int(value, field)


def _policy(value: Any) -> LocalSearchPolicy:
    try:
        return LocalSearchPolicy.parse(value)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


# =============================================================================
# Local search
# =============================================================================


class LocalSearchConfig:
    """
    Fluent builder for local search.

    Examples:
        cfg = LocalSearchConfig().max_iterations(100).policy("first").fixed()
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls) -> LocalSearchConfigData:
        return cls().fixed()

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> LocalSearchConfigData:
        builder = cls()
        if "max_iterations" in config:
            builder.max_iterations(config["max_iterations"])
        if "policy" in config:
            builder.policy(config["policy"])
        if "check_sanity" in config:
            builder.check_sanity(config["check_sanity"])
        return builder.fixed()

    def max_iterations(self, value: Optional[int]) -> "LocalSearchConfig":
        self._cfg["max_iterations"] = _iterations(value, "max_iterations")
        return self

    def policy(self, value: LocalSearchPolicy | str) -> "LocalSearchConfig":
        self._cfg["policy"] = _policy(value)
        return self

    def check_sanity(self, value: bool = True) -> "LocalSearchConfig":
        self._cfg["check_sanity"] = bool(value)
        return self

    def fixed(self) -> LocalSearchConfigData:
        return LocalSearchConfigData(**self._cfg)


# =============================================================================
# GRASP
# =============================================================================


class GRASPConfig:
    """
    Fluent builder for GRASP.

    Examples:
        cfg = GRASPConfig().max_iterations(50).local_iterations(100).alpha(0.3).fixed()
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls, max_iterations: int = 100, alpha: float = 0.3) -> GRASPConfigData:
        return (
            cls()
            .max_iterations(max_iterations)
            .local_iterations(None)
            .alpha(alpha)
            .policy(LocalSearchPolicy.BEST_IMPROVEMENT)
            .fixed()
        )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> GRASPConfigData:
        builder = cls()
        if "max_iterations" in config:
            builder.max_iterations(config["max_iterations"])
        if "local_iterations" in config:
            builder.local_iterations(config["local_iterations"])
        if "alpha" in config:
            builder.alpha(config["alpha"])
        if "policy" in config:
            builder.policy(config["policy"])
        if "check_sanity" in config:
            builder.check_sanity(config["check_sanity"])
        return builder.fixed()

    def max_iterations(self, value: int) -> "GRASPConfig":
        self._cfg["max_iterations"] = _positive_int(value, "max_iterations")
        return self

    def local_iterations(self, value: Optional[int]) -> "GRASPConfig":
        self._cfg["local_iterations"] = _iterations(value, "local_iterations")
        return self

    def alpha(self, value: float) -> "GRASPConfig":
        self._cfg["alpha"] = _probability(value, "alpha")
        return self

    def policy(self, value: LocalSearchPolicy | str) -> "GRASPConfig":
        self._cfg["policy"] = _policy(value)
        return self

    def check_sanity(self, value: bool = True) -> "GRASPConfig":
        self._cfg["check_sanity"] = bool(value)
        return self

    def fixed(self) -> GRASPConfigData:
        cfg = dict(self._cfg)
        cfg.setdefault("local_iterations", None)
        _require_fields(cfg, ("max_iterations", "alpha"), "GRASPConfig")
        return GRASPConfigData(**cfg)


# =============================================================================
# Random-key genetic algorithms
# =============================================================================


class RKGAConfig:
    """
    Fluent builder for the random-key genetic algorithm.

    Examples:
        cfg = (
            RKGAConfig()
            .pop_size(100)
            .n_mutants(15)
            .n_generations(200)
            .chrom_size(30)
            .inheritance_probability(0.7)
            .fixed()
        )
    """

    _name = "RKGAConfig"
    _required: Tuple[str, ...] = ("pop_size", "n_mutants", "n_generations", "chrom_size", "inheritance_probability")

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls, chrom_size: int, pop_size: int = 100, n_generations: int = 100):
        return (
            cls()
            .pop_size(pop_size)
            .n_mutants(max(1, pop_size // 10))
            .n_generations(n_generations)
            .chrom_size(chrom_size)
            .inheritance_probability(0.7)
            .fixed()
        )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]):
        builder = cls()
        for key, value in config.items():
            setter = getattr(builder, key, None)
            if key.startswith("_") or setter is None or not callable(setter) or key in {"fixed", "default", "from_dict"}:
                raise ConfigurationError(f"Unknown {cls._name} field '{key}'.")
            setter(value)
        return builder.fixed()

    def pop_size(self, value: int):
        self._cfg["pop_size"] = _positive_int(value, "pop_size")
        return self

    def n_mutants(self, value: int):
        self._cfg["n_mutants"] = _non_negative_int(value, "n_mutants")
        return self

    def n_generations(self, value: int):
        self._cfg["n_generations"] = _non_negative_int(value, "n_generations")
        return self

    def chrom_size(self, value: int):
        self._cfg["chrom_size"] = _positive_int(value, "chrom_size")
        return self

    def inheritance_probability(self, value: float):
        self._cfg["inheritance_probability"] = _probability(value, "inheritance_probability")
        return self

    def track_genealogy(self, value: bool = True):
        self._cfg["track_genealogy"] = bool(value)
        return self

    def check_sanity(self, value: bool = True):
        self._cfg["check_sanity"] = bool(value)
        return self

    def fixed(self) -> RKGAConfigData:
        _require_fields(self._cfg, self._required, self._name)
        return RKGAConfigData(**self._cfg)


class BRKGAConfig(RKGAConfig):
    """
    Fluent builder for the biased random-key genetic algorithm.

    Examples:
        cfg = (
            BRKGAConfig()
            .pop_size(100)
            .n_mutants(15)
            .n_elite(20)
            .n_generations(200)
            .chrom_size(30)
            .inheritance_probability(0.7)
            .fixed()
        )
    """

    _name = "BRKGAConfig"
    _required = RKGAConfig._required + ("n_elite",)

    @classmethod
    def default(cls, chrom_size: int, pop_size: int = 100, n_generations: int = 100):
        return (
            cls()
            .pop_size(pop_size)
            .n_mutants(max(1, pop_size // 10))
            .n_elite(max(1, pop_size // 5))
            .n_generations(n_generations)
            .chrom_size(chrom_size)
            .inheritance_probability(0.7)
            .fixed()
        )

    def n_elite(self, value: int) -> "BRKGAConfig":
        self._cfg["n_elite"] = _positive_int(value, "n_elite")
        return self

    def fixed(self) -> BRKGAConfigData:
        _require_fields(self._cfg, self._required, self._name)
        return BRKGAConfigData(**self._cfg)


__all__ = [
    "LocalSearchConfig",
    "LocalSearchConfigData",
    "GRASPConfig",
    "GRASPConfigData",
    "RKGAConfig",
    "RKGAConfigData",
    "BRKGAConfig",
    "BRKGAConfigData",
]
