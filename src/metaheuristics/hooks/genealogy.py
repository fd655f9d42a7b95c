"""Genealogy of genetic individuals.

When enabled, every individual a genetic algorithm places in a population slot
gets an id and a record naming how it was produced (``initial``, ``elite``,
``mutant`` or ``crossover``) and the ids of the individuals it came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, Sequence

IndividualID = int


@dataclass
class GenealogyRecord:
    individual_id: IndividualID
    generation: int
    origin: str
    parents: tuple[IndividualID, ...] = ()
    fitness: float | None = None
    is_final_best: bool = False


class GenealogyTracker(Protocol):
    def record(
        self,
        generation: int,
        origin: str,
        parents: Sequence[IndividualID] = (),
        fitness: float | None = None,
    ) -> IndividualID:
        ...

    def mark_final_best(self, individual_id: IndividualID) -> None:
        ...


@dataclass
class DefaultGenealogyTracker:
    """Keeps every record in memory, keyed by individual id."""

    records: Dict[IndividualID, GenealogyRecord] = field(default_factory=dict)

    def record(
        self,
        generation: int,
        origin: str,
        parents: Sequence[IndividualID] = (),
        fitness: float | None = None,
    ) -> IndividualID:
        new_id = len(self.records)
        self.records[new_id] = GenealogyRecord(
            individual_id=new_id,
            generation=generation,
            origin=origin,
            parents=tuple(int(p) for p in parents),
            fitness=None if fitness is None else float(fitness),
        )
        return new_id

    def mark_final_best(self, individual_id: IndividualID) -> None:
        if individual_id in self.records:
            self.records[individual_id].is_final_best = True

    def generation(self, generation: int) -> List[GenealogyRecord]:
        return [rec for rec in self.records.values() if rec.generation == generation]

    def origin_counts(self, generation: int) -> Dict[str, int]:
        """Number of individuals of ``generation`` produced by each origin."""
        counts: Dict[str, int] = {}
        for rec in self.generation(generation):
            counts[rec.origin] = counts.get(rec.origin, 0) + 1
        return counts

    def final_best(self) -> List[GenealogyRecord]:
        return [rec for rec in self.records.values() if rec.is_final_best]

    def lineage(self, individual_id: IndividualID) -> List[GenealogyRecord]:
        """Records of ``individual_id`` and all of its ancestors, depth first."""
        out: List[GenealogyRecord] = []
        pending = [individual_id]
        seen: set[IndividualID] = set()
        while pending:
            current = pending.pop()
            if current in seen or current not in self.records:
                continue
            seen.add(current)
            rec = self.records[current]
            out.append(rec)
            pending.extend(rec.parents)
        return out


class NoOpGenealogyTracker:
    """Tracker used when genealogy is disabled; hands out id -1."""

    def record(
        self,
        generation: int,
        origin: str,
        parents: Sequence[IndividualID] = (),
        fitness: float | None = None,
    ) -> IndividualID:
        return -1

    def mark_final_best(self, individual_id: IndividualID) -> None:
        return None


__all__ = [
    "IndividualID",
    "GenealogyRecord",
    "GenealogyTracker",
    "DefaultGenealogyTracker",
    "NoOpGenealogyTracker",
]
