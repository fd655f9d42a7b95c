"""Optional observers attached to algorithm runs."""

from .genealogy import (
    DefaultGenealogyTracker,
    GenealogyRecord,
    GenealogyTracker,
    IndividualID,
    NoOpGenealogyTracker,
)

__all__ = [
    "IndividualID",
    "GenealogyRecord",
    "GenealogyTracker",
    "DefaultGenealogyTracker",
    "NoOpGenealogyTracker",
]
