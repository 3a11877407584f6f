"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph store and the adapters
that load it, export it and compute shortest paths over it. They
enable dependency injection and make the system testable.
"""

from .graph import (
    EdgeListRepositoryPort,
    NegativeCycleAwareEnginePort,
    PathLike,
    ShortestPathEnginePort,
)

__all__ = [
    "PathLike",
    "EdgeListRepositoryPort",
    "ShortestPathEnginePort",
    "NegativeCycleAwareEnginePort",
]
