"""Graph ports - Abstractions for edge-list I/O and shortest paths.

These protocols define the contracts between the graph store and the
adapters that fill it from files or compute distances over it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import DistanceResult, LoadReport
    from ..graph.store import Graph

PathLike = Union[str, Path]


class EdgeListRepositoryPort(Protocol):
    """Port for reading and writing edge-list files.

    Implementation: adapters/graph/edge_list_repository.py
    """

    def load(self, graph: Graph, path: Optional[PathLike] = None) -> LoadReport:
        """Add every edge listed in a file to ``graph``.

        Args:
            graph: The graph store to extend.
            path: Edge-list file; the configured input file when omitted.

        Returns:
            LoadReport describing what was added and skipped.
        """
        ...

    def export(self, graph: Graph, path: Optional[PathLike] = None) -> int:
        """Write every stored edge record of ``graph`` to a file.

        Args:
            graph: The graph store to serialize.
            path: Output file; the configured output file when omitted.

        Returns:
            Number of edge records written.
        """
        ...


class ShortestPathEnginePort(Protocol):
    """Port for single-source shortest-path computation.

    Implementations:
    - adapters/graph/dijkstra_engine.py (DijkstraEngine)
    - adapters/graph/bellman_ford_engine.py (BellmanFordEngine)
    """

    def shortest_paths(self, graph: Graph, start: int) -> DistanceResult:
        """Compute distances and predecessors from ``start``.

        Args:
            graph: The graph store to read.
            start: Start node key; need not exist in the graph.

        Returns:
            A fresh DistanceResult covering every node of the graph.
        """
        ...


class NegativeCycleAwareEnginePort(ShortestPathEnginePort, Protocol):
    """Port for engines that detect negative-weight cycles.

    ``shortest_paths`` raises NegativeCycleError when a cycle is
    reachable from the start node.
    """

    def shortest_paths_safe(
        self, graph: Graph, start: int
    ) -> Optional[DistanceResult]:
        """Like shortest_paths(), but returns None on a negative cycle."""
        ...

    def has_negative_cycle(self, graph: Graph, start: int) -> bool:
        ...
