"""Graph service - Programmatic surface over the graph store.

Bundles the graph store with the edge-list repository and both
shortest-path engines, so callers load, mutate and query through one
object. Every engine call reads the current graph and returns a fresh
DistanceResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.models import DistanceResult, LoadReport
from ..graph.store import Graph
from ..ports.graph import (
    EdgeListRepositoryPort,
    NegativeCycleAwareEnginePort,
    PathLike,
    ShortestPathEnginePort,
)


@dataclass
class GraphService:
    """Main service for graph loading, mutation and shortest paths.

    Attributes:
        repository: Loads and exports edge-list files
        dijkstra: Engine for non-negative weights
        bellman_ford: Engine with negative-cycle detection
        graph: The graph store owned by this service
    """

    repository: EdgeListRepositoryPort
    dijkstra: ShortestPathEnginePort
    bellman_ford: NegativeCycleAwareEnginePort
    graph: Graph = field(default_factory=Graph)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, path: Optional[PathLike] = None) -> LoadReport:
        """Add the edges of an edge-list file to the graph.

        A missing file leaves the graph unchanged.
        """
        report = self.repository.load(self.graph, path)
        if not report.found:
            self._logger.warning("Nothing loaded", extra={"file_path": report.path})
        return report

    def export(self, path: Optional[PathLike] = None) -> int:
        """Write the graph to an edge-list file."""
        return self.repository.export(self.graph, path)

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        self.graph.add_edge(source, destination, weight)

    def remove_edge(self, source: int, destination: int) -> None:
        self.graph.remove_edge(source, destination)

    def update_edge_weight(self, source: int, destination: int, weight: int) -> None:
        self.graph.update_edge_weight(source, destination, weight)

    def run_dijkstra(self, start: int) -> DistanceResult:
        """Shortest paths from ``start`` assuming non-negative weights."""
        return self.dijkstra.shortest_paths(self.graph, start)

    def run_bellman_ford(self, start: int) -> DistanceResult:
        """Shortest paths from ``start`` for arbitrary weights.

        Raises:
            NegativeCycleError: If a negative cycle is reachable from
                ``start``.
        """
        return self.bellman_ford.shortest_paths(self.graph, start)

    def run_bellman_ford_safe(self, start: int) -> Optional[DistanceResult]:
        """Like run_bellman_ford(), but returns None on a negative cycle."""
        return self.bellman_ford.shortest_paths_safe(self.graph, start)
