"""Bellman-Ford shortest-path engine adapter.

Relaxes every stored edge record up to N-1 times, N being the number
of node keys in the graph, then makes one more pass. Any edge that
still relaxes on that pass lies on, or is reachable from, a
negative-weight cycle that the start node can reach.

Every undirected edge is stored in both directions with the same
weight, so a single reachable negative edge already forms a negative
2-cycle (u -> v -> u) and is always reported. On this representation
the engine is only useful for non-negative graphs, or as a detector
whose report is informative.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ...domain.errors import NegativeCycleError
from ...domain.models import Distance, DistanceResult, Edge
from ...graph.store import Graph


@dataclass
class BellmanFordEngine:
    """Shortest-path engine with negative-cycle detection.

    This adapter implements NegativeCycleAwareEnginePort.

    Complexity:
        O(V * E) over all stored edge records.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def shortest_paths(self, graph: Graph, start: int) -> DistanceResult:
        """Compute distances and predecessors from ``start``.

        Args:
            graph: The graph store to read. Weights may be negative.
            start: Start node key; need not exist in the graph.

        Returns:
            A fresh DistanceResult covering every node of the graph.

        Raises:
            NegativeCycleError: If a negative-weight cycle is reachable
                from ``start``.
        """
        result, cycle_edge = self._bellman_ford(graph, start)

        if cycle_edge is not None:
            self._logger.warning(
                "Negative weight cycle detected",
                extra={
                    "start": start,
                    "edge_source": cycle_edge.source,
                    "edge_destination": cycle_edge.destination,
                    "edge_weight": cycle_edge.weight,
                },
            )
            raise NegativeCycleError(
                f"Graph contains a negative weight cycle reachable from {start}",
                start_node=start,
                edge=cycle_edge,
            )

        self._logger.info(
            "Bellman-Ford finished",
            extra={"start": start, "nodes": len(result)},
        )
        return result

    def shortest_paths_safe(
        self, graph: Graph, start: int
    ) -> Optional[DistanceResult]:
        """Compute distances, returning None on a negative cycle.

        Like shortest_paths(), but reports the cycle through the return
        value instead of raising.
        """
        try:
            return self.shortest_paths(graph, start)
        except NegativeCycleError:
            return None

    def has_negative_cycle(self, graph: Graph, start: int) -> bool:
        """Check whether a negative cycle is reachable from ``start``."""
        _, cycle_edge = self._bellman_ford(graph, start)
        return cycle_edge is not None

    def _bellman_ford(
        self, graph: Graph, start: int
    ) -> Tuple[DistanceResult, Optional[Edge]]:
        """Core relaxation loop.

        Returns the computed result and the first edge that still
        relaxed on the detection pass, or None when there is no cycle.
        """
        self._logger.debug(
            "Running Bellman-Ford",
            extra={"start": start, "nodes": len(graph)},
        )

        distances: Dict[int, Distance] = {node: math.inf for node in graph}
        previous: Dict[int, Optional[int]] = {node: None for node in graph}
        distances[start] = 0
        previous[start] = None

        node_count = len(graph)

        for _ in range(node_count - 1):
            updated = False
            for edge in graph.edges():
                d_u = distances[edge.source]
                if math.isinf(d_u):
                    continue
                alt = d_u + edge.weight
                if alt < distances.get(edge.destination, math.inf):
                    distances[edge.destination] = alt
                    previous[edge.destination] = edge.source
                    updated = True
            # A pass without updates means later passes change nothing
            if not updated:
                break

        cycle_edge: Optional[Edge] = None
        for edge in graph.edges():
            d_u = distances[edge.source]
            if math.isinf(d_u):
                continue
            if d_u + edge.weight < distances.get(edge.destination, math.inf):
                cycle_edge = edge
                break

        result = DistanceResult(start=start, distances=distances, predecessors=previous)
        return result, cycle_edge
