"""Dijkstra shortest-path engine adapter.

Computes single-source distances with a binary heap keyed by tentative
distance. ``heapq`` has no decrease-key, so a node may sit in the heap
several times; entries whose distance is worse than the best known
value are dropped when popped.

Weights must be non-negative. Negative weights are not detected and
give undefined results; each node is still expanded at most once, so a
run always terminates. Use BellmanFordEngine for those graphs.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ...domain.models import Distance, DistanceResult
from ...graph.store import Graph


@dataclass
class DijkstraEngine:
    """Shortest-path engine using Dijkstra's algorithm.

    This adapter implements ShortestPathEnginePort.

    Complexity:
        O(E log V) over the nodes reachable from the start.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def shortest_paths(self, graph: Graph, start: int) -> DistanceResult:
        """Compute distances and predecessors from ``start``.

        Args:
            graph: The graph store to read.
            start: Start node key. It is added to the result at
                distance 0 even when it has no adjacency list.

        Returns:
            A fresh DistanceResult covering every node of the graph.
        """
        self._logger.debug(
            "Running Dijkstra",
            extra={"start": start, "nodes": len(graph)},
        )

        distances: Dict[int, Distance] = {node: math.inf for node in graph}
        previous: Dict[int, Optional[int]] = {node: None for node in graph}
        distances[start] = 0
        previous[start] = None

        heap: List[Tuple[Distance, int]] = [(0, start)]
        visited: Set[int] = set()

        while heap:
            d_u, u = heapq.heappop(heap)

            # Skip outdated entries
            if u in visited or d_u > distances[u]:
                continue
            visited.add(u)

            for edge in graph.outgoing(u):
                alt = d_u + edge.weight
                if alt < distances.get(edge.destination, math.inf):
                    distances[edge.destination] = alt
                    previous[edge.destination] = u
                    heapq.heappush(heap, (alt, edge.destination))

        self._logger.info(
            "Dijkstra finished",
            extra={"start": start, "nodes": len(distances), "settled": len(visited)},
        )

        return DistanceResult(start=start, distances=distances, predecessors=previous)
