"""In-memory undirected graph store.

Each node key maps to an ordered list of outgoing Edge records. Every
logical edge is stored once under each endpoint, so neighbours can be
enumerated from either side without a reverse index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Tuple

from ..domain.models import Edge

logger = logging.getLogger(__name__)


@dataclass
class Graph:
    """Adjacency-list graph with bidirectional mutation operations.

    Nodes are created implicitly by ``add_edge`` and are never deleted;
    removing the last edge of a node leaves it with an empty list.

    Parallel edges are allowed. ``update_edge_weight`` only touches the
    first matching record on each side, so duplicates between the same
    pair of nodes may end up with different weights.
    """

    _adjacency: Dict[int, List[Edge]] = field(default_factory=dict, repr=False)

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """Add an undirected edge, creating either endpoint if needed."""
        edge = Edge(source, destination, weight)
        self._adjacency.setdefault(source, []).append(edge)
        self._adjacency.setdefault(destination, []).append(edge.mirror())
        logger.debug(
            "Edge added",
            extra={"source": source, "destination": destination, "weight": weight},
        )

    def remove_edge(self, source: int, destination: int) -> None:
        """Remove every edge between ``source`` and ``destination``.

        Missing nodes or edges are ignored.
        """
        removed = 0
        for u, v in ((source, destination), (destination, source)):
            edges = self._adjacency.get(u)
            if edges is None:
                continue
            kept = [edge for edge in edges if edge.destination != v]
            removed += len(edges) - len(kept)
            edges[:] = kept

        logger.debug(
            "Edge removed",
            extra={"source": source, "destination": destination, "records": removed},
        )

    def update_edge_weight(self, source: int, destination: int, weight: int) -> None:
        """Set the weight of the first matching edge on each side.

        Missing nodes or edges are ignored.
        """
        for u, v in ((source, destination), (destination, source)):
            edges = self._adjacency.get(u)
            if edges is None:
                continue
            for index, edge in enumerate(edges):
                if edge.destination == v:
                    edges[index] = replace(edge, weight=weight)
                    break

        logger.debug(
            "Edge weight updated",
            extra={"source": source, "destination": destination, "weight": weight},
        )

    def nodes(self) -> Tuple[int, ...]:
        """Return all node keys in insertion order."""
        return tuple(self._adjacency)

    def outgoing(self, node: int) -> Tuple[Edge, ...]:
        """Outgoing edges of ``node``; empty for an unknown node.

        Returns a copy, so callers cannot corrupt the store.
        """
        return tuple(self._adjacency.get(node, ()))

    def edges(self) -> Iterator[Edge]:
        """Yield every stored edge record in graph iteration order."""
        for edges in self._adjacency.values():
            yield from edges

    def has_edge(self, source: int, destination: int) -> bool:
        return any(
            edge.destination == destination
            for edge in self._adjacency.get(source, ())
        )

    @property
    def edge_count(self) -> int:
        """Number of stored edge records (twice the undirected count)."""
        return sum(len(edges) for edges in self._adjacency.values())

    def clear(self) -> None:
        self._adjacency.clear()

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[int]:
        return iter(self._adjacency)
