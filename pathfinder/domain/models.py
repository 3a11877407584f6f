"""Immutable domain models for pathfinder.

All models are frozen dataclasses with slots. They have no external
dependencies and hold no reference back into the graph store, so a
DistanceResult stays valid after the graph is mutated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple, Union

Distance = Union[int, float]

INFINITY: float = math.inf


@dataclass(frozen=True, slots=True)
class Edge:
    """One direction of an undirected connection.

    Every logical edge is stored twice, once under each endpoint.

    Attributes:
        source: Node the edge leaves from
        destination: Node the edge points to
        weight: Integer edge weight, may be negative
    """

    source: int
    destination: int
    weight: int

    def mirror(self) -> Edge:
        """Return the record stored under the other endpoint."""
        return Edge(self.destination, self.source, self.weight)


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """Output of one shortest-path engine run.

    Attributes:
        start: Node the engine was run from
        distances: Node -> shortest distance, ``INFINITY`` when unreached
        predecessors: Node -> previous node on the shortest path, ``None``
            for the start node and for unreached nodes
    """

    start: int
    distances: Dict[int, Distance] = field(default_factory=dict)
    predecessors: Dict[int, Optional[int]] = field(default_factory=dict)

    def distance(self, node: int) -> Distance:
        """Distance to ``node``, ``INFINITY`` if unknown or unreached."""
        return self.distances.get(node, INFINITY)

    def predecessor(self, node: int) -> Optional[int]:
        return self.predecessors.get(node)

    def is_reachable(self, node: int) -> bool:
        return not math.isinf(self.distance(node))

    def reachable_nodes(self) -> Tuple[int, ...]:
        """Nodes with a finite distance, in result order."""
        return tuple(n for n, d in self.distances.items() if not math.isinf(d))

    def path_to(self, node: int) -> Tuple[int, ...]:
        """Walk predecessors back from ``node`` to the start.

        Returns:
            The node sequence from start to ``node`` (inclusive), or an
            empty tuple when ``node`` is unreached.
        """
        if not self.is_reachable(node):
            return ()

        path = [node]
        seen = {node}
        current = node
        while current != self.start:
            parent = self.predecessors.get(current)
            if parent is None or parent in seen:
                return ()
            path.append(parent)
            seen.add(parent)
            current = parent

        path.reverse()
        return tuple(path)

    def __contains__(self, node: object) -> bool:
        return node in self.distances

    def __len__(self) -> int:
        return len(self.distances)

    def __iter__(self) -> Iterator[int]:
        return iter(self.distances)


@dataclass(frozen=True, slots=True)
class SkippedLine:
    """An edge-list line that could not be parsed.

    Attributes:
        line_number: 1-based line number in the input file
        text: The raw line without its trailing newline
        reason: Why the line was skipped
    """

    line_number: int
    text: str
    reason: str


@dataclass(frozen=True, slots=True)
class LoadReport:
    """Summary of loading one edge-list file.

    Attributes:
        path: File that was requested
        found: Whether the file existed
        edges_added: Number of undirected edges added to the graph
        skipped_lines: Lines that were reported and ignored
    """

    path: str
    found: bool = True
    edges_added: int = 0
    skipped_lines: Tuple[SkippedLine, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if the load added nothing to the graph."""
        return self.edges_added == 0

    @property
    def num_skipped(self) -> int:
        return len(self.skipped_lines)
