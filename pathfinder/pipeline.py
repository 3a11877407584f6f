"""High-level pipeline orchestration for pathfinder.

The pipeline is organized in several stages:

1. Graph loading (from an edge-list file into the graph store).
2. Optional export of the loaded graph.
3. Shortest-path computation with one or both engines.
4. Optional topology updates followed by a second computation.

This module wires these stages together and renders a text report.
Each step delegates work to the graph service.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Literal, Optional, Union

from .config import AppConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError
from .domain.models import DistanceResult
from .services import GraphService

ALGORITHMS = ("dijkstra", "bellman_ford", "both")


@dataclass(frozen=True)
class Mutation:
    """One topology update applied between the two engine runs."""

    kind: Literal["add", "remove", "update"]
    source: int
    destination: int
    weight: Optional[int] = None

    def apply(self, service: GraphService) -> None:
        if self.kind not in ("add", "remove", "update"):
            raise ConfigurationError(
                f"Unknown mutation: {self.kind!r}",
                setting_name="kind",
                expected_type="add | remove | update",
            )
        if self.kind == "remove":
            service.remove_edge(self.source, self.destination)
            return
        if self.weight is None:
            raise ConfigurationError(
                f"Mutation '{self.kind}' requires a weight",
                setting_name="weight",
                expected_type="int",
            )
        if self.kind == "add":
            service.add_edge(self.source, self.destination, self.weight)
        else:
            service.update_edge_weight(self.source, self.destination, self.weight)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)


def format_distances(result: DistanceResult) -> str:
    """Render one ``node: distance`` line per node, sorted by node."""
    lines = []
    for node in sorted(result.distances):
        distance = result.distances[node]
        shown = "inf" if math.isinf(distance) else str(distance)
        lines.append(f"  {node}: {shown}")
    return "\n".join(lines)


def _run_engines(service: GraphService, start: int, algorithm: str) -> List[str]:
    sections: List[str] = []

    if algorithm in ("dijkstra", "both"):
        result = service.run_dijkstra(start)
        sections.append(f"Dijkstra distances from node {start}:")
        sections.append(format_distances(result))

    if algorithm in ("bellman_ford", "both"):
        bf_result = service.run_bellman_ford_safe(start)
        if bf_result is None:
            sections.append("Bellman-Ford detected a negative weight cycle.")
        else:
            sections.append(f"Bellman-Ford distances from node {start}:")
            sections.append(format_distances(bf_result))

    return sections


def solve_from_file(
    input_path: Optional[Union[str, Path]] = None,
    *,
    start: Optional[int] = None,
    algorithm: Optional[str] = None,
    export_path: Optional[Union[str, Path]] = None,
    mutations: Iterable[Mutation] = (),
    service: Optional[GraphService] = None,
    config: Optional[AppConfig] = None,
) -> str:
    """Run the pipeline on an edge-list file and return a report.

    This helper is designed to be reused from other front-ends
    (CLI, tests, notebooks).

    Raises:
        ConfigurationError: If ``algorithm`` or a mutation is invalid.
        GraphError: If the input cannot be read or the export fails.
    """
    config = config or get_config()
    algorithm = algorithm or config.engine.default_algorithm
    if algorithm not in ALGORITHMS:
        raise ConfigurationError(
            f"Unknown algorithm: {algorithm!r}",
            setting_name="algorithm",
            expected_type=" | ".join(ALGORITHMS),
        )
    start = config.graph.start_node if start is None else start

    if service is None:
        service = Container.create_default(config).resolve(GraphService)

    sections: List[str] = []

    report = service.load(input_path)
    if report.found:
        sections.append(
            f"Loaded {report.edges_added} edges from {report.path} "
            f"({report.num_skipped} lines skipped)"
        )
    else:
        sections.append(f"File not found: {report.path}")

    if export_path is not None:
        written = service.export(export_path)
        sections.append(f"Graph exported to: {export_path} ({written} records)")

    sections.extend(_run_engines(service, start, algorithm))

    mutations = list(mutations)
    if mutations:
        for mutation in mutations:
            mutation.apply(service)
        sections.append("")
        sections.append(f"After {len(mutations)} updates:")
        sections.extend(_run_engines(service, start, algorithm))

    return "\n".join(sections)


def run_pipeline() -> None:
    """Run the pipeline on the configured input file and print it."""
    configure_logging()
    print(solve_from_file())


if __name__ == "__main__":
    run_pipeline()
