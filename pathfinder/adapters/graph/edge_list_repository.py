"""Edge-list repository adapter.

Reads undirected edge lists into a Graph and writes a Graph back out:
- Input: ``source destination`` per line, gzip-compressed when the
  file name ends in ``.gz``; every edge gets the configured weight
- Output: ``source destination weight`` per stored edge record
- Configuration injection (paths and default weight from config)
- Malformed lines and missing files are reported, not fatal
"""

from __future__ import annotations

import gzip
import logging
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, List, Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import LoadReport, SkippedLine
from ...graph.store import Graph
from ...ports.graph import PathLike


@dataclass
class EdgeListRepository:
    """Repository that loads and exports plain-text edge lists.

    This adapter implements EdgeListRepositoryPort.

    Attributes:
        config: Graph configuration (paths, default weight)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, graph: Graph, path: Optional[PathLike] = None) -> LoadReport:
        """Add every edge listed in a file to ``graph``.

        The whole file is parsed before the graph is touched, so a read
        failure leaves the graph unchanged.

        Args:
            graph: The graph store to extend.
            path: Edge-list file; ``config.input_path`` when omitted.

        Returns:
            LoadReport describing what was added and skipped. A missing
            file gives a report with ``found=False`` and no edges.

        Raises:
            GraphError: If the file exists but cannot be read or
                decompressed.
        """
        file_path = Path(path) if path is not None else self.config.input_path

        if not file_path.exists():
            self._logger.warning(
                "Edge list not found",
                extra={"file_path": str(file_path)},
            )
            return LoadReport(path=str(file_path), found=False)

        self._logger.debug("Loading edge list", extra={"file_path": str(file_path)})

        try:
            with self._open_for_read(file_path) as f:
                pairs, skipped = self._parse(f)
        except (OSError, EOFError, UnicodeDecodeError, zlib.error) as e:
            raise GraphError(
                f"Failed to load edge list: {file_path}",
                file_path=str(file_path),
                cause=e,
            ) from e

        weight = self.config.default_weight
        for source, destination in pairs:
            graph.add_edge(source, destination, weight)

        self._logger.info(
            "Edge list loaded",
            extra={
                "file_path": str(file_path),
                "edges": len(pairs),
                "skipped": len(skipped),
                "nodes": len(graph),
            },
        )

        return LoadReport(
            path=str(file_path),
            found=True,
            edges_added=len(pairs),
            skipped_lines=tuple(skipped),
        )

    def export(self, graph: Graph, path: Optional[PathLike] = None) -> int:
        """Write every stored edge record of ``graph`` to a file.

        Each undirected edge appears twice, once per direction.

        Args:
            graph: The graph store to serialize.
            path: Output file; ``config.output_path`` when omitted.

        Returns:
            Number of edge records written.

        Raises:
            GraphError: If the file cannot be written.
        """
        file_path = Path(path) if path is not None else self.config.output_path

        written = 0
        try:
            with file_path.open("w", encoding="utf-8") as f:
                for edge in graph.edges():
                    f.write(f"{edge.source} {edge.destination} {edge.weight}\n")
                    written += 1
        except OSError as e:
            raise GraphError(
                f"Failed to export graph: {file_path}",
                file_path=str(file_path),
                cause=e,
            ) from e

        self._logger.info(
            "Graph exported",
            extra={"file_path": str(file_path), "records": written},
        )
        return written

    @staticmethod
    def _open_for_read(file_path: Path) -> IO[str]:
        if file_path.suffix == ".gz":
            return gzip.open(file_path, "rt", encoding="utf-8")
        return file_path.open(encoding="utf-8")

    def _parse(
        self, lines: IO[str]
    ) -> Tuple[List[Tuple[int, int]], List[SkippedLine]]:
        """Split lines into edge pairs and skipped lines."""
        pairs: List[Tuple[int, int]] = []
        skipped: List[SkippedLine] = []

        for line_number, raw in enumerate(lines, start=1):
            text = raw.rstrip("\r\n")
            parts = text.split()

            if len(parts) != 2:
                reason = f"expected 2 fields, got {len(parts)}"
            else:
                try:
                    pairs.append((int(parts[0]), int(parts[1])))
                    continue
                except ValueError:
                    reason = "fields are not integers"

            self._logger.warning(
                "Skipping line",
                extra={"line_number": line_number, "line": text, "reason": reason},
            )
            skipped.append(SkippedLine(line_number, text, reason))

        return pairs, skipped
