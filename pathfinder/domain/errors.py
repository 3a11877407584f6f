"""Typed domain errors for pathfinder.

Graph mutations never fail and malformed edge-list lines are skipped
with a diagnostic, so these errors are reserved for conditions the
caller has to see: unreadable files, negative-weight cycles and bad
configuration.

All errors inherit from PathfinderError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import Edge


@dataclass
class PathfinderError(Exception):
    """Base error for the pathfinder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(PathfinderError):
    """Edge-list file could not be read, decompressed or written.

    Attributes:
        file_path: Path to the edge-list file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NegativeCycleError(PathfinderError):
    """A negative-weight cycle is reachable from the start node.

    Distances computed before the cycle was found are discarded.

    Attributes:
        start_node: Node the engine was run from
        edge: First edge that still relaxed after the final pass
    """

    start_node: Optional[int] = None
    edge: Optional[Edge] = None


@dataclass
class ConfigurationError(PathfinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
