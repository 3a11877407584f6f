"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    NegativeCycleError,
    PathfinderError,
)
from .models import (
    INFINITY,
    Distance,
    DistanceResult,
    Edge,
    LoadReport,
    SkippedLine,
)

__all__ = [
    # Models
    "INFINITY",
    "Distance",
    "Edge",
    "DistanceResult",
    "LoadReport",
    "SkippedLine",
    # Errors
    "PathfinderError",
    "GraphError",
    "NegativeCycleError",
    "ConfigurationError",
]
