"""Top-level package for pathfinder.

An in-memory weighted undirected graph with two single-source
shortest-path engines: Dijkstra for non-negative weights and
Bellman-Ford with negative-cycle detection. Graphs are loaded from
and exported to plain-text edge lists.
"""

from .adapters.graph import BellmanFordEngine, DijkstraEngine, EdgeListRepository
from .domain import DistanceResult, Edge, LoadReport, NegativeCycleError
from .graph import Graph
from .services import GraphService

__all__ = [
    "Graph",
    "Edge",
    "DistanceResult",
    "LoadReport",
    "NegativeCycleError",
    "DijkstraEngine",
    "BellmanFordEngine",
    "EdgeListRepository",
    "GraphService",
]
