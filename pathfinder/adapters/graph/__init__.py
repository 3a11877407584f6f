"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- EdgeListRepository: Loads and exports plain-text edge lists
- DijkstraEngine: Shortest paths for non-negative weights
- BellmanFordEngine: Shortest paths with negative-cycle detection
"""

from .bellman_ford_engine import BellmanFordEngine
from .dijkstra_engine import DijkstraEngine
from .edge_list_repository import EdgeListRepository

__all__ = ["EdgeListRepository", "DijkstraEngine", "BellmanFordEngine"]
