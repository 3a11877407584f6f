"""Graph store for representing the weighted undirected network.

This subpackage owns the in-memory adjacency lists that the
shortest-path engines read and the mutation API writes.
"""

from .store import Graph

__all__ = ["Graph"]
