"""Services layer - Application orchestration.

Services coordinate the graph store with the adapters behind the
port interfaces.
"""

from .graph_service import GraphService

__all__ = ["GraphService"]
