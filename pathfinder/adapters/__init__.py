"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph store to:
- Edge-list files (gzip or plain text)
- Shortest-path engines (Dijkstra, Bellman-Ford)
"""
