"""
Graph module.

Provides the island graph and route finding on it:
- Graph: Weighted undirected adjacency lists with name lookup
- shortest_path: Dijkstra cheapest route
"""

from treasure_hunt.graph.graph import Edge, Graph, saturating_add
from treasure_hunt.graph.shortest_path import shortest_path

__all__ = [
    "Edge",
    "Graph",
    "saturating_add",
    "shortest_path",
]
