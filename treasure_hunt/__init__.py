"""
Treasure Hunt.

Finds a route across a weighted island graph, either by following the
clues left at each location (depth-first with backtracking) or by taking
the cheapest route (Dijkstra).
"""

__version__ = "0.1.0"
