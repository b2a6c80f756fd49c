"""
Dijkstra shortest path over the island graph.

Ignores clues entirely: this is the "just get me there cheaply" mode.
"""

from __future__ import annotations

import heapq
import logging

import numpy as np

from treasure_hunt.config import INFINITE_COST
from treasure_hunt.graph.graph import Graph, saturating_add

logger = logging.getLogger(__name__)

# Predecessor marker for "no parent"
NO_PARENT = -1


def shortest_path(graph: Graph, start: int, target: int) -> list[int]:
    """
    Find the cheapest route from start to target.

    Heap entries are (distance, index) so equal distances pop in index
    order, which keeps the result deterministic.

    Returns:
        List of location indices from start to target, or [] if the
        target cannot be reached

    Raises:
        IndexError: If start or target is not a location index
    """
    if start not in graph:
        raise IndexError(f"Start index {start} out of range [0, {graph.node_count})")
    if target not in graph:
        raise IndexError(f"Target index {target} out of range [0, {graph.node_count})")

    dist = np.full(graph.node_count, INFINITE_COST, dtype=np.int64)
    parent = np.full(graph.node_count, NO_PARENT, dtype=np.int64)
    dist[start] = 0

    heap: list[tuple[int, int]] = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)

        if u == target:
            break

        # Stale entry: a cheaper one was already processed
        if d > dist[u]:
            continue

        for edge in graph.neighbors(u):
            candidate = saturating_add(d, edge.cost)
            if candidate < dist[edge.target]:
                dist[edge.target] = candidate
                parent[edge.target] = u
                heapq.heappush(heap, (candidate, edge.target))

    if dist[target] == INFINITE_COST:
        logger.info(
            f"No route from '{graph.name_of(start)}' to '{graph.name_of(target)}'"
        )
        return []

    # Reconstruct path
    path = []
    idx = target
    while idx != NO_PARENT:
        path.append(idx)
        idx = int(parent[idx])
    path.reverse()

    logger.debug(f"Shortest route cost {int(dist[target])}: {path}")
    return path
