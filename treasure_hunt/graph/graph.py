"""
Weighted undirected island graph with name <-> index lookup.

Usage:
    graph = Graph(3)
    graph.set_names(["Beach", "Cave", "Treasure"])
    graph.add_undirected_edge(0, 1, 3)
    graph.index_of("Cave")      # 1
    graph.neighbors(0)          # [Edge(target=1, cost=3)]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from treasure_hunt.config import INFINITE_COST, MAX_EDGE_COST


def saturating_add(a: int, b: int) -> int:
    """Add two costs, clamping at INFINITE_COST."""
    return min(a + b, INFINITE_COST)


@dataclass(frozen=True)
class Edge:
    """
    One side of an undirected connection.

    Attributes:
        target: Index of the location at the other end
        cost: Non-negative travel cost
    """

    target: int
    cost: int


class Graph:
    """
    Adjacency-list graph over locations 0..n-1.

    Every edge is stored on both endpoints with the same cost, and the
    neighbor order of each location is the order edges were added in.
    Names form a bijection with indices once set_names() has been called.
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError(f"Node count must be non-negative, got {node_count}")
        self._adjacency: list[list[Edge]] = [[] for _ in range(node_count)]
        self._names: list[str] = []
        self._name_to_idx: dict[str, int] = {}
        self._edges: list[tuple[int, int, int]] = []

    @classmethod
    def from_names(cls, names: list[str]) -> Graph:
        """Create a graph with one location per name."""
        graph = cls(len(names))
        graph.set_names(names)
        return graph

    # =========================================================================
    # Names
    # =========================================================================

    def set_names(self, names: list[str]) -> None:
        """
        Assign a unique name to every location.

        Raises:
            ValueError: If names were already set, the count does not match,
                or a name is empty or repeated
        """
        if self._names:
            raise ValueError("Location names are already set")
        if len(names) != self.node_count:
            raise ValueError(
                f"Expected {self.node_count} names, got {len(names)}"
            )

        mapping: dict[str, int] = {}
        for idx, name in enumerate(names):
            if not name:
                raise ValueError(f"Location {idx} has an empty name")
            if name in mapping:
                raise ValueError(f"Duplicate location name '{name}'")
            mapping[name] = idx

        self._names = list(names)
        self._name_to_idx = mapping

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def index_of(self, name: str) -> int | None:
        """Get index for a location name, or None if unknown."""
        return self._name_to_idx.get(name)

    def require_index(self, name: str) -> int:
        """Get index for a location name, raising ValueError if unknown."""
        idx = self._name_to_idx.get(name)
        if idx is None:
            raise ValueError(f"Unknown location '{name}'")
        return idx

    def name_of(self, idx: int) -> str:
        """Get location name by index (falls back to '#idx' if unnamed)."""
        self._check_index(idx)
        if self._names:
            return self._names[idx]
        return f"#{idx}"

    def names_for(self, path: list[int]) -> list[str]:
        return [self.name_of(idx) for idx in path]

    # =========================================================================
    # Edges
    # =========================================================================

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    def __contains__(self, idx: object) -> bool:
        return isinstance(idx, int) and 0 <= idx < len(self._adjacency)

    def add_undirected_edge(self, u: int, v: int, cost: int) -> None:
        """
        Connect u and v in both directions with the same cost.

        Raises:
            IndexError: If u or v is not a location index
            ValueError: If cost is not an integer, is negative or is wider
                than 32 bits
        """
        self._check_index(u)
        self._check_index(v)
        if isinstance(cost, bool) or not isinstance(cost, int):
            raise ValueError(f"Edge cost must be an integer, got {cost!r}")
        if not 0 <= cost <= MAX_EDGE_COST:
            raise ValueError(f"Edge cost {cost} out of range [0, {MAX_EDGE_COST}]")

        self._adjacency[u].append(Edge(v, cost))
        self._adjacency[v].append(Edge(u, cost))
        self._edges.append((u, v, cost))

    def neighbors(self, idx: int) -> list[Edge]:
        """Edges leaving idx, in insertion order."""
        self._check_index(idx)
        return self._adjacency[idx]

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Each undirected edge once, as (u, v, cost), in insertion order."""
        return iter(self._edges)

    def edge_cost(self, u: int, v: int) -> int | None:
        """Cheapest direct cost from u to v, or None if not adjacent."""
        costs = [edge.cost for edge in self.neighbors(u) if edge.target == v]
        return min(costs) if costs else None

    def path_cost(self, path: list[int]) -> int | None:
        """
        Total cost along consecutive path entries.

        Returns None if two consecutive entries are not adjacent.
        """
        total = 0
        for u, v in zip(path, path[1:]):
            cost = self.edge_cost(u, v)
            if cost is None:
                return None
            total = saturating_add(total, cost)
        return total

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._adjacency):
            raise IndexError(
                f"Location index {idx} out of range [0, {len(self._adjacency)})"
            )

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={len(self._edges)})"
