"""
Hunt state dataclasses: per-location clues and the record of a search.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Iterator


@dataclass
class LocationInfo:
    """
    What the hunter knows about one location.

    Attributes:
        clue: Clue text found here (may be empty)
        next_hint: Location the clue points to, resolved from the clue file
        visited: True while the location is on the current search path
    """

    clue: str = ""
    next_hint: int | None = None
    visited: bool = False


class LocationTable:
    """
    One LocationInfo per graph location, indexed like the graph.

    The visited flags double as the search's cycle guard: a location is
    marked when pushed onto the path and unmarked when backtracked off it.
    """

    def __init__(self, node_count: int) -> None:
        self._entries = [LocationInfo() for _ in range(node_count)]

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, idx: int) -> LocationInfo:
        return self._entries[idx]

    def __iter__(self) -> Iterator[LocationInfo]:
        return iter(self._entries)

    def set_clue(self, idx: int, clue: str, next_hint: int | None = None) -> None:
        """Record the clue (and optional resolved destination) for a location."""
        if next_hint is not None and not 0 <= next_hint < len(self._entries):
            raise IndexError(
                f"Hint {next_hint} out of range [0, {len(self._entries)})"
            )
        entry = self._entries[idx]
        entry.clue = clue
        entry.next_hint = next_hint

    def is_visited(self, idx: int) -> bool:
        return self._entries[idx].visited

    def mark(self, idx: int) -> None:
        self._entries[idx].visited = True

    def unmark(self, idx: int) -> None:
        self._entries[idx].visited = False

    def reset(self) -> None:
        """Clear every visited flag before a fresh search."""
        for entry in self:
            entry.visited = False

    def visited_indices(self) -> list[int]:
        return [idx for idx, entry in enumerate(self) if entry.visited]


@dataclass
class HuntStep:
    """
    Records one move of the search.

    Attributes:
        kind: "enter", "backtrack" or "found"
        node: Location index the move concerns
        via_clue: Whether the location was entered because a clue pointed there
        depth: Path length after the move
    """

    kind: str
    node: int
    via_clue: bool
    depth: int


@dataclass
class HuntResult:
    """
    Complete record of a finished search.

    Attributes:
        start: Starting location index
        target: Target location index
        found: Whether the target was reached
        path: Location indices from start to target ([] if not found)
        names: Location names matching path
        cost: Total edge cost along path (None if not found or not walkable)
        mode: "clues" or "shortest"
        resolver: Name of the clue resolver used ("" for shortest)
        steps: Detailed search trace (clue mode only)
        explored: Number of locations entered
        backtracks: Number of dead ends abandoned
        elapsed_ms: Wall time of the search in milliseconds
        timestamp: When the search ran
    """

    start: int
    target: int
    found: bool
    path: list[int]
    names: list[str]
    cost: int | None
    mode: str
    resolver: str = ""
    steps: list[HuntStep] = field(default_factory=list)
    explored: int = 0
    backtracks: int = 0
    elapsed_ms: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def hops(self) -> int:
        """Number of moves along the found path."""
        return max(len(self.path) - 1, 0)

    def visited_nodes(self) -> set[int]:
        """Every location the search entered at some point."""
        return {step.node for step in self.steps if step.kind == "enter"}

    def to_dict(self) -> dict:
        """JSON-friendly summary."""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["hops"] = self.hops
        return data
