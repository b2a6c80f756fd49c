"""
Readers and writers for hunt data files.

Usage:
    from treasure_hunt.data.loader import load_clues, load_graph

    graph = load_graph("data/graph.txt")
    locations, target = load_clues("data/clues.txt", graph)

Graph file:
    Nodes: Beach,Cave,Mountain,Forest,Woods,Treasure
    Edges:
    Beach,Cave,3

Clue file (destination may be left empty):
    Treasure: Treasure
    Clues:
    Beach,The sun points the way to the cave,Cave
    Woods,Listen to the murmur,
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

import msgpack

from treasure_hunt.graph.graph import Graph
from treasure_hunt.hunt.state import LocationTable
from treasure_hunt.resolvers.decision_tree import DecisionNode

if TYPE_CHECKING:
    from treasure_hunt.hunt.state import HuntResult

logger = logging.getLogger(__name__)

# Accepted section headers (English, and the Spanish used by older data files)
NODES_HEADERS = ("nodes", "nodos")
EDGES_HEADERS = ("edges", "aristas")
TARGET_HEADERS = ("treasure", "tesoro")
CLUES_HEADERS = ("clues", "pistas")

SNAPSHOT_SUFFIX = ".msgpack"


class HuntFileError(ValueError):
    """A data file could not be parsed."""

    def __init__(self, path: str | Path, line_number: int | None, message: str) -> None:
        self.path = str(path)
        self.line_number = line_number
        location = f"{self.path}:{line_number}" if line_number else self.path
        super().__init__(f"{location}: {message}")


def _content_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield (line_number, stripped_line), skipping blanks and # comments."""
    with open(path, encoding="utf-8") as f:
        for number, raw in enumerate(f, start=1):
            line = raw.strip()
            if line and not line.startswith("#"):
                yield number, line


def _split_header(line: str) -> tuple[str, str] | None:
    """Split 'Header: value' into (lowercased header, value)."""
    if ":" not in line:
        return None
    header, _, value = line.partition(":")
    return header.strip().lower(), value.strip()


def _expect_header(
    path: Path,
    lines: Iterator[tuple[int, str]],
    accepted: tuple[str, ...],
) -> tuple[int, str]:
    """Consume the next line, which must be one of the accepted headers."""
    try:
        number, line = next(lines)
    except StopIteration:
        raise HuntFileError(
            path, None, f"Missing '{accepted[0].capitalize()}:' section"
        ) from None

    parts = _split_header(line)
    if parts is None or parts[0] not in accepted:
        raise HuntFileError(
            path, number, f"Expected '{accepted[0].capitalize()}:', got {line!r}"
        )
    return number, parts[1]


# =============================================================================
# Graph
# =============================================================================

def load_graph(path: str | Path) -> Graph:
    """Load a graph from a text file or a msgpack snapshot (by suffix)."""
    path = Path(path)
    if path.suffix == SNAPSHOT_SUFFIX:
        return load_graph_snapshot(path)
    return load_graph_text(path)


def load_graph_text(path: str | Path) -> Graph:
    """
    Parse the Nodes:/Edges: text format.

    Raises:
        HuntFileError: On any formatting problem, unknown or duplicate
            location name, or invalid cost
        OSError: If the file cannot be read
    """
    path = Path(path)
    logger.info(f"Loading graph from {path}...")

    lines = _content_lines(path)
    number, names_value = _expect_header(path, lines, NODES_HEADERS)
    names = [name.strip() for name in names_value.split(",")]

    try:
        graph = Graph.from_names(names)
    except ValueError as e:
        raise HuntFileError(path, number, str(e)) from e

    _expect_header(path, lines, EDGES_HEADERS)

    for number, line in lines:
        parts = [part.strip() for part in line.split(",")]
        if len(parts) != 3:
            raise HuntFileError(
                path, number, f"Expected 'origin,destination,cost', got {line!r}"
            )
        origin, destination, cost_text = parts

        u = graph.index_of(origin)
        v = graph.index_of(destination)
        if u is None or v is None:
            unknown = origin if u is None else destination
            raise HuntFileError(path, number, f"Unknown location '{unknown}'")

        try:
            cost = int(cost_text)
            graph.add_undirected_edge(u, v, cost)
        except ValueError as e:
            raise HuntFileError(path, number, f"Invalid cost {cost_text!r}: {e}") from e

    logger.info(
        f"Loaded graph with {graph.node_count} locations "
        f"and {sum(1 for _ in graph.edges())} edges"
    )
    return graph


def save_graph_snapshot(graph: Graph, path: str | Path) -> None:
    """Write the graph as msgpack: names plus the edge list in insertion order."""
    path = Path(path)
    payload = {
        "names": graph.names,
        "edges": [list(edge) for edge in graph.edges()],
    }
    with open(path, "wb") as f:
        msgpack.pack(payload, f)
    logger.info(f"Saved graph snapshot to {path}")


def load_graph_snapshot(path: str | Path) -> Graph:
    """
    Load a graph written by save_graph_snapshot().

    Replaying the edges in stored order rebuilds the same neighbor order.
    """
    path = Path(path)
    logger.info(f"Loading graph snapshot from {path}...")
    with open(path, "rb") as f:
        payload = msgpack.unpack(f)

    if not isinstance(payload, dict) or "names" not in payload:
        raise HuntFileError(path, None, "Not a graph snapshot")

    names = payload["names"]
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise HuntFileError(path, None, "Corrupt graph snapshot: names must be strings")

    try:
        graph = Graph.from_names(names)
        for u, v, cost in payload.get("edges", []):
            graph.add_undirected_edge(u, v, cost)
    except (ValueError, IndexError, TypeError) as e:
        raise HuntFileError(path, None, f"Corrupt graph snapshot: {e}") from e

    logger.info(f"Loaded snapshot with {graph.node_count} locations")
    return graph


# =============================================================================
# Clues
# =============================================================================

def load_clues(path: str | Path, graph: Graph) -> tuple[LocationTable, int]:
    """
    Parse a clue file against graph.

    Lines after the header are 'location,clue[,destination]'. With three or
    more fields the last one is the destination (empty for none) and the
    fields between are the clue text, commas included.

    Returns:
        (location table sized to graph, target location index)

    Raises:
        HuntFileError: On formatting problems or unknown location names
    """
    path = Path(path)
    logger.info(f"Loading clues from {path}...")

    lines = _content_lines(path)
    number, target_name = _expect_header(path, lines, TARGET_HEADERS)
    target = graph.index_of(target_name)
    if target is None:
        raise HuntFileError(path, number, f"Unknown treasure location '{target_name}'")

    _expect_header(path, lines, CLUES_HEADERS)

    locations = LocationTable(graph.node_count)
    clue_count = 0
    for number, line in lines:
        parts = [part.strip() for part in line.split(",")]
        if len(parts) < 2:
            raise HuntFileError(
                path, number, f"Expected 'location,clue[,destination]', got {line!r}"
            )

        idx = graph.index_of(parts[0])
        if idx is None:
            raise HuntFileError(path, number, f"Unknown location '{parts[0]}'")

        next_hint = None
        if len(parts) == 2:
            clue = parts[1]
        else:
            clue = ",".join(line.split(",")[1:-1]).strip()
            destination = parts[-1]
            if destination:
                next_hint = graph.index_of(destination)
                if next_hint is None:
                    raise HuntFileError(
                        path, number, f"Unknown destination '{destination}'"
                    )

        if locations[idx].clue or locations[idx].next_hint is not None:
            logger.warning(f"{path}:{number}: clue for '{parts[0]}' replaces earlier one")
        locations.set_clue(idx, clue, next_hint)
        clue_count += 1

    logger.info(
        f"Loaded {clue_count} clues, treasure at '{graph.name_of(target)}'"
    )
    return locations, target


# =============================================================================
# Decision tree
# =============================================================================

def load_decision_tree(path: str | Path, graph: Graph) -> DecisionNode:
    """
    Load a decision tree from JSON, resolving leaf names against graph.

    Raises:
        HuntFileError: If the JSON is invalid or names unknown locations
    """
    path = Path(path)
    logger.info(f"Loading decision tree from {path}...")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return DecisionNode.from_dict(data, graph)
    except (json.JSONDecodeError, ValueError, TypeError) as e:
        raise HuntFileError(path, None, f"Invalid decision tree: {e}") from e


# =============================================================================
# Output
# =============================================================================

def save_route(names: list[str], path: str | Path) -> None:
    """Write a route, one location name per line."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        for name in names:
            f.write(f"{name}\n")
    logger.info(f"Route saved to {path}")


def save_result_json(result: HuntResult | list[HuntResult], path: str | Path) -> None:
    """Write a search result summary, or a list of them, as JSON."""
    path = Path(path)
    if isinstance(result, list):
        data = [r.to_dict() for r in result]
    else:
        data = result.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info(f"Result saved to {path}")
