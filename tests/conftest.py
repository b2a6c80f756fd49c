"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from treasure_hunt.graph import Graph
from treasure_hunt.hunt import LocationTable

ISLAND_NAMES = ["Beach", "Cave", "Mountain", "Forest", "Woods", "Treasure"]

ISLAND_EDGES = [
    ("Beach", "Cave", 3),
    ("Beach", "Forest", 5),
    ("Cave", "Mountain", 2),
    ("Forest", "Woods", 1),
    ("Mountain", "Treasure", 4),
    ("Woods", "Treasure", 6),
]


def _build_graph(names: list[str], edges: list[tuple[str, str, int]]) -> Graph:
    """Build a named graph from (origin, destination, cost) triples."""
    graph = Graph.from_names(names)
    for origin, destination, cost in edges:
        graph.add_undirected_edge(
            graph.require_index(origin), graph.require_index(destination), cost
        )
    return graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def make_graph():
    """Factory building a named graph from (origin, destination, cost) triples."""
    return _build_graph


@pytest.fixture
def island_graph() -> Graph:
    """The six-location example island."""
    return _build_graph(ISLAND_NAMES, ISLAND_EDGES)


@pytest.fixture
def island_locations(island_graph: Graph) -> LocationTable:
    """Hints leading Beach -> Cave -> Mountain -> Treasure."""
    idx = island_graph.require_index
    locations = LocationTable(island_graph.node_count)
    locations.set_clue(idx("Beach"), "The sun rises over the cave mouth", idx("Cave"))
    locations.set_clue(idx("Cave"), "Climb until you reach the summit", idx("Mountain"))
    locations.set_clue(idx("Mountain"), "Dig where the path ends", idx("Treasure"))
    return locations


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    """The example island written in the text graph format."""
    path = tmp_path / "graph.txt"
    lines = ["Nodes: " + ",".join(ISLAND_NAMES), "Edges:"]
    lines += [f"{u},{v},{c}" for u, v, c in ISLAND_EDGES]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def clues_file(tmp_path: Path) -> Path:
    """Clue file matching island_locations."""
    path = tmp_path / "clues.txt"
    path.write_text(
        "Treasure: Treasure\n"
        "Clues:\n"
        "Beach,The sun rises over the cave mouth,Cave\n"
        "Cave,Climb until you reach the summit,Mountain\n"
        "Mountain,Dig where the path ends,Treasure\n"
        "Woods,Nothing here but whispers,\n",
        encoding="utf-8",
    )
    return path
