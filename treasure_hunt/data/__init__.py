"""
Data loading module.

Provides parsers for the island graph, clue and decision tree files,
msgpack graph snapshots, and route output.

Usage:
    from treasure_hunt.data import load_clues, load_graph

    graph = load_graph("data/graph.txt")
    locations, target = load_clues("data/clues.txt", graph)
"""

from treasure_hunt.data.loader import (
    HuntFileError,
    load_clues,
    load_decision_tree,
    load_graph,
    load_graph_snapshot,
    load_graph_text,
    save_graph_snapshot,
    save_result_json,
    save_route,
)

__all__ = [
    "HuntFileError",
    "load_clues",
    "load_decision_tree",
    "load_graph",
    "load_graph_snapshot",
    "load_graph_text",
    "save_graph_snapshot",
    "save_result_json",
    "save_route",
]
