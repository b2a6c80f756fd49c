"""
Clue resolvers module.

Provides the strategies that turn a location's clue into a suggested
next location:
- HintResolver: Destination precomputed from the clue file
- DecisionTreeResolver: Keyword decision tree over the clue text
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from treasure_hunt.resolvers.base import ClueResolver
from treasure_hunt.resolvers.decision_tree import (
    DecisionNode,
    DecisionTreeResolver,
    build_example_tree,
)
from treasure_hunt.resolvers.hint import HintResolver

if TYPE_CHECKING:
    from treasure_hunt.graph.graph import Graph

__all__ = [
    "ClueResolver",
    "DecisionNode",
    "DecisionTreeResolver",
    "HintResolver",
    "RESOLVER_NAMES",
    "build_example_tree",
    "get_resolver",
]

RESOLVER_NAMES = ["hint", "tree"]


def get_resolver(
    name: str,
    graph: Graph | None = None,
    tree: DecisionNode | None = None,
) -> ClueResolver:
    """
    Get a resolver by name.

    Args:
        name: Resolver identifier (hint, tree)
        graph: Graph the resolver will run on (needed for tree)
        tree: Decision tree to use; defaults to the built-in example tree

    Returns:
        Instantiated resolver

    Raises:
        ValueError: If resolver name is unknown or the tree cannot be built
    """
    if name not in RESOLVER_NAMES:
        available = ", ".join(RESOLVER_NAMES)
        raise ValueError(f"Unknown resolver '{name}'. Available: {available}")

    if name == "hint":
        return HintResolver()

    if tree is None:
        if graph is None:
            raise ValueError("The tree resolver needs a graph or an explicit tree")
        tree = build_example_tree(graph)
    return DecisionTreeResolver(tree, graph)
