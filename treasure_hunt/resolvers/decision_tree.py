"""
Decision-tree resolver: reads the clue text and walks a keyword tree.

Each internal node asks "does the clue mention this keyword?" and goes to
its matched or unmatched child. Leaves name the location to visit.

Tree JSON format:
    {"keyword": "shines",
     "matched": {"leaf": "Beach"},
     "unmatched": {"keyword": "sun", "matched": {"leaf": "Cave"}}}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from treasure_hunt.resolvers.base import ClueResolver

if TYPE_CHECKING:
    from treasure_hunt.graph.graph import Graph
    from treasure_hunt.hunt.state import LocationInfo

logger = logging.getLogger(__name__)


@dataclass
class DecisionNode:
    """
    A node of the clue decision tree.

    Leaves carry `result`; internal nodes carry `keyword` and up to two
    children. Use DecisionNode.leaf() / DecisionNode.branch() to build.
    """

    keyword: str = ""
    matched: DecisionNode | None = None
    unmatched: DecisionNode | None = None
    result: int | None = None

    def __post_init__(self) -> None:
        self.keyword = self.keyword.lower()

    @classmethod
    def leaf(cls, result: int) -> DecisionNode:
        return cls(result=result)

    @classmethod
    def branch(
        cls,
        keyword: str,
        matched: DecisionNode | None = None,
        unmatched: DecisionNode | None = None,
    ) -> DecisionNode:
        if not keyword:
            raise ValueError("Decision branch needs a non-empty keyword")
        return cls(keyword=keyword, matched=matched, unmatched=unmatched)

    @property
    def is_leaf(self) -> bool:
        return self.result is not None

    def interpret(self, clue_text: str) -> int | None:
        """
        Resolve clue text to a location index.

        A leaf answers immediately. Otherwise the first keyword found
        top-down decides the branch; a missing child means no answer.
        """
        node = self
        lowered = clue_text.lower()
        while node is not None:
            if node.is_leaf:
                return node.result
            node = node.matched if node.keyword in lowered else node.unmatched
        return None

    def leaves(self) -> list[int]:
        """All leaf results, left to right."""
        if self.is_leaf:
            return [self.result]
        found = []
        for child in (self.matched, self.unmatched):
            if child is not None:
                found.extend(child.leaves())
        return found

    @classmethod
    def from_dict(cls, data: dict[str, Any], graph: Graph) -> DecisionNode:
        """
        Build a tree from nested dicts, resolving leaf names against graph.

        Raises:
            ValueError: If a node is not an object, is neither leaf nor
                branch, or a leaf names an unknown location
        """
        if not isinstance(data, dict):
            raise ValueError(f"Decision node must be an object, got {data!r}")
        if "leaf" in data:
            name = data["leaf"]
            if not isinstance(name, str):
                raise ValueError(f"Decision leaf must be a location name, got {name!r}")
            return cls.leaf(graph.require_index(name))
        if not isinstance(data.get("keyword"), str):
            raise ValueError(f"Decision node needs 'leaf' or a text 'keyword': {data!r}")

        matched = data.get("matched")
        unmatched = data.get("unmatched")
        return cls.branch(
            data["keyword"],
            matched=cls.from_dict(matched, graph) if matched else None,
            unmatched=cls.from_dict(unmatched, graph) if unmatched else None,
        )


class DecisionTreeResolver(ClueResolver):
    """
    Resolves each location's clue text through a DecisionNode tree.

    Locations with no clue get no suggestion.
    """

    def __init__(self, tree: DecisionNode, graph: Graph | None = None) -> None:
        """
        Initialize the resolver.

        Args:
            tree: Root of the decision tree
            graph: If given, every leaf is checked to be a location of it
        """
        if graph is not None:
            for result in tree.leaves():
                if result not in graph:
                    raise ValueError(
                        f"Decision tree leaf {result} is not a location "
                        f"(graph has {graph.node_count})"
                    )
        self._tree = tree

    @property
    def name(self) -> str:
        return "tree"

    @property
    def description(self) -> str:
        return "Keyword decision tree over clue text"

    @property
    def tree(self) -> DecisionNode:
        return self._tree

    def suggest(self, node: int, location: LocationInfo) -> int | None:
        if not location.clue:
            return None
        result = self._tree.interpret(location.clue)
        if result is None:
            logger.debug(f"Clue at {node} resolved nowhere: {location.clue!r}")
        return result


# (keyword, location) checks in the order the example tree asks them;
# anything that matches none of them points at the treasure.
EXAMPLE_TREE_RULES = [
    ("shines", "Beach"),
    ("sun", "Cave"),
    ("tree", "Forest"),
    ("murmur", "Woods"),
    ("summit", "Mountain"),
]
EXAMPLE_TREE_FALLBACK = "Treasure"


def build_example_tree(graph: Graph) -> DecisionNode:
    """
    Build the built-in island tree for a graph with the example locations.

    Raises:
        ValueError: If the graph lacks one of the example locations
    """
    tree = DecisionNode.leaf(graph.require_index(EXAMPLE_TREE_FALLBACK))
    for keyword, location in reversed(EXAMPLE_TREE_RULES):
        tree = DecisionNode.branch(
            keyword,
            matched=DecisionNode.leaf(graph.require_index(location)),
            unmatched=tree,
        )
    return tree
