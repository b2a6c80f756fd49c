"""
Hunt engine: clue-guided depth-first search and cheapest-route search.

The clue search stands on a location, asks the resolver where the clue
points, and goes there first. If that leads nowhere it tries every
neighbor in edge order, and when everything fails it backtracks. It finds
*a* route that respects the clues, not the cheapest one; use
shortest_route() for that.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterator

from treasure_hunt.config import FOLLOW_DISTANT_CLUES, TREASURE_SENTINEL
from treasure_hunt.graph.shortest_path import shortest_path
from treasure_hunt.hunt.state import HuntResult, HuntStep

if TYPE_CHECKING:
    from treasure_hunt.graph.graph import Graph
    from treasure_hunt.hunt.state import LocationTable
    from treasure_hunt.resolvers.base import ClueResolver

logger = logging.getLogger(__name__)


def find_sentinel_target(graph: Graph, sentinel: str = TREASURE_SENTINEL) -> int:
    """
    Index of the first location whose name contains the sentinel.

    Raises:
        ValueError: If no location name contains it
    """
    sentinel = sentinel.lower()
    for idx, name in enumerate(graph.names):
        if sentinel in name.lower():
            return idx
    raise ValueError(f"No location name contains '{sentinel}'")


class HuntEngine:
    """
    Runs treasure searches over one graph and its location table.

    The engine owns no state between calls: every search starts by
    clearing the visited flags of the location table.
    """

    def __init__(
        self,
        graph: Graph,
        locations: LocationTable,
        resolver: ClueResolver,
        follow_distant_clues: bool = FOLLOW_DISTANT_CLUES,
    ) -> None:
        """
        Initialize the hunt engine.

        Args:
            graph: Island graph
            locations: Clues for each location, sized like the graph
            resolver: Strategy that turns a clue into a suggested location
            follow_distant_clues: Follow clues to locations with no direct edge
        """
        if len(locations) != graph.node_count:
            raise ValueError(
                f"Location table has {len(locations)} entries, "
                f"graph has {graph.node_count} locations"
            )
        self._graph = graph
        self._locations = locations
        self._resolver = resolver
        self._follow_distant = follow_distant_clues

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def resolver(self) -> ClueResolver:
        return self._resolver

    def _resolve(self, node: int | str) -> int:
        """Accept a location index or name."""
        if isinstance(node, str):
            return self._graph.require_index(node)
        if node not in self._graph:
            raise IndexError(
                f"Location index {node} out of range [0, {self._graph.node_count})"
            )
        return node

    # =========================================================================
    # Clue-guided search
    # =========================================================================

    def _candidates(self, node: int) -> Iterator[tuple[int, bool]]:
        """
        Yield (next_location, via_clue) in the order they should be tried.

        The clue's suggestion comes first, then neighbors in edge order.
        A location already yielded is not yielded again: from the same
        path it would fail the same way.
        """
        tried = set()

        suggestion = self._resolver.suggest(node, self._locations[node])
        if suggestion is not None:
            if suggestion not in self._graph:
                raise ValueError(
                    f"Resolver '{self._resolver.name}' suggested location "
                    f"{suggestion}, graph has {self._graph.node_count}"
                )
            tried.add(suggestion)

            if self._locations.is_visited(suggestion):
                logger.debug(
                    f"Clue at '{self._graph.name_of(node)}' points back to "
                    f"'{self._graph.name_of(suggestion)}', already on path"
                )
            elif (
                not self._follow_distant
                and self._graph.edge_cost(node, suggestion) is None
            ):
                logger.debug(
                    f"Clue at '{self._graph.name_of(node)}' points to "
                    f"'{self._graph.name_of(suggestion)}', no direct edge"
                )
            else:
                yield suggestion, True

        for edge in self._graph.neighbors(node):
            if edge.target in tried:
                continue
            tried.add(edge.target)
            yield edge.target, False

    def search(self, start: int | str, target: int | str) -> HuntResult:
        """
        Follow the clues from start until target is reached.

        Args:
            start: Starting location (index or name)
            target: Target location (index or name)

        Returns:
            HuntResult; found is False (with an empty path) if no route
            exists under clue-first exploration with backtracking
        """
        start_idx = self._resolve(start)
        target_idx = self._resolve(target)

        logger.info(
            f"Starting clue hunt: '{self._graph.name_of(start_idx)}' -> "
            f"'{self._graph.name_of(target_idx)}' with {self._resolver.name}"
        )
        start_time = time.time() * 1000

        self._locations.reset()
        path: list[int] = []
        steps: list[HuntStep] = []
        backtracks = 0

        # Each frame is a location on the path plus the candidates it has
        # not tried yet; frames and path entries stay in lockstep.
        stack: list[Iterator[tuple[int, bool]]] = []

        def enter(node: int, via_clue: bool) -> bool:
            self._locations.mark(node)
            path.append(node)
            steps.append(HuntStep("enter", node, via_clue, len(path)))
            logger.debug(
                f"Enter '{self._graph.name_of(node)}'"
                f"{' (clue)' if via_clue else ''} depth {len(path)}"
            )
            if node == target_idx:
                steps.append(HuntStep("found", node, via_clue, len(path)))
                return True
            stack.append(self._candidates(node))
            return False

        found = enter(start_idx, False)
        while stack and not found:
            for next_node, via_clue in stack[-1]:
                if self._locations.is_visited(next_node):
                    continue
                found = enter(next_node, via_clue)
                break
            else:
                # Dead end: release the location for other branches
                stack.pop()
                node = path.pop()
                self._locations.unmark(node)
                backtracks += 1
                steps.append(HuntStep("backtrack", node, False, len(path)))
                logger.debug(f"Backtrack from '{self._graph.name_of(node)}'")

        result_path = list(path) if found else []
        result = HuntResult(
            start=start_idx,
            target=target_idx,
            found=found,
            path=result_path,
            names=self._graph.names_for(result_path),
            cost=self._graph.path_cost(result_path) if found else None,
            mode="clues",
            resolver=self._resolver.name,
            steps=steps,
            explored=sum(1 for step in steps if step.kind == "enter"),
            backtracks=backtracks,
            elapsed_ms=time.time() * 1000 - start_time,
        )

        if found:
            logger.info(
                f"Treasure found! Route ({result.hops} moves): "
                f"{' -> '.join(result.names)}"
            )
        else:
            logger.info(
                f"No clue route to '{self._graph.name_of(target_idx)}' "
                f"after exploring {result.explored} locations"
            )
        return result

    # =========================================================================
    # Cheapest route
    # =========================================================================

    def shortest_route(self, start: int | str, target: int | str) -> HuntResult:
        """
        Find the cheapest route from start to target, ignoring clues.

        Returns:
            HuntResult; found is False (with an empty path) if unreachable
        """
        start_idx = self._resolve(start)
        target_idx = self._resolve(target)

        logger.info(
            f"Starting shortest route: '{self._graph.name_of(start_idx)}' -> "
            f"'{self._graph.name_of(target_idx)}'"
        )
        start_time = time.time() * 1000

        # Nothing from a previous clue hunt may leak into this one
        self._locations.reset()
        path = shortest_path(self._graph, start_idx, target_idx)

        result = HuntResult(
            start=start_idx,
            target=target_idx,
            found=bool(path),
            path=path,
            names=self._graph.names_for(path),
            cost=self._graph.path_cost(path) if path else None,
            mode="shortest",
            elapsed_ms=time.time() * 1000 - start_time,
        )

        if result.found:
            logger.info(
                f"Cheapest route (cost {result.cost}): {' -> '.join(result.names)}"
            )
        return result
