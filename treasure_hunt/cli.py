"""
Treasure Hunt CLI - find the treasure by following clues or the cheapest route.

Usage:
    treasure-hunt
    treasure-hunt --mode shortest
    treasure-hunt --resolver tree --tree data/decision_tree.json
    treasure-hunt --graph island.txt --clues island_clues.txt --start Beach --mode both
    treasure-hunt --menu
    treasure-hunt --html route.html --json result.json

Modes:
    clues    - Follow the clues depth-first, backtracking on dead ends
    shortest - Cheapest route by edge cost (Dijkstra), ignores clues
    both     - Run both and compare

Resolvers:
    hint - Destination named on each line of the clue file
    tree - Keyword decision tree over the clue text
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from treasure_hunt.config import (
    CLUES_PATH,
    DATA_DIR,
    DECISION_TREE_PATH,
    DEFAULT_START,
    GRAPH_PATH,
    LOG_LEVEL,
    ROUTE_OUTPUT_PATH,
    get_missing_data_files,
)
from treasure_hunt.data import (
    HuntFileError,
    load_clues,
    load_decision_tree,
    load_graph,
    save_result_json,
    save_route,
)
from treasure_hunt.graph import Graph
from treasure_hunt.hunt import HuntEngine, HuntResult, LocationTable, find_sentinel_target
from treasure_hunt.resolvers import RESOLVER_NAMES, get_resolver

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INPUT_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search an island graph for the treasure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graph",
        type=Path,
        default=GRAPH_PATH,
        help=f"Graph file, text or .msgpack snapshot (default: {GRAPH_PATH})",
    )
    parser.add_argument(
        "--clues",
        type=Path,
        default=CLUES_PATH,
        help=f"Clue file (default: {CLUES_PATH})",
    )
    parser.add_argument(
        "--tree",
        type=Path,
        default=None,
        help="Decision tree JSON for --resolver tree (default: built-in tree)",
    )
    parser.add_argument(
        "--resolver",
        type=str,
        default="hint",
        choices=RESOLVER_NAMES,
        help="How clues are turned into directions (default: hint)",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default="clues",
        choices=["clues", "shortest", "both"],
        help="Search mode (default: clues)",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=DEFAULT_START,
        help=f"Starting location (default: {DEFAULT_START})",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Treasure location (default: from clue file, else name containing 'treasure')",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=ROUTE_OUTPUT_PATH,
        help=f"Where to write the found route (default: {ROUTE_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        help="Also write the result summary as JSON",
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Write an interactive route chart as HTML",
    )
    parser.add_argument(
        "--menu",
        action="store_true",
        help="Interactive menu instead of a single run",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_engine(args: argparse.Namespace) -> tuple[HuntEngine, int, int]:
    """
    Load all inputs and build the engine.

    Returns:
        (engine, start index, target index)

    Raises:
        HuntFileError: If an input file is malformed
        ValueError: If start/target names are unknown
    """
    graph: Graph = load_graph(args.graph)

    declared_target = None
    if args.clues.exists():
        locations, declared_target = load_clues(args.clues, graph)
    else:
        if args.resolver == "hint":
            logger.warning(f"Clue file {args.clues} not found, hunting without hints")
        locations = LocationTable(graph.node_count)

    tree = None
    if args.resolver == "tree":
        tree_path = args.tree or DECISION_TREE_PATH
        if tree_path.exists():
            tree = load_decision_tree(tree_path, graph)
        elif args.tree is not None:
            raise HuntFileError(tree_path, None, "Decision tree file not found")

    resolver = get_resolver(args.resolver, graph=graph, tree=tree)
    engine = HuntEngine(graph, locations, resolver)

    start = graph.require_index(args.start)
    if args.target is not None:
        target = graph.require_index(args.target)
    elif declared_target is not None:
        target = declared_target
    else:
        target = find_sentinel_target(graph)

    return engine, start, target


def resolve_log_level(name: str) -> int:
    """Numeric logging level for a name such as "INFO" or "debug"."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(
            f"Unknown log level '{name}' (use DEBUG, INFO, WARNING or ERROR)"
        )
    return level


def print_result(result: HuntResult) -> None:
    """Print a search result."""
    label = "Clue hunt" if result.mode == "clues" else "Shortest route"
    print("\n" + "=" * 60)
    if result.found:
        print(f"{label}: treasure found in {result.hops} moves (cost {result.cost})")
    else:
        print(f"{label}: no route to the treasure")
    print("=" * 60)

    for i, name in enumerate(result.names):
        marker = " (START)" if i == 0 else " (TREASURE)" if i == len(result.names) - 1 else ""
        print(f"  {i}. {name}{marker}")

    if result.mode == "clues":
        print(f"\nExplored {result.explored} locations, {result.backtracks} backtracks")
    print(f"Search time: {result.elapsed_ms:.2f}ms")


def save_outputs(
    engine: HuntEngine,
    results: list[HuntResult],
    args: argparse.Namespace,
) -> None:
    """
    Write the route file plus any requested JSON/HTML outputs.

    With several results the route file and chart show the last found
    route, and the JSON file lists every result.
    """
    found = [result for result in results if result.found]
    if found:
        save_route(found[-1].names, args.output)
        print(f"Route saved to '{args.output}'")
    if args.json:
        save_result_json(results if len(results) > 1 else results[0], args.json)
    if args.html:
        from treasure_hunt.charts import create_route_figure

        shown = found[-1] if found else results[-1]
        fig = create_route_figure(
            engine.graph,
            shown.path,
            title=f"{shown.mode.capitalize()} route",
        )
        fig.write_html(str(args.html))
        print(f"Chart saved to '{args.html}'")


def run_menu(engine: HuntEngine, start: int, target: int, args: argparse.Namespace) -> int:
    """Interactive loop; every choice runs a fresh search."""
    last_found = False
    while True:
        print("\n1. Follow the clues")
        print("2. Cheapest route")
        print("3. Quit")
        try:
            choice = input("Choose an option: ").strip().lower()
        except EOFError:
            break

        if choice == "1":
            result = engine.search(start, target)
        elif choice == "2":
            result = engine.shortest_route(start, target)
        elif choice in ("3", "q", "quit"):
            break
        else:
            print(f"Unknown option '{choice}'")
            continue

        print_result(result)
        save_outputs(engine, [result], args)
        last_found = result.found

    return EXIT_FOUND if last_found else EXIT_NOT_FOUND


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    try:
        log_level = logging.DEBUG if args.verbose else resolve_log_level(LOG_LEVEL)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.graph == GRAPH_PATH and not GRAPH_PATH.exists():
        missing = ", ".join(get_missing_data_files())
        print(f"Error: missing data files in {DATA_DIR}: {missing}", file=sys.stderr)
        print("Pass --graph to hunt on another island", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        engine, start, target = build_engine(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    graph = engine.graph
    print("\n" + "=" * 60)
    print("Treasure Hunt")
    print("=" * 60)
    print(f"  Graph:    {args.graph} ({graph.node_count} locations)")
    print(f"  Start:    {graph.name_of(start)}")
    print(f"  Treasure: {graph.name_of(target)}")
    print(f"  Resolver: {engine.resolver.name} - {engine.resolver.description}")
    print("=" * 60)

    try:
        if args.menu:
            return run_menu(engine, start, target, args)

        results = []
        if args.mode in ("clues", "both"):
            results.append(engine.search(start, target))
        if args.mode in ("shortest", "both"):
            results.append(engine.shortest_route(start, target))

        for result in results:
            print_result(result)
        save_outputs(engine, results, args)
    except KeyboardInterrupt:
        print("\n\nHunt interrupted by user")
        return 130
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    return EXIT_FOUND if any(r.found for r in results) else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
