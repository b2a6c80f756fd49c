"""
Unit tests for the island graph and Dijkstra shortest path.
"""

import pytest

from treasure_hunt.config import INFINITE_COST, MAX_EDGE_COST
from treasure_hunt.graph import Edge, Graph, saturating_add, shortest_path


class TestGraphConstruction:
    """Test building graphs."""

    def test_create_empty_adjacency(self):
        """New graph has empty neighbor lists and no names."""
        graph = Graph(4)
        assert graph.node_count == 4
        assert all(graph.neighbors(i) == [] for i in range(4))
        assert graph.names == []

    def test_negative_node_count_raises(self):
        """Negative sizes are rejected."""
        with pytest.raises(ValueError):
            Graph(-1)

    def test_edge_is_symmetric(self):
        """Adding u-v also adds v-u with the same cost."""
        graph = Graph(3)
        graph.add_undirected_edge(0, 2, 7)
        assert Edge(2, 7) in graph.neighbors(0)
        assert Edge(0, 7) in graph.neighbors(2)
        assert graph.edge_cost(0, 2) == graph.edge_cost(2, 0) == 7

    def test_neighbors_keep_insertion_order(self):
        """Neighbors come back in the order edges were added."""
        graph = Graph(4)
        graph.add_undirected_edge(0, 3, 1)
        graph.add_undirected_edge(0, 1, 1)
        graph.add_undirected_edge(2, 0, 1)
        assert [e.target for e in graph.neighbors(0)] == [3, 1, 2]

    def test_out_of_range_index_raises(self):
        """Invalid indices are a hard error."""
        graph = Graph(2)
        with pytest.raises(IndexError):
            graph.add_undirected_edge(0, 2, 1)
        with pytest.raises(IndexError):
            graph.add_undirected_edge(-1, 0, 1)

    def test_invalid_cost_raises(self):
        """Costs must fit the unsigned 32-bit range."""
        graph = Graph(2)
        with pytest.raises(ValueError):
            graph.add_undirected_edge(0, 1, -1)
        with pytest.raises(ValueError):
            graph.add_undirected_edge(0, 1, MAX_EDGE_COST + 1)
        graph.add_undirected_edge(0, 1, MAX_EDGE_COST)

    def test_non_integer_cost_raises(self):
        """Costs must be whole numbers, not floats, bools or strings."""
        graph = Graph(2)
        for cost in (2.5, True, "3"):
            with pytest.raises(ValueError, match="integer"):
                graph.add_undirected_edge(0, 1, cost)
        assert graph.neighbors(0) == []

    def test_edges_listed_once(self, island_graph):
        """edges() lists each undirected edge once in insertion order."""
        edges = list(island_graph.edges())
        assert len(edges) == 6
        assert edges[0] == (0, 1, 3)


class TestNames:
    """Test name <-> index lookup."""

    def test_index_of_known(self, island_graph):
        """Known names map to their position."""
        assert island_graph.index_of("Beach") == 0
        assert island_graph.index_of("Treasure") == 5

    def test_index_of_unknown(self, island_graph):
        """Unknown names give None."""
        assert island_graph.index_of("Volcano") is None

    def test_require_index_unknown_raises(self, island_graph):
        """require_index raises for unknown names."""
        with pytest.raises(ValueError, match="Volcano"):
            island_graph.require_index("Volcano")

    def test_duplicate_names_rejected(self):
        """Names must be unique."""
        with pytest.raises(ValueError, match="Duplicate"):
            Graph.from_names(["A", "B", "A"])

    def test_name_count_must_match(self):
        """Names must cover every location."""
        with pytest.raises(ValueError):
            Graph(3).set_names(["A", "B"])

    def test_names_cannot_be_reassigned(self, island_graph):
        """Names are fixed once set."""
        with pytest.raises(ValueError):
            island_graph.set_names(["A", "B", "C", "D", "E", "F"])

    def test_unnamed_graph_uses_placeholders(self):
        """Unnamed locations print as #index."""
        assert Graph(2).name_of(1) == "#1"


class TestPathCost:
    """Test cost accumulation."""

    def test_path_cost(self, island_graph):
        """Sums consecutive edge costs."""
        assert island_graph.path_cost([0, 1, 2, 5]) == 9

    def test_path_cost_single_node(self, island_graph):
        """A one-stop path costs nothing."""
        assert island_graph.path_cost([3]) == 0

    def test_path_cost_not_adjacent(self, island_graph):
        """A jump between non-adjacent locations has no cost."""
        assert island_graph.path_cost([0, 5]) is None

    def test_parallel_edges_use_cheapest(self):
        """With parallel edges the cheaper one counts."""
        graph = Graph(2)
        graph.add_undirected_edge(0, 1, 9)
        graph.add_undirected_edge(1, 0, 4)
        assert graph.edge_cost(0, 1) == 4

    def test_saturating_add(self):
        """Sums clamp at the infinity sentinel."""
        assert saturating_add(2, 3) == 5
        assert saturating_add(INFINITE_COST - 1, 10) == INFINITE_COST


class TestShortestPath:
    """Test Dijkstra."""

    def test_island_cheapest_route(self, island_graph):
        """Beach -> Treasure goes through Cave and Mountain at cost 9."""
        path = shortest_path(island_graph, 0, 5)
        assert island_graph.names_for(path) == ["Beach", "Cave", "Mountain", "Treasure"]
        assert island_graph.path_cost(path) == 9

    def test_start_equals_target(self, island_graph):
        """Start == target gives a single-node path."""
        assert shortest_path(island_graph, 2, 2) == [2]

    def test_unreachable_returns_empty(self, make_graph):
        """Disconnected target gives an empty path."""
        graph = make_graph(["A", "B", "C"], [("A", "B", 1)])
        assert shortest_path(graph, 0, 2) == []

    def test_prefers_cheaper_longer_route(self, make_graph):
        """More hops can still be cheaper."""
        graph = make_graph(
            ["A", "B", "C", "D"],
            [("A", "D", 10), ("A", "B", 1), ("B", "C", 1), ("C", "D", 1)],
        )
        assert shortest_path(graph, 0, 3) == [0, 1, 2, 3]

    def test_zero_cost_edges(self, make_graph):
        """Zero-cost edges are fine."""
        graph = make_graph(["A", "B", "C"], [("A", "B", 0), ("B", "C", 0)])
        path = shortest_path(graph, 0, 2)
        assert path == [0, 1, 2]
        assert graph.path_cost(path) == 0

    def test_tie_is_deterministic(self, make_graph):
        """Equal-cost routes resolve the same way every time."""
        graph = make_graph(
            ["S", "A", "B", "T"],
            [("S", "B", 1), ("S", "A", 1), ("A", "T", 1), ("B", "T", 1)],
        )
        first = shortest_path(graph, 0, 3)
        assert all(shortest_path(graph, 0, 3) == first for _ in range(5))
        assert graph.path_cost(first) == 2

    def test_huge_costs_do_not_overflow(self, make_graph):
        """Max-width costs along a chain still compare correctly."""
        graph = make_graph(
            ["A", "B", "C", "D"],
            [
                ("A", "B", MAX_EDGE_COST),
                ("B", "D", MAX_EDGE_COST),
                ("A", "C", MAX_EDGE_COST),
                ("C", "D", MAX_EDGE_COST - 1),
            ],
        )
        path = shortest_path(graph, 0, 3)
        assert path == [0, 2, 3]
        assert graph.path_cost(path) == 2 * MAX_EDGE_COST - 1

    def test_optimal_against_all_simple_paths(self, island_graph):
        """No simple path is cheaper than the returned one."""
        best = island_graph.path_cost(shortest_path(island_graph, 0, 5))

        def simple_paths(node, target, path):
            if node == target:
                yield list(path)
                return
            for edge in island_graph.neighbors(node):
                if edge.target not in path:
                    path.append(edge.target)
                    yield from simple_paths(edge.target, target, path)
                    path.pop()

        costs = [island_graph.path_cost(p) for p in simple_paths(0, 5, [0])]
        assert costs
        assert best == min(costs)

    def test_invalid_index_raises(self, island_graph):
        """Out-of-range endpoints are a hard error."""
        with pytest.raises(IndexError):
            shortest_path(island_graph, 0, 99)
