"""
Tests for the route chart.
"""

import numpy as np

from treasure_hunt.charts import (
    ROUTE_COLOR,
    START_COLOR,
    TARGET_COLOR,
    circular_layout,
    create_route_figure,
)


class TestRouteFigure:
    """Test the plotly route figure."""

    def test_layout_on_unit_circle(self):
        """Positions are distinct points on the unit circle."""
        pos = circular_layout(6)
        assert pos.shape == (6, 2)
        assert np.allclose(np.hypot(pos[:, 0], pos[:, 1]), 1.0)
        assert len({tuple(np.round(p, 6)) for p in pos}) == 6

    def test_one_trace_per_edge_plus_nodes(self, island_graph):
        """Each edge is a line trace; locations are one marker trace."""
        fig = create_route_figure(island_graph)
        assert len(fig.data) == 6 + 1
        assert len(fig.layout.annotations) == 6

    def test_route_highlighted(self, island_graph):
        """Route edges and stops use the route colors."""
        fig = create_route_figure(island_graph, [0, 1, 2, 5], title="Clue route")
        edge_colors = [trace.line.color for trace in fig.data[:-1]]
        assert edge_colors.count(ROUTE_COLOR) == 3

        node_colors = list(fig.data[-1].marker.color)
        assert node_colors[0] == START_COLOR
        assert node_colors[5] == TARGET_COLOR
        assert node_colors[1] == ROUTE_COLOR
        assert fig.layout.title.text == "Clue route"
