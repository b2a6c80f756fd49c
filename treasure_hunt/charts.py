"""
Plotly chart of the island graph with a route highlighted.
"""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go

from treasure_hunt.graph.graph import Graph

EDGE_COLOR = "#bdc3c7"
ROUTE_COLOR = "#e67e22"
NODE_COLOR = "#3498db"
START_COLOR = "#2ecc71"
TARGET_COLOR = "#f1c40f"


def circular_layout(node_count: int) -> np.ndarray:
    """(node_count, 2) array of positions evenly spaced on the unit circle."""
    angles = np.linspace(0, 2 * np.pi, node_count, endpoint=False)
    return np.column_stack([np.cos(angles), np.sin(angles)])


def create_route_figure(
    graph: Graph,
    route: list[int] | None = None,
    title: str = "Treasure Hunt",
) -> go.Figure:
    """Island graph with edge costs; the route's edges and stops drawn on top."""
    route = route or []
    pos = circular_layout(graph.node_count)
    route_edges = {frozenset(pair) for pair in zip(route, route[1:])}

    fig = go.Figure()

    for u, v, cost in graph.edges():
        on_route = frozenset((u, v)) in route_edges
        fig.add_trace(go.Scatter(
            x=[pos[u, 0], pos[v, 0]],
            y=[pos[u, 1], pos[v, 1]],
            mode="lines",
            line=dict(
                color=ROUTE_COLOR if on_route else EDGE_COLOR,
                width=4 if on_route else 1.5,
            ),
            hoverinfo="skip",
            showlegend=False,
        ))
        # Cost label at the edge midpoint
        fig.add_annotation(
            x=(pos[u, 0] + pos[v, 0]) / 2,
            y=(pos[u, 1] + pos[v, 1]) / 2,
            text=str(cost),
            showarrow=False,
            font=dict(size=10, color="#555"),
        )

    colors = [NODE_COLOR] * graph.node_count
    if route:
        for idx in route:
            colors[idx] = ROUTE_COLOR
        colors[route[0]] = START_COLOR
        colors[route[-1]] = TARGET_COLOR

    stop_numbers = {idx: i for i, idx in enumerate(route)}
    hover = [
        f"<b>{graph.name_of(idx)}</b>"
        + (f"<br>Stop {stop_numbers[idx]}" if idx in stop_numbers else "")
        for idx in range(graph.node_count)
    ]

    fig.add_trace(go.Scatter(
        x=pos[:, 0],
        y=pos[:, 1],
        mode="markers+text",
        marker=dict(size=22, color=colors, line=dict(width=2, color="#333")),
        text=[graph.name_of(idx) for idx in range(graph.node_count)],
        textposition="top center",
        hovertext=hover,
        hoverinfo="text",
        showlegend=False,
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x"),
        height=500,
        margin=dict(t=50, b=20, l=20, r=20),
        plot_bgcolor="white",
    )
    return fig
