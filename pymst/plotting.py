import matplotlib.pyplot as plt
from pymst.Graph import Edge, Graph
from pymst.MinimumSpanningTree import SpanningTree
from typing import Any, Iterable, Optional
from matplotlib.axes import Axes
import numpy as np
import plotly.graph_objects as go


def circular_layout(num_vertices: int, radius: float = 1.0) -> np.ndarray:
    """
    Place vertices evenly on a circle.

    Parameters
    ----------
    num_vertices : int
        Number of vertices to place.
    radius : float, optional
        Radius of the circle, by default 1.0.

    Returns
    -------
    np.ndarray
        Array of shape (num_vertices + 1, 2). Row ``v`` holds the position
        of vertex ``v``; row 0 is unused and left at the origin.
    """

    theta = np.linspace(0, 2 * np.pi, num_vertices, endpoint=False) + np.pi / 2
    pos = np.zeros((num_vertices + 1, 2))
    pos[1:, 0] = radius * np.cos(theta)
    pos[1:, 1] = radius * np.sin(theta)
    return pos


def plot_edges(
    edges: Iterable[Edge],
    pos: np.ndarray,
    ax: Axes,
    line_color: str = "b",
    line_width: float = 1.0,
    show_weights: bool = False,
):
    """
    Plot a set of graph edges on a 2D Matplotlib axis.

    Parameters
    ----------
    edges : Iterable[Edge]
        Edges to draw; endpoints index rows of ``pos``.
    pos : np.ndarray
        Vertex positions as returned by :func:`circular_layout`.
    ax : matplotlib.axes.Axes
        A Matplotlib Axes object to plot on.
    line_color : str, optional
        Color of the edges, by default 'b'.
    line_width : float, optional
        Width of the edge lines, by default 1.0.
    show_weights : bool, optional
        Annotate each edge with its weight at the midpoint, by default False.
    """
    for e in edges:
        p1, p2 = pos[e.head], pos[e.tail]
        ax.plot(
            [p1[0], p2[0]],
            [p1[1], p2[1]],
            linestyle="-",
            color=line_color,
            linewidth=line_width,
        )
        if show_weights:
            mid = (p1 + p2) / 2
            ax.annotate(str(e.weight), mid, ha="center", va="center", fontsize=8)


def plot_graph(
    graph: Graph,
    tree: Optional[SpanningTree] = None,
    title: str = "Graph",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    marker_size: float = 12,
    marker_color: Any = "black",
    line_width: float = 1.0,
    line_color: Any = "lightgrey",
    tree_line_width: float = 2.5,
    tree_line_color: Any = "red",
    show_weights: bool = True,
):
    """
    Visualize a graph, and optionally its spanning tree, using either
    Matplotlib or Plotly.

    Vertices are placed on a circle. All edges are drawn with ``line_color``
    and the edges of ``tree`` are drawn over them with ``tree_line_color``.

    Parameters
    ----------
    graph : Graph
        The graph to draw.
    tree : SpanningTree, optional
        Edges to highlight, e.g. the result of ``graph.mst_kruskal()``.
    title : str, optional
        Title of the plot. Default is "Graph".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib axis to plot on. If provided, Matplotlib is used.
    marker_size : float, optional
        Size of the vertex markers. Default is 12.
    marker_color : Any, optional
        Color of the vertex markers. Default is "black".
    line_width : float, optional
        Width of graph edges. Default is 1.0.
    line_color : Any, optional
        Color of graph edges. Default is "lightgrey".
    tree_line_width : float, optional
        Width of tree edges. Default is 2.5.
    tree_line_color : Any, optional
        Color of tree edges. Default is "red".
    show_weights : bool, optional
        Label edges with their weights. Default is True.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """

    pos = circular_layout(graph.num_vertices)

    if ax is not None:
        ax.set_title(title)
        ax.set_aspect("equal")
        ax.axis("off")

        plot_edges(graph.edges(), pos, ax, line_color=line_color,
                   line_width=line_width, show_weights=show_weights)
        if tree is not None:
            plot_edges(tree.edges, pos, ax, line_color=tree_line_color,
                       line_width=tree_line_width)

        ax.scatter(pos[1:, 0], pos[1:, 1], color=marker_color, s=marker_size**2, zorder=3)
        for v in graph.vertices:
            ax.annotate(str(v), pos[v], color="white", ha="center", va="center",
                        fontsize=8, zorder=4)

        return ax

    return _plot_graph_plotly(
        graph, tree, pos, title, fig,
        marker_size, marker_color,
        line_width, line_color,
        tree_line_width, tree_line_color,
        show_weights,
    )


def _plot_graph_plotly(
    graph: Graph,
    tree: Optional[SpanningTree],
    pos: np.ndarray,
    title: str,
    fig: Optional[go.Figure],
    marker_size: float,
    marker_color: Any,
    line_width: float,
    line_color: Any,
    tree_line_width: float,
    tree_line_color: Any,
    show_weights: bool,
):
    """
    Internal helper to render a graph using Plotly.

    Parameters
    ----------
    graph : Graph
        The graph to draw.
    tree : SpanningTree or None
        Edges to highlight.
    pos : np.ndarray
        Vertex positions, row ``v`` for vertex ``v``.
    title : str
        Title for the plot.
    fig : plotly.graph_objects.Figure or None
        Existing figure to modify, or None to create a new one.
    marker_size : float
        Size of the vertex markers.
    marker_color : Any
        Color of the vertex markers.
    line_width : float
        Width of graph edges.
    line_color : Any
        Color of graph edges.
    tree_line_width : float
        Width of tree edges.
    tree_line_color : Any
        Color of tree edges.
    show_weights : bool
        Label edges with their weights.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """

    if fig is None:
        fig = go.Figure()

    for e in graph.edges():
        p1, p2 = pos[e.head], pos[e.tail]
        fig.add_trace(go.Scatter(
            x=[p1[0], p2[0]], y=[p1[1], p2[1]],
            mode='lines',
            line=dict(color=line_color, width=line_width),
            hoverinfo='skip',
            showlegend=False
        ))

    if tree is not None:
        for e in tree.edges:
            p1, p2 = pos[e.head], pos[e.tail]
            fig.add_trace(go.Scatter(
                x=[p1[0], p2[0]], y=[p1[1], p2[1]],
                mode='lines',
                line=dict(color=tree_line_color, width=tree_line_width),
                name=f'({e.head}, {e.tail}, {e.weight})',
                showlegend=False
            ))

    if show_weights:
        mids = [((pos[e.head] + pos[e.tail]) / 2, e.weight) for e in graph.edges()]
        fig.add_trace(go.Scatter(
            x=[m[0] for m, _ in mids], y=[m[1] for m, _ in mids],
            mode='text',
            text=[str(w) for _, w in mids],
            showlegend=False,
            name='Weights'
        ))

    fig.add_trace(go.Scatter(
        x=pos[1:, 0], y=pos[1:, 1],
        mode='markers+text',
        marker=dict(size=marker_size, color=marker_color),
        text=[str(v) for v in graph.vertices],
        textposition='top center',
        name='Vertices'
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(showgrid=False, visible=False),
        yaxis=dict(showgrid=False, visible=False, scaleanchor='x'),
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig


def plot_spanning_tree(
    graph: Graph,
    tree: SpanningTree,
    ax: Optional[Axes] = None,
    line_width: float = 2.5,
    line_color: Any = "r",
):
    """
    Plot only the edges of a spanning tree using Matplotlib.

    Parameters
    ----------
    graph : Graph
        The graph the tree was computed from; used for the vertex layout.
    tree : SpanningTree
        The tree whose edges will be plotted.
    ax : matplotlib.axes.Axes, optional
        An optional Matplotlib axis to plot on. A new figure is created if None.
    line_width : float, optional
        Width of the tree edges, by default 2.5.
    line_color : Any, optional
        Color of the tree edges, by default 'r'.

    Returns
    -------
    matplotlib.axes.Axes
        The axis used for plotting.
    """

    pos = circular_layout(graph.num_vertices)

    if ax is None:
        fig, ax = plt.subplots()
    plot_edges(
        tree.edges, pos, ax, line_width=line_width, line_color=line_color,
        show_weights=True,
    )
    ax.scatter(pos[1:, 0], pos[1:, 1], color="k", s=20, zorder=3)
    ax.set_title(f"Total weight = {tree.total_weight}")
    return ax
