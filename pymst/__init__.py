from pymst.DisjointSet import DisjointSet
from pymst.Graph import Edge, Graph
from pymst.MinimumSpanningTree import SpanningTree, mst_prim, mst_kruskal
from pymst.GraphIO import parse_edge_list, load_graph
from pymst.formatting import (
    format_graph,
    format_spanning_tree,
    format_disjoint_set
)
from pymst.plotting import (
    circular_layout,
    plot_graph,
    plot_spanning_tree
)

__all__ = [
    "DisjointSet",
    "Edge",
    "Graph",
    "SpanningTree",
    "mst_prim",
    "mst_kruskal",
    "parse_edge_list",
    "load_graph",
    "format_graph",
    "format_spanning_tree",
    "format_disjoint_set",
    "circular_layout",
    "plot_graph",
    "plot_spanning_tree",
]
