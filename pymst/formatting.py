"""Plain-text rendering of graphs, spanning trees and disjoint sets."""

from pymst.DisjointSet import DisjointSet
from pymst.Graph import Graph
from pymst.MinimumSpanningTree import SpanningTree

_RULE = "-" * 66


def format_graph(graph: Graph) -> str:
    """
    Render the adjacency lists of ``graph`` as a table.

    Each row lists one vertex followed by its ``(tail, weight)`` pairs.

    Parameters
    ----------
    graph : Graph
        The graph to render.

    Returns
    -------
    str
        The table, terminated by a newline.
    """

    lines = [_RULE, "Vertex  adjacency lists", _RULE]
    for v in graph.vertices:
        pairs = " ".join(f"({e.tail:2}, {e.weight:2})" for e in graph.incident_edges(v))
        lines.append(f"{v:4} : {pairs}".rstrip())
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


def format_spanning_tree(tree: SpanningTree) -> str:
    """
    Render the edges of a spanning tree as ``(head, tail, weight)`` lines
    followed by the total weight.

    Parameters
    ----------
    tree : SpanningTree
        Result of :func:`~pymst.MinimumSpanningTree.mst_prim` or
        :func:`~pymst.MinimumSpanningTree.mst_kruskal`.

    Returns
    -------
    str
        The listing, terminated by a newline.
    """

    lines = [f"({e.head:2}, {e.tail:2}, {e.weight:2})" for e in tree.edges]
    lines.append("")
    lines.append(f"Total weight = {tree.total_weight}")
    return "\n".join(lines) + "\n"


def format_disjoint_set(dsets: DisjointSet) -> str:
    """
    Render element labels over their slots, four columns each.

    A root shows its set size negated; any other element shows its parent.
    """

    def slot(i: int) -> int:
        return -dsets.size_of[i] if dsets.parent[i] == i else dsets.parent[i]

    labels = "".join(f"{i:4}" for i in range(1, dsets.size + 1))
    slots = "".join(f"{slot(i):4}" for i in range(1, dsets.size + 1))
    return f"{labels}\n{slots}\n"
