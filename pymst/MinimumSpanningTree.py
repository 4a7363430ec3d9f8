"""
Minimum Spanning Tree module
============================

Two greedy algorithms that compute a minimum spanning tree of a
:class:`~pymst.Graph.Graph`:

* :func:`mst_prim` grows a single tree from a start vertex, each step adding
  the cheapest edge that leaves the tree. Selection is either a plain scan
  of the distance array (``method="scan"``, O(V²)) or a lazy binary heap
  (``method="heap"``, O(E log V)); both emit the same edges in the same
  order.
* :func:`mst_kruskal` processes all edges by ascending weight from a
  min-heap and keeps those that join two different components, tracked with
  a :class:`~pymst.DisjointSet.DisjointSet`.

Neither algorithm mutates the graph. On a disconnected graph Prim spans only
the component of the start vertex and Kruskal returns a spanning forest; the
caller can tell by comparing :attr:`SpanningTree.num_edges` with ``N - 1``.
"""

import heapq
import logging
from typing import List, Literal, NamedTuple, Set, Union

import numpy as np

from pymst.DisjointSet import DisjointSet
from pymst.Graph import Edge, Graph

logger = logging.getLogger(__name__)


class SpanningTree(NamedTuple):
    """Edges selected by a spanning tree algorithm and their total weight."""

    edges: List[Edge]
    total_weight: Union[int, float]

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def vertices(self) -> Set[int]:
        """Vertices touched by at least one tree edge."""
        return {v for e in self.edges for v in (e.head, e.tail)}

    def is_spanning(self, num_vertices: int) -> bool:
        """Check whether the tree connects all ``num_vertices`` vertices."""
        return self.num_edges == num_vertices - 1


def _prim_scan(graph: Graph, start: int) -> List[Edge]:
    n = graph.num_vertices
    # plain Python numbers keep large integer weights exact
    dist: List[Union[int, float]] = [np.inf] * (n + 1)
    path = np.zeros(n + 1, dtype=int)
    done = np.zeros(n + 1, dtype=bool)

    dist[start] = 0
    done[start] = True
    done[0] = True  # slot zero is not a vertex

    tree = []
    v = start
    while True:
        for e in graph.incident_edges(v):
            t = e.tail
            if not done[t] and e.weight < dist[t]:
                dist[t] = e.weight
                path[t] = v

        undone = np.flatnonzero(~done).tolist()
        if not undone:
            break
        # min keeps the first minimum, so the lowest label wins on ties
        v = min(undone, key=dist.__getitem__)
        if dist[v] == np.inf:
            break

        tree.append(Edge(int(path[v]), v, dist[v]))
        done[v] = True

    return tree


def _prim_heap(graph: Graph, start: int) -> List[Edge]:
    n = graph.num_vertices
    dist = [np.inf] * (n + 1)
    done = [False] * (n + 1)
    best: List[Union[Edge, None]] = [None] * (n + 1)
    dist[start] = 0
    done[start] = True

    # entries are (distance, vertex); stale ones are skipped on pop
    heap: list = []
    tree = []
    v = start
    while True:
        for e in graph.incident_edges(v):
            t = e.tail
            if not done[t] and e.weight < dist[t]:
                dist[t] = e.weight
                best[t] = e
                heapq.heappush(heap, (e.weight, t))

        while heap and (done[heap[0][1]] or heap[0][0] > dist[heap[0][1]]):
            heapq.heappop(heap)
        if not heap:
            break

        _, v = heapq.heappop(heap)
        e = best[v]
        tree.append(Edge(e.head, v, e.weight))
        done[v] = True

    return tree


def mst_prim(
    graph: Graph, start: int = 1, method: Literal["scan", "heap"] = "scan"
) -> SpanningTree:
    """Compute a minimum spanning tree with Prim's algorithm.

    Parameters
    ----------
    graph : Graph
        The graph to span. It is only read.
    start : int, optional
        Vertex the tree is grown from. Default is 1.
    method : {"scan", "heap"}, optional
        How the next vertex is selected. ``"scan"`` searches the whole
        distance array each step; ``"heap"`` uses a priority queue. Both
        produce identical output. Default is "scan".

    Returns
    -------
    SpanningTree
        Tree edges ``(parent, vertex, weight)`` in the order the vertices were
        settled, and their total weight.

    Raises
    ------
    ValueError
        If ``method`` is not recognized.
    IndexError
        If ``start`` is not a vertex of the graph.

    """

    if method not in {"scan", "heap"}:
        raise ValueError("method must be 'scan' or 'heap'")
    if not 1 <= start <= graph.num_vertices:
        raise IndexError(f"vertex {start} outside [1, {graph.num_vertices}]")

    if method == "scan":
        edges = _prim_scan(graph, start)
    else:
        edges = _prim_heap(graph, start)

    tree = SpanningTree(edges, sum(e.weight for e in edges))
    if not tree.is_spanning(graph.num_vertices):
        logger.warning(
            "graph is disconnected: Prim reached %d of %d vertices from %d",
            tree.num_edges + 1,
            graph.num_vertices,
            start,
        )
    return tree


def mst_kruskal(graph: Graph) -> SpanningTree:
    """Compute a minimum spanning tree (or forest) with Kruskal's algorithm.

    Parameters
    ----------
    graph : Graph
        The graph to span. It is only read.

    Returns
    -------
    SpanningTree
        Accepted edges in acceptance order and their total weight. On a
        disconnected graph this is a spanning forest with fewer than
        ``N - 1`` edges.

    """

    n = graph.num_vertices
    # each undirected edge once; (weight, head, tail) orders the heap
    heap = [(e.weight, e.head, e.tail) for e in graph.edges() if e.head < e.tail]
    heapq.heapify(heap)

    dsets = DisjointSet(n)
    tree: List[Edge] = []
    total: Union[int, float] = 0

    while len(tree) < n - 1 and heap:
        w, u, v = heapq.heappop(heap)
        r, s = dsets.find(u), dsets.find(v)
        if r == s:
            logger.debug("discarded edge (%d, %d, %s): would close a cycle", u, v, w)
            continue
        dsets.join(r, s)
        tree.append(Edge(u, v, w))
        total += w
        logger.debug("accepted edge (%d, %d, %s)", u, v, w)

    if len(tree) < n - 1:
        logger.warning(
            "graph is disconnected: Kruskal found a forest of %d components",
            len(dsets),
        )
    return SpanningTree(tree, total)
