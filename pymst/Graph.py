"""
Graph module
============

An undirected, weighted graph over the vertices ``1..N`` stored as adjacency
lists. Every undirected edge ``(u, v, w)`` is kept twice, once in the list of
``u`` and once, mirrored, in the list of ``v``, so incident edges of any
vertex can be read without searching the whole graph. The two copies always
carry the same weight and there is at most one edge per unordered pair;
inserting an existing pair only updates its weight.

Vertex ``0`` does not exist. It is used by the spanning tree algorithms as
the "no predecessor" value.
"""

import logging
from typing import Iterable, Iterator, List, NamedTuple, Optional, Union, Tuple

import numpy as np
from scipy.sparse import csr_matrix

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """A weighted edge from ``head`` to ``tail``."""

    head: int
    tail: int
    weight: Union[int, float]

    def reverse(self) -> "Edge":
        """Return the same edge seen from ``tail``."""
        return Edge(self.tail, self.head, self.weight)

    def links_same_nodes(self, other: "Edge") -> bool:
        """Check whether ``other`` joins the same ordered pair of vertices."""
        return self.head == other.head and self.tail == other.tail


EdgeLike = Union[Edge, Tuple[int, int, Union[int, float]]]


class Graph:
    """Undirected weighted graph with vertices numbered from 1."""

    def __init__(self, num_vertices: int, edges: Optional[Iterable[EdgeLike]] = None):
        """
        Create a graph with ``num_vertices`` vertices and, optionally, edges.

        Parameters
        ----------
        num_vertices : int
            Number of vertices. Vertices are labeled ``1..num_vertices``.
        edges : Iterable[Edge], optional
            Edges inserted in order with :meth:`insert_edge`. A later edge
            joining an already connected pair overwrites the earlier weight.

        Raises
        ------
        ValueError
            If ``num_vertices`` is smaller than 1.
        """

        if num_vertices < 1:
            raise ValueError("number of vertices must be ≥ 1")
        self._n = num_vertices
        self._table: List[List[Edge]] = [[] for _ in range(num_vertices + 1)]
        self._n_edges = 0

        if edges is not None:
            for e in edges:
                self.insert_edge(e)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeLike], num_vertices: int) -> "Graph":
        """Build a graph from an edge list, see :class:`Graph`."""
        return cls(num_vertices, edges)

    @property
    def num_vertices(self) -> int:
        """
        Number of vertices.

        Returns
        -------
        int
            The ``N`` of the vertex labels ``1..N``.
        """
        return self._n

    @property
    def num_edges(self) -> int:
        """Number of undirected edges."""
        return self._n_edges

    @property
    def vertices(self) -> range:
        """
        The vertex labels in ascending order.

        Returns
        -------
        range
            ``range(1, N + 1)``.
        """
        return range(1, self._n + 1)

    def _check(self, v: int) -> None:
        if not 1 <= v <= self._n:
            raise IndexError(f"vertex {v} outside [1, {self._n}]")

    def _locate(self, head: int, tail: int) -> Optional[int]:
        # position of the edge head -> tail in the adjacency list of head
        for i, ed in enumerate(self._table[head]):
            if ed.tail == tail:
                return i
        return None

    def insert_edge(self, e: EdgeLike) -> None:
        """
        Insert the undirected edge ``e``, or update its weight if present.

        Parameters
        ----------
        e : Edge or tuple
            ``(head, tail, weight)``.

        Raises
        ------
        ValueError
            If ``e`` does not carry exactly a head, a tail and a weight.
        IndexError
            If an endpoint is not a vertex of the graph.
        """

        if len(e) != 3:
            raise ValueError(f"edge needs (head, tail, weight), got {tuple(e)}")
        e = Edge(*e)
        self._check(e.head)
        self._check(e.tail)

        i = self._locate(e.head, e.tail)
        if i is None:
            self._table[e.head].append(e)
            if e.head != e.tail:
                self._table[e.tail].append(e.reverse())
            self._n_edges += 1
            logger.debug("inserted edge %s", e)
            return

        self._table[e.head][i] = e
        if e.head != e.tail:
            j = self._locate(e.tail, e.head)
            self._table[e.tail][j] = e.reverse()
        logger.debug("updated edge %s", e)

    def remove_edge(self, e: EdgeLike) -> None:
        """
        Remove the undirected edge joining the endpoints of ``e``.

        The weight of ``e``, if any, is not compared.

        Parameters
        ----------
        e : Edge or tuple
            ``(head, tail[, weight])``.

        Raises
        ------
        IndexError
            If an endpoint is not a vertex of the graph.
        KeyError
            If the endpoints are not connected by an edge.
        """

        head, tail = e[0], e[1]
        self._check(head)
        self._check(tail)

        i = self._locate(head, tail)
        if i is None:
            raise KeyError(f"no edge between {head} and {tail}")

        del self._table[head][i]
        if head != tail:
            del self._table[tail][self._locate(tail, head)]
        self._n_edges -= 1
        logger.debug("removed edge (%d, %d)", head, tail)

    def incident_edges(self, v: int) -> List[Edge]:
        """Return a copy of the adjacency list of ``v``; every edge has ``head == v``."""
        self._check(v)
        return list(self._table[v])

    def neighbors(self, v: int) -> List[int]:
        """
        Vertices adjacent to ``v``, in insertion order.

        Parameters
        ----------
        v : int
            A vertex label.

        Returns
        -------
        List[int]
            The tails of the edges incident to ``v``.
        """
        self._check(v)
        return [e.tail for e in self._table[v]]

    def degree(self, v: int) -> int:
        """
        Number of edges incident to ``v``.

        Parameters
        ----------
        v : int
            A vertex label.

        Returns
        -------
        int
            The length of the adjacency list of ``v``; a self-loop counts once.
        """
        self._check(v)
        return len(self._table[v])

    def has_edge(self, u: int, v: int) -> bool:
        """
        Check whether ``u`` and ``v`` are joined by an edge.

        Parameters
        ----------
        u : int
            First endpoint.
        v : int
            Second endpoint.

        Returns
        -------
        bool
            True if the edge exists, False otherwise.
        """
        self._check(u)
        self._check(v)
        return self._locate(u, v) is not None

    def weight(self, u: int, v: int) -> Union[int, float]:
        """
        Return the weight of the edge joining ``u`` and ``v``.

        Raises
        ------
        KeyError
            If ``u`` and ``v`` are not adjacent.
        """

        self._check(u)
        self._check(v)
        i = self._locate(u, v)
        if i is None:
            raise KeyError(f"no edge between {u} and {v}")
        return self._table[u][i].weight

    def edges(self) -> Iterator[Edge]:
        """
        Iterate over every undirected edge exactly once.

        Yields
        ------
        Edge
            Edges with ``head <= tail``, grouped by head in vertex order.
        """

        for v in self.vertices:
            for e in self._table[v]:
                if e.head <= e.tail:
                    yield e

    def total_weight(self) -> Union[int, float]:
        """
        Sum of the weights of all edges.

        Returns
        -------
        int or float
            Each undirected edge is counted once.
        """
        return sum(e.weight for e in self.edges())

    def copy(self) -> "Graph":
        """
        Independent copy with the same vertices and edges.

        Returns
        -------
        Graph
            A new graph; mutating it leaves this one unchanged.
        """
        return Graph(self._n, self.edges())

    def to_sparse(self) -> csr_matrix:
        """
        Symmetric sparse adjacency matrix of the graph.

        Vertex ``v`` maps to row and column ``v - 1``. Absent edges are
        structural zeros, so zero-weight edges are dropped.

        Returns
        -------
        scipy.sparse.csr_matrix
            An (N, N) matrix of edge weights.
        """

        rows, cols, data = [], [], []
        for v in self.vertices:
            for e in self._table[v]:
                rows.append(e.head - 1)
                cols.append(e.tail - 1)
                data.append(e.weight)
        return csr_matrix(
            (np.asarray(data, dtype=float), (rows, cols)), shape=(self._n, self._n)
        )

    def mst_prim(self, start: int = 1, method: str = "scan"):
        """Minimum spanning tree grown from ``start``, see :func:`pymst.MinimumSpanningTree.mst_prim`."""
        from pymst.MinimumSpanningTree import mst_prim

        return mst_prim(self, start=start, method=method)

    def mst_kruskal(self):
        """Minimum spanning tree by sorted edges, see :func:`pymst.MinimumSpanningTree.mst_kruskal`."""
        from pymst.MinimumSpanningTree import mst_kruskal

        return mst_kruskal(self)

    def __contains__(self, e: EdgeLike) -> bool:
        """
        Check whether the endpoints of ``e`` are joined by an edge.

        Parameters
        ----------
        e : Edge or tuple
            ``(head, tail[, weight])``; the weight is not compared.

        Returns
        -------
        bool
            False for endpoints outside the graph instead of raising.
        """
        u, v = e[0], e[1]
        return 1 <= u <= self._n and 1 <= v <= self._n and self.has_edge(u, v)

    def __len__(self) -> int:
        """
        Return the number of vertices.

        Returns
        -------
        int
            Same as :attr:`num_vertices`.
        """
        return self._n

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self._n}, num_edges={self._n_edges})"
