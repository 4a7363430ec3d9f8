"""Reading graphs from plain-text edge lists.

The format is the vertex count on the first line followed by one edge per
line as ``head tail weight``::

    # a square with one diagonal
    4
    1 2 1
    2 3 2
    3 4 3
    1 4 4
    1 3 10

Blank lines and ``#`` comments are ignored.
"""

import io
import logging
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np

from pymst.Graph import Edge, Graph

logger = logging.getLogger(__name__)


def _data_lines(text: str) -> List[str]:
    lines = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if line:
            lines.append(line)
    return lines


def _number(token: str) -> Union[int, float]:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError as exc:
        raise ValueError(f"malformed edge weight {token!r}") from exc


def parse_edge_list(text: str) -> Tuple[int, List[Edge]]:
    """
    Parse an edge list.

    Parameters
    ----------
    text : str
        Contents in the edge list format described above.

    Returns
    -------
    Tuple[int, List[Edge]]
        The vertex count and the edges in file order. Weights are ``int``
        when every weight is written as an integer, ``float`` otherwise.

    Raises
    ------
    ValueError
        If the header is missing or not a positive integer, or an edge line
        does not hold exactly three numbers with integral endpoints.
    """

    lines = _data_lines(text)
    if not lines:
        raise ValueError("edge list is empty")

    header = lines[0].split()
    if len(header) != 1 or not header[0].isdigit() or int(header[0]) < 1:
        raise ValueError(f"expected a positive vertex count, got {lines[0]!r}")
    num_vertices = int(header[0])

    if len(lines) == 1:
        return num_vertices, []

    try:
        table = np.loadtxt(io.StringIO("\n".join(lines[1:])), dtype=str, ndmin=2)
    except ValueError as exc:
        raise ValueError(f"malformed edge line: {exc}") from exc

    if table.shape[1] != 3:
        raise ValueError(f"edge lines need 3 columns, found {table.shape[1]}")

    # tokens are converted with int() so large integers stay exact
    try:
        ends = [(int(h), int(t)) for h, t in table[:, :2]]
    except ValueError as exc:
        raise ValueError(f"edge endpoints must be integers: {exc}") from exc

    weights = [_number(w) for w in table[:, 2]]
    if not all(isinstance(w, int) for w in weights):
        weights = [float(w) for w in weights]
    edges = [Edge(h, t, w) for (h, t), w in zip(ends, weights)]
    logger.debug("parsed %d vertices and %d edge lines", num_vertices, len(edges))
    return num_vertices, edges


def load_graph(path: Union[str, Path]) -> Graph:
    """
    Build a :class:`~pymst.Graph.Graph` from an edge list file.

    Parameters
    ----------
    path : str or Path
        File in the edge list format.

    Returns
    -------
    Graph
        The graph with all edges inserted in file order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the contents cannot be parsed.
    IndexError
        If an edge references a vertex outside ``1..N``.
    """

    num_vertices, edges = parse_edge_list(Path(path).read_text())
    return Graph(num_vertices, edges)
