import pytest
from pymst.Graph import Edge
from pymst.GraphIO import load_graph, parse_edge_list


SQUARE = """\
# a square with one diagonal
4
1 2 1
2 3 2

3 4 3   # bottom
1 4 4
1 3 10
"""


def test_parse_square():
    n, edges = parse_edge_list(SQUARE)
    assert n == 4
    assert edges[0] == Edge(1, 2, 1)
    assert edges[-1] == Edge(1, 3, 10)
    assert len(edges) == 5
    assert all(isinstance(e.weight, int) for e in edges)


def test_parse_float_weights():
    n, edges = parse_edge_list("3\n1 2 0.5\n2 3 2\n")
    assert n == 3
    assert edges == [Edge(1, 2, 0.5), Edge(2, 3, 2.0)]
    assert isinstance(edges[1].weight, float)


def test_parse_header_only():
    assert parse_edge_list("5\n") == (5, [])


def test_parse_single_edge():
    assert parse_edge_list("2\n1 2 7") == (2, [Edge(1, 2, 7)])


@pytest.mark.parametrize(
    "text",
    [
        "",
        "# only a comment\n",
        "zero\n1 2 3\n",
        "0\n",
        "3 4\n1 2 3\n",
        "3\n1 2\n",
        "3\n1 2 x\n",
        "3\n1.5 2 3\n",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_edge_list(text)


def test_load_graph(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text(SQUARE)
    g = load_graph(path)
    assert g.num_vertices == 4
    assert g.num_edges == 5
    assert g.mst_kruskal().total_weight == 6


def test_load_graph_vertex_out_of_range(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("2\n1 3 1\n")
    with pytest.raises(IndexError):
        load_graph(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "missing.txt")


def test_parse_large_integers_exactly():
    big = 2**53 + 1
    n, edges = parse_edge_list(f"2\n1 2 {big}\n")
    assert n == 2
    assert edges == [Edge(1, 2, big)]
    assert isinstance(edges[0].weight, int)
    assert edges[0].weight == 9007199254740993
