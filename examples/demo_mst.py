import logging
from pymst import Graph, format_graph, format_spanning_tree

logging.basicConfig(level=logging.INFO)

edges = [
    (1, 2, 1),
    (2, 3, 2),
    (3, 4, 3),
    (1, 4, 4),
    (1, 3, 10),
    (4, 5, 7),
    (2, 5, 6),
]

graph = Graph(5, edges)
print(format_graph(graph))

print("Prim's MST:")
print(format_spanning_tree(graph.mst_prim()))

print("Kruskal's MST:")
print(format_spanning_tree(graph.mst_kruskal()))
