import numpy as np
import matplotlib.pyplot as plt
from pymst import Graph, plot_graph

rng = np.random.default_rng(0)
n = 10
edges = [
    (u, v, int(rng.integers(1, 20)))
    for u in range(1, n + 1)
    for v in range(u + 1, n + 1)
    if rng.random() < 0.35
]
# keep the graph connected
edges += [(v, v + 1, 25) for v in range(1, n)]

graph = Graph(n, edges)
tree = graph.mst_kruskal()

fig, ax = plt.subplots()
plot_graph(graph, tree, title=f"MST weight {tree.total_weight}", ax=ax)
plt.show()

plot_graph(graph, tree).show()
