"""
defaults.py — Built-in Sample Graphs
=====================================
One builder per algorithm.  Each returns a FRESH Graph so runs never
share a mutable object.  The algorithm registry wires every builder to
its algorithm explicitly; nothing inside a runner falls back to these.

Each sample is chosen to show something interesting:
  • BFS / DFS      – a small tree, so layers and backtracking are obvious
  • Dijkstra       – A→B is beaten by A→C→B
  • Prim / Kruskal – several equal-looking choices and a pendant vertex
  • Bellman-Ford   – negative edges, including the cycle D→E→D (-1)
"""

from typing import Callable, Dict

from graph.graph import Graph


def traversal_graph() -> Graph:
    """Undirected, unweighted tree A..F used by BFS and DFS."""
    return Graph.build(
        "ABCDEF",
        [("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("C", "F")],
        directed=False,
        weighted=False,
    )


def dijkstra_graph() -> Graph:
    return Graph.build(
        "ABCDE",
        [
            ("A", "B", 4), ("A", "C", 2), ("B", "D", 5), ("C", "B", 1),
            ("C", "D", 8), ("C", "E", 10), ("D", "E", 2),
        ],
        directed=True,
    )


def prim_graph() -> Graph:
    return Graph.build(
        "ABCDE",
        [
            ("A", "B", 2), ("A", "C", 3), ("A", "D", 4), ("B", "C", 1),
            ("B", "D", 5), ("C", "D", 6), ("D", "E", 2),
        ],
        directed=False,
    )


def kruskal_graph() -> Graph:
    return Graph.build(
        "ABCDE",
        [
            ("A", "B", 2), ("A", "C", 3), ("B", "C", 1), ("B", "D", 5),
            ("C", "D", 4), ("C", "E", 6), ("D", "E", 2),
        ],
        directed=False,
    )


def bellman_ford_graph() -> Graph:
    return Graph.build(
        "ABCDE",
        [
            ("A", "B", 4), ("A", "C", 2), ("B", "D", 3), ("C", "B", -1),
            ("C", "D", 8), ("C", "E", 10), ("D", "E", 2), ("E", "D", -3),
        ],
        directed=True,
    )


DEFAULT_GRAPHS: Dict[str, Callable[[], Graph]] = {
    "bfs":          traversal_graph,
    "dfs":          traversal_graph,
    "dijkstra":     dijkstra_graph,
    "prim":         prim_graph,
    "kruskal":      kruskal_graph,
    "bellman-ford": bellman_ford_graph,
}
