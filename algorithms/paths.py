"""
paths.py — Predecessor-chain reconstruction
============================================
Shared by Dijkstra and Bellman-Ford to turn a `previous` map into the
node / edge set drawn as the shortest-path tree on the final step.
"""

from typing import Dict, List, Optional, Tuple

from graph import Graph


def reconstruct(previous: Dict[int, Optional[int]], target: int) -> List[int]:
    """Walk predecessors back from `target`; returns start … target."""
    path: List[int] = []
    seen = set()
    cur: Optional[int] = target
    while cur is not None and cur not in seen:
        seen.add(cur)
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path


def shortest_path_tree(
    graph: Graph,
    start: int,
    dist: Dict[int, float],
    previous: Dict[int, Optional[int]],
) -> Tuple[List[int], List[Tuple[int, int]]]:
    """
    Union of the predecessor chains of every reachable node.

    Returns (nodes, edges), both de-duplicated in first-seen order, with
    the start node always included.
    """
    nodes: Dict[int, None] = {}
    edges: Dict[Tuple[int, int], None] = {}
    for nid in graph.nodes:
        if nid == start or dist[nid] == float("inf"):
            continue
        chain = reconstruct(previous, nid)
        for n in chain:
            nodes[n] = None
        for a, b in zip(chain, chain[1:]):
            edges[(a, b)] = None
    nodes[start] = None
    return list(nodes), list(edges)
