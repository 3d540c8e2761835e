"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra with a LINEAR SCAN for the next node (graphs
are tens of nodes; a scan keeps the tie-break obvious: first node in
insertion order wins).

Yields a Step at:
  1. Initialise distances (start = 0, rest = ∞)
  2. Visit the closest unvisited node  →  its distance is final
  3. After relaxing that node's edges:
       • one step listing every improved neighbour, or
       • one "no shorter path found" step when nothing improved
  4. Final step  →  all distances plus the shortest-path tree

Overlay: DistancesAux on every step.

Correctness note: Dijkstra requires non-negative weights.  Nothing here
guards against negative ones; that is what Bellman-Ford is for.
"""

from dataclasses import dataclass, field
from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph
from algorithms.paths import shortest_path_tree
from algorithms.step import (
    DistancesAux, Step, StepBuilder, distance_table, fmt_number, highlight,
)

INF = float("inf")


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start):",
    "    dist ← {v: ∞ for v in V};  dist[start] ← 0",
    "    unvisited ← V",
    "    while unvisited has a finite dist:",
    "        u ← argmin dist[v] over unvisited",
    "        unvisited.remove(u)",
    "        for (v, w) in adj(u), v unvisited:",
    "            if dist[u] + w < dist[v]:",
    "                dist[v] ← dist[u] + w;  prev[v] ← u",
    "    return dist, prev",
]


@dataclass
class _DijkstraState:
    dist:      Dict[int, float]         = field(default_factory=dict)
    previous:  Dict[int, Optional[int]] = field(default_factory=dict)
    unvisited: List[int]                = field(default_factory=list)   # node order
    visited:   List[int]                = field(default_factory=list)

    def closest(self) -> Optional[int]:
        best, best_d = None, INF
        for nid in self.unvisited:
            if self.dist[nid] < best_d:
                best, best_d = nid, self.dist[nid]
        return best


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(graph: Graph, start: int) -> Generator[Step, None, None]:

    sb    = StepBuilder(graph)
    state = _DijkstraState()
    for nid in graph.nodes:
        state.dist[nid] = 0 if nid == start else INF
        state.previous[nid] = None
        state.unvisited.append(nid)
    start_label = graph.label(start)

    def aux() -> DistancesAux:
        return DistancesAux(distance_table(graph, state.dist))

    # --- init step ---
    yield sb.build(
        f"Step 1: Start Dijkstra at vertex {start_label}. Set the distance to "
        f"{start_label} to 0 and every other distance to ∞.",
        highlights=highlight([start]),
        visited=highlight(),
        aux=aux(),
    )

    # --- main loop ---
    while state.unvisited:
        current = state.closest()
        if current is None:
            break   # everything left is unreachable

        state.unvisited.remove(current)
        state.visited.append(current)
        label = graph.label(current)
        cur_d = state.dist[current]

        yield sb.build(
            f"Step {sb.count + 1}: Visit vertex {label} (distance = {fmt_number(cur_d)}). "
            f"Mark it visited.",
            highlights=highlight([current]),
            visited=highlight(state.visited),
            aux=aux(),
        )

        # -- relax edges to unvisited neighbours --
        pending: List[int] = []
        updated: List[int] = []
        updated_edges: List[Tuple[int, int]] = []
        updates: List[str] = []
        for nbr, edge in graph.neighbours(current):
            if nbr in state.visited:
                continue
            pending.append(nbr)
            old = state.dist[nbr]
            new = cur_d + edge.cost
            nbr_label = graph.label(nbr)
            if new < old:
                state.dist[nbr] = new
                state.previous[nbr] = current
                updated.append(nbr)
                updated_edges.append((current, nbr))
                if old == INF:
                    updates.append(f"{nbr_label} = {fmt_number(new)}")
                else:
                    updates.append(
                        f"{nbr_label} = min({fmt_number(old)}, {fmt_number(cur_d)}+"
                        f"{fmt_number(edge.cost)}) = {fmt_number(new)}"
                    )
            elif old != INF:
                updates.append(
                    f"{nbr_label} = min({fmt_number(old)}, {fmt_number(cur_d)}+"
                    f"{fmt_number(edge.cost)}) = {fmt_number(old)} (no change)"
                )

        if updated:
            yield sb.build(
                f"Step {sb.count + 1}: Explore the neighbours of {label}. "
                f"Update distances: {', '.join(updates)}.",
                highlights=highlight(updated, updated_edges),
                visited=highlight(state.visited),
                aux=aux(),
            )
        elif pending:
            yield sb.build(
                f"Step {sb.count + 1}: Check the neighbours of {label}. "
                f"No shorter path found.",
                highlights=highlight(pending, [(current, n) for n in pending]),
                visited=highlight(state.visited),
                aux=aux(),
            )

    # --- final step ---
    summary = ", ".join(
        f"{node.label} → {fmt_number(state.dist[nid])}" for nid, node in graph.nodes.items()
    )
    tree_nodes, tree_edges = shortest_path_tree(graph, start, state.dist, state.previous)
    yield sb.build(
        f"Done: all shortest paths from vertex {start_label} have been computed. "
        f"Final distances: {summary}.",
        visited=highlight(state.visited),
        path=highlight(tree_nodes, tree_edges),
        aux=aux(),
        is_final=True,
    )
