"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
The single-source shortest-path algorithm that handles NEGATIVE edge
weights, and reports (rather than loops on) negative cycles.

Structure:
  • Up to |V|-1 passes, each relaxing every edge once.  Undirected edges
    are relaxed in both directions.
  • A pass with no update ends the passes early.
  • One detection scan: anything still relaxable ⇒ negative cycle.

Yields a Step for:
  1. Initial distances
  2. Each pass that relaxed something (all its updates in one step)
  3. The pass that relaxed nothing (early termination)
  4a. Negative cycle: the still-relaxable edges, then a terminal step
      saying shortest paths are undefined
  4b. Otherwise: "nothing relaxable", then the final distances with the
      combined predecessor chains as `path`

A negative cycle is an end state carried as data, never an exception.
Overlay: DistancesAux (with PassInfo on pass steps).
"""

from dataclasses import dataclass, field
from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph
from algorithms.paths import shortest_path_tree
from algorithms.step import (
    DistancesAux, PassInfo, Step, StepBuilder, distance_table, fmt_number, highlight,
)

INF = float("inf")
Relaxation = Tuple[int, int, float]   # (u, v, w)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BellmanFord(graph, start):",
    "    dist ← {v: ∞ for v in V};  dist[start] ← 0",
    "    for i in 1 … |V|-1:",
    "        for each edge (u, v, w):",
    "            if dist[u] + w < dist[v]:",
    "                dist[v] ← dist[u] + w;  prev[v] ← u",
    "        if nothing changed: break",
    "    for each edge (u, v, w):",
    "        if dist[u] + w < dist[v]: return NEGATIVE CYCLE",
    "    return dist, prev",
]


@dataclass
class _BellmanFordState:
    dist:     Dict[int, float]         = field(default_factory=dict)
    previous: Dict[int, Optional[int]] = field(default_factory=dict)

    def can_relax(self, u: int, v: int, w: float) -> bool:
        return self.dist[u] != INF and self.dist[u] + w < self.dist[v]


def _relaxations(graph: Graph) -> List[Relaxation]:
    out: List[Relaxation] = []
    for edge in graph.edges:
        out.append((edge.source, edge.target, edge.cost))
        if not graph.directed and edge.source != edge.target:
            out.append((edge.target, edge.source, edge.cost))
    return out


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bellman_ford(graph: Graph, start: int) -> Generator[Step, None, None]:

    sb    = StepBuilder(graph)
    state = _BellmanFordState()
    for nid in graph.nodes:
        state.dist[nid] = 0 if nid == start else INF
        state.previous[nid] = None
    start_label = graph.label(start)
    relaxations = _relaxations(graph)
    total_passes = graph.node_count() - 1

    def aux(pass_no: Optional[int] = None, negative_cycle: bool = False) -> DistancesAux:
        info = PassInfo(pass_no, total_passes) if pass_no is not None else None
        return DistancesAux(
            distance_table(graph, state.dist), pass_info=info, negative_cycle=negative_cycle
        )

    def arrow(u: int, v: int) -> str:
        return f"{graph.label(u)}→{graph.label(v)}"

    # --- init step ---
    yield sb.build(
        f"Step 1: Initialise distances. Set {start_label} = 0, all others = ∞",
        highlights=highlight([start]),
        visited=highlight(),
        aux=aux(),
    )

    # ==============================================================
    # RELAXATION PASSES
    # ==============================================================
    for pass_no in range(1, total_passes + 1):
        relaxed: List[Tuple[int, int]] = []
        updates: List[str] = []
        for u, v, w in relaxations:
            if not state.can_relax(u, v, w):
                continue
            old = state.dist[v]
            state.dist[v] = state.dist[u] + w
            state.previous[v] = u
            relaxed.append((u, v))
            updates.append(f"{arrow(u, v)}: {fmt_number(old)} → {fmt_number(state.dist[v])}")

        if relaxed:
            yield sb.build(
                f"Pass {pass_no} of {total_passes}: relax edges. "
                f"Updates: {', '.join(updates)}",
                highlights=highlight(edges=relaxed),
                visited=highlight(),
                aux=aux(pass_no),
            )
        else:
            yield sb.build(
                f"Pass {pass_no} of {total_passes}: no edge can be relaxed. "
                f"Terminating early.",
                highlights=highlight(),
                visited=highlight(),
                aux=aux(pass_no),
            )
            break

    # ==============================================================
    # NEGATIVE-CYCLE DETECTION
    # ==============================================================
    still_relaxable = [(u, v) for u, v, w in relaxations if state.can_relax(u, v, w)]

    if still_relaxable:
        listed = ", ".join(arrow(u, v) for u, v in still_relaxable)
        yield sb.build(
            f"Step {sb.count + 1}: Negative-weight cycle detected! These edges can "
            f"still be relaxed: {listed}",
            highlights=highlight(edges=still_relaxable),
            visited=highlight(),
            aux=aux(negative_cycle=True),
        )
        yield sb.build(
            "Error: Bellman-Ford cannot compute shortest paths when a negative-weight "
            "cycle is reachable. Shortest paths are undefined; distances would keep "
            "decreasing forever.",
            highlights=highlight(edges=still_relaxable),
            visited=highlight(),
            aux=aux(negative_cycle=True),
            is_final=True,
        )
        return

    yield sb.build(
        f"Step {sb.count + 1}: Check for negative-weight cycles... no edge can be relaxed.",
        highlights=highlight(),
        visited=highlight(),
        aux=aux(),
    )

    summary = ", ".join(
        f"{node.label} → {fmt_number(state.dist[nid])}" for nid, node in graph.nodes.items()
    )
    tree_nodes, tree_edges = shortest_path_tree(graph, start, state.dist, state.previous)
    yield sb.build(
        f"Done: Bellman-Ford finished successfully! Shortest distances from "
        f"{start_label}: {summary}.",
        visited=highlight(),
        path=highlight(tree_nodes, tree_edges),
        aux=aux(),
        is_final=True,
    )
