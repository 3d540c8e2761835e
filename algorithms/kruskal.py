"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Sorts every edge by weight and keeps the ones that join two different
components, tracked by a union-find (union by rank + path compression).

Yields a Step at:
  1. Sorted edge list + all-singleton partition
  2. Each examined edge:
       • endpoints in different sets  →  union, add to MST
       • same set                      →  skip (would create a cycle)
  3. Final step  →  chosen edges and total weight

Stops as soon as the tree has |V| - 1 edges.  On a disconnected graph
the edges run out first and the result is a spanning forest.

Kruskal has no start vertex; the `start` argument exists only so every
runner shares one call signature, and is ignored.
Overlay: UnionFindAux (MST weight + partition) on every step.
"""

from dataclasses import dataclass, field
from typing import Generator, List, Optional, Tuple

from graph import Edge, Graph
from algorithms.step import Step, StepBuilder, UnionFindAux, fmt_number, highlight
from algorithms.union_find import UnionFind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",
    "    sort edges by weight",
    "    make_set(v) for v in V",
    "    for (u, v, w) in sorted edges:",
    "        if |mst| == |V| - 1: break",
    "        if find(u) != find(v):",
    "            union(u, v);  mst.add((u, v))",
    "        else: skip                       // cycle",
    "    return mst",
]


@dataclass
class _KruskalState:
    uf:        UnionFind
    mst_edges: List[Edge] = field(default_factory=list)
    weight:    float      = 0


def _pairs(edges: List[Edge]) -> List[Tuple[int, int]]:
    return [e.endpoints for e in edges]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def kruskal(graph: Graph, start: Optional[int] = None) -> Generator[Step, None, None]:

    sb    = StepBuilder(graph)
    state = _KruskalState(uf=UnionFind(graph.node_ids()))
    sorted_edges = sorted(graph.edges, key=lambda e: e.cost)   # stable

    def fmt_edge(edge: Edge) -> str:
        return f"{graph.label(edge.source)}-{graph.label(edge.target)}({fmt_number(edge.cost)})"

    def aux() -> UnionFindAux:
        sets = tuple(
            tuple(sorted(graph.labels(group))) for group in state.uf.groups()
        )
        return UnionFindAux(weight=state.weight, sets=sets)

    # --- init step ---
    yield sb.build(
        f"Step 1: Sort all edges by weight: [{', '.join(fmt_edge(e) for e in sorted_edges)}]",
        highlights=highlight(edges=_pairs(sorted_edges)),
        visited=highlight(),
        aux=aux(),
    )

    # --- examine edges cheapest first ---
    for edge in sorted_edges:
        if len(state.mst_edges) == graph.node_count() - 1:
            break

        if state.uf.union(edge.source, edge.target):
            state.mst_edges.append(edge)
            state.weight += edge.cost
            yield sb.build(
                f"Step {sb.count + 1}: Check edge {fmt_edge(edge)}: endpoints are in "
                f"different sets → add to the MST",
                highlights=highlight([edge.source, edge.target], [edge.endpoints]),
                visited=highlight(edges=_pairs(state.mst_edges)),
                aux=aux(),
            )
        else:
            yield sb.build(
                f"Step {sb.count + 1}: Check edge {fmt_edge(edge)}: endpoints are in "
                f"the same set → skip (would create a cycle)",
                highlights=highlight(edges=[edge.endpoints]),
                visited=highlight(edges=_pairs(state.mst_edges)),
                aux=aux(),
            )

    # --- final step ---
    chosen = ", ".join(
        f"{graph.label(e.source)}-{graph.label(e.target)}" for e in state.mst_edges
    )
    yield sb.build(
        f"Done: Kruskal's algorithm is complete. The MST consists of edges: "
        f"[{chosen}]. Total weight: {fmt_number(state.weight)}",
        visited=highlight(graph.node_ids(), _pairs(state.mst_edges)),
        aux=aux(),
        is_final=True,
    )
