"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows one tree from the start vertex by repeatedly taking the cheapest
edge across the cut (exactly one endpoint already in the tree).

Yields a Step at:
  1. Start vertex joins the tree, weight 0
  2. When the cut holds more than one edge  →  show every candidate
     and which one was chosen (tree state BEFORE the addition)
  3. Add the chosen vertex / edge  →  updated MST weight
  4. Final step  →  total weight as the literal sum of chosen weights

A graph that is not connected simply stops growing: the final step
reports a partial tree.  Overlay: MstAux on every step.
"""

from dataclasses import dataclass, field
from typing import Generator, List, Set, Tuple

from graph import Graph
from algorithms.step import MstAux, Step, StepBuilder, fmt_number, highlight

CutEdge = Tuple[int, int, float]   # (inside, outside, weight)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",
    "    tree ← {start};  weight ← 0",
    "    while |tree| < |V|:",
    "        cut ← edges with exactly one end in tree",
    "        if cut is empty: break          // disconnected",
    "        (u, v, w) ← min-weight edge in cut",
    "        tree.add(v);  weight ← weight + w",
    "    return tree, weight",
]


@dataclass
class _PrimState:
    in_tree:    Set[int]      = field(default_factory=set)
    tree_nodes: List[int]     = field(default_factory=list)   # join order
    mst_edges:  List[CutEdge] = field(default_factory=list)
    weight:     float         = 0

    def join(self, node_id: int) -> None:
        self.in_tree.add(node_id)
        self.tree_nodes.append(node_id)


def _cut_edges(graph: Graph, in_tree: Set[int]) -> List[CutEdge]:
    """Every edge with exactly one endpoint in the tree, oriented inside → outside."""
    cut: List[CutEdge] = []
    for edge in graph.edges:
        if edge.source in in_tree and edge.target not in in_tree:
            cut.append((edge.source, edge.target, edge.cost))
        if edge.target in in_tree and edge.source not in in_tree:
            cut.append((edge.target, edge.source, edge.cost))
    return cut


def _pairs(edges: List[CutEdge]) -> List[Tuple[int, int]]:
    return [(u, v) for u, v, _ in edges]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def prim(graph: Graph, start: int) -> Generator[Step, None, None]:

    sb    = StepBuilder(graph)
    state = _PrimState()
    total = graph.node_count()
    start_label = graph.label(start)

    def fmt_edges(edges: List[CutEdge]) -> str:
        return ", ".join(
            f"({graph.label(u)}-{graph.label(v)}={fmt_number(w)})" for u, v, w in edges
        )

    # --- init step ---
    state.join(start)
    yield sb.build(
        f"Step 1: Start Prim's algorithm at vertex {start_label}. "
        f"Visited: {{{start_label}}}",
        highlights=highlight([start]),
        visited=highlight(state.tree_nodes),
        aux=MstAux(0),
    )

    # --- grow the tree ---
    while len(state.in_tree) < total:
        cut = _cut_edges(graph, state.in_tree)
        if not cut:
            break   # disconnected: the rest is out of reach

        best = cut[0]
        for candidate in cut[1:]:
            if candidate[2] < best[2]:
                best = candidate
        u, v, w = best

        if len(cut) > 1:
            yield sb.build(
                f"Step {sb.count + 1}: Edges leaving the visited vertices: "
                f"{fmt_edges(cut)} → choose {graph.label(u)}-{graph.label(v)} "
                f"(minimum weight = {fmt_number(w)})",
                highlights=highlight(edges=_pairs(cut)),
                visited=highlight(state.tree_nodes, _pairs(state.mst_edges)),
                aux=MstAux(state.weight),
            )

        state.join(v)
        state.mst_edges.append(best)
        state.weight += w

        joined = ", ".join(sorted(graph.labels(state.tree_nodes)))
        yield sb.build(
            f"Step {sb.count + 1}: Add {graph.label(v)} → visited = {{{joined}}}",
            highlights=highlight([v], [(u, v)]),
            visited=highlight(state.tree_nodes, _pairs(state.mst_edges)),
            aux=MstAux(state.weight),
        )

    # --- final step ---
    weights = " + ".join(fmt_number(w) for _, _, w in state.mst_edges) or "0"
    if len(state.in_tree) == total:
        text = (
            f"Done: all vertices are connected. Total MST weight = "
            f"{weights} = {fmt_number(state.weight)}"
        )
    else:
        text = (
            f"Done: the graph is disconnected; the tree spans {len(state.in_tree)} "
            f"of {total} vertices. Total weight = {weights} = {fmt_number(state.weight)}"
        )
    yield sb.build(
        text,
        visited=highlight(state.tree_nodes, _pairs(state.mst_edges)),
        aux=MstAux(state.weight),
        is_final=True,
    )
