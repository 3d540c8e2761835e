"""
recorder.py — Run Recorder & Analytics
========================================
Runs one algorithm to completion, keeps every Step, and derives the
summary the tutor shows next to the playback: how the run ended, the
final distances or tree weight, the visit order.

Usage:
    rec = Recorder()
    summary = rec.run("dijkstra", start_vertex="A", graph=g)
    rec.export()                     # serialisable snapshot for save/replay

Comparison:
    Two Recorders run on the SAME graph, then compare(rec1, rec2) →
    ComparisonResult (e.g. Prim vs Kruskal weight, Dijkstra vs
    Bellman-Ford distances).
"""

import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from algorithms import get_algorithm, run_algorithm
from algorithms.step import (
    INFINITY_LABEL, DistancesAux, MstAux, Step, UnionFindAux,
)
from graph import Graph, resolve_graph, resolve_start
from graph.adapter import GraphInput
from utils.logging import get_logger

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Outcome: how a run terminated
# ---------------------------------------------------------------------------
class Outcome(Enum):
    SUCCESS        = "success"          # everything reached / spanned
    UNREACHABLE    = "unreachable"      # some vertices never reached from the start
    DISCONNECTED   = "disconnected"     # MST runs produced a spanning forest
    NEGATIVE_CYCLE = "negative_cycle"   # Bellman-Ford: shortest paths undefined


# ---------------------------------------------------------------------------
# RunSummary: what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunSummary:
    algorithm:       str                 = ""
    algo_label:      str                 = ""
    start_vertex:    Optional[str]       = None
    outcome:         Outcome             = Outcome.SUCCESS
    total_steps:     int                 = 0
    nodes_visited:   int                 = 0
    visit_order:     List[str]           = field(default_factory=list)
    final_distances: Dict[str, Union[float, str]] = field(default_factory=dict)
    mst_weight:      Optional[float]     = None
    tree_edges:      List[Tuple[str, str]] = field(default_factory=list)
    wall_time_ms:    float               = 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["outcome"] = self.outcome.value
        data["tree_edges"] = [list(e) for e in self.tree_edges]
        return data


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunSummary = field(default_factory=RunSummary)
    right: RunSummary = field(default_factory=RunSummary)
    # derived
    winner_steps:     str            = ""     # which run needed fewer steps
    distances_agree:  Optional[bool] = None   # None when either run has no distance table
    mst_weight_agree: Optional[bool] = None   # None when either run builds no tree

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":             self.left.to_dict(),
            "right":            self.right.to_dict(),
            "winner_steps":     self.winner_steps,
            "distances_agree":  self.distances_agree,
            "mst_weight_agree": self.mst_weight_agree,
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        summary : Computed RunSummary (available after run()).
        graph   : The Graph the run used.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.summary: Optional[RunSummary] = None
        self.graph:   Optional[Graph]      = None

        self._algorithm:    str           = ""
        self._start_vertex: Optional[str] = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(
        self,
        algorithm_id: str,
        start_vertex: Optional[str] = None,
        graph: GraphInput = None,
    ) -> RunSummary:
        """Run to completion, record every step, compute the summary."""
        info = get_algorithm(algorithm_id)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algorithm_id}")

        g = resolve_graph(graph, info.default_graph)

        started = time.monotonic()
        self.steps = run_algorithm(info.key, start_vertex, g)
        wall_ms = (time.monotonic() - started) * 1000

        self.graph = g
        self._algorithm = info.key
        self._start_vertex = resolve_start(g, start_vertex).label if info.uses_start_vertex else None
        self.summary = self._summarise(wall_ms)

        log.info(
            "run_recorded",
            algorithm=info.key,
            start=self._start_vertex,
            steps=self.summary.total_steps,
            outcome=self.summary.outcome.value,
        )
        return self.summary

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self.summary is None or self.graph is None:
            raise RuntimeError("Call run() first.")
        return {
            "algorithm":    self._algorithm,
            "start_vertex": self._start_vertex,
            "graph":        self.graph.to_dict(),
            "summary":      self.summary.to_dict(),
            "steps":        [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _summarise(self, wall_ms: float) -> RunSummary:
        info = get_algorithm(self._algorithm)
        g    = self.graph
        last = self.steps[-1]
        aux  = last.aux

        visited_nodes = list(last.visited.nodes) if last.visited else []
        tree_pairs    = list(last.visited.edges) if last.visited else []

        summary = RunSummary(
            algorithm=info.key,
            algo_label=info.label,
            start_vertex=self._start_vertex,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 3),
        )

        if isinstance(aux, DistancesAux):
            summary.final_distances = dict(aux.table)
            reached = [lbl for lbl, d in aux.table.items() if d != INFINITY_LABEL]
            summary.nodes_visited = len(reached)
            summary.visit_order = g.labels(visited_nodes) if visited_nodes else reached
            if last.path:
                summary.tree_edges = [(g.label(a), g.label(b)) for a, b in last.path.edges]
            if aux.negative_cycle:
                summary.outcome = Outcome.NEGATIVE_CYCLE
            elif len(reached) < g.node_count():
                summary.outcome = Outcome.UNREACHABLE

        elif isinstance(aux, (MstAux, UnionFindAux)):
            summary.mst_weight = aux.weight
            summary.tree_edges = [(g.label(a), g.label(b)) for a, b in tree_pairs]
            summary.nodes_visited = len(visited_nodes)
            if isinstance(aux, MstAux):
                summary.visit_order = g.labels(visited_nodes)
            if len(tree_pairs) < g.node_count() - 1:
                summary.outcome = Outcome.DISCONNECTED

        else:
            summary.nodes_visited = len(visited_nodes)
            summary.visit_order = g.labels(visited_nodes)
            if len(visited_nodes) < g.node_count():
                summary.outcome = Outcome.UNREACHABLE

        return summary


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.summary  or RunSummary()
    r = right.summary or RunSummary()

    if l.total_steps == r.total_steps:
        winner = "tie"
    else:
        winner = l.algo_label if l.total_steps < r.total_steps else r.algo_label

    distances_agree = None
    if l.final_distances and r.final_distances:
        distances_agree = l.final_distances == r.final_distances

    mst_weight_agree = None
    if l.mst_weight is not None and r.mst_weight is not None:
        mst_weight_agree = l.mst_weight == r.mst_weight

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner,
        distances_agree=distances_agree,
        mst_weight_agree=mst_weight_agree,
    )
