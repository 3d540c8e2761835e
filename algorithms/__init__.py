"""
algorithms/__init__.py — Algorithm Registry & Dispatcher
=========================================================
Single source of truth for every algorithm the tutor knows about.

    from algorithms import REGISTRY, get_algorithm, run_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, default_graph, …),
        …
    }

`run_algorithm` is the one entry point callers use: it resolves the
graph (custom or the algorithm's default builder) and the start vertex,
then exhausts the runner generator into a list.  Adding an algorithm is:
write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from graph import Graph, resolve_graph, resolve_start
from graph.adapter import GraphInput
from graph.defaults import (
    bellman_ford_graph, dijkstra_graph, kruskal_graph, prim_graph, traversal_graph,
)
from algorithms.step import Step
from utils.logging import get_logger

# ---------------------------------------------------------------------------
# Import all runner modules
# ---------------------------------------------------------------------------
from algorithms.bfs          import bfs          as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.dfs          import dfs          as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra     import dijkstra     as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.prim         import prim         as _prim,     PSEUDOCODE as _prim_pc
from algorithms.kruskal      import kruskal      as _kruskal,  PSEUDOCODE as _kr_pc
from algorithms.bellman_ford import bellman_ford as _bf,       PSEUDOCODE as _bf_pc

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:                   str                    # registry key, e.g. "bfs"
    label:                 str                    # human label, e.g. "Breadth-First Search"
    fn:                    Callable               # the generator function (graph, start)
    pseudocode:            List[str]              # lines for the side-panel
    default_graph:         Callable[[], Graph]    # builder used when the caller sends none
    supported_graph_types: List[str] = field(default_factory=list)
    uses_start_vertex:     bool     = True
    tags:                  List[str] = field(default_factory=list)
    complexity_time:       str      = ""
    complexity_space:      str      = ""
    description:           str      = ""

    def supports(self, graph: Graph) -> bool:
        """True if the graph's directed/weighted flags suit this algorithm."""
        return graph.graph_type in self.supported_graph_types

    def to_dict(self) -> dict:
        return {
            "key":                   self.key,
            "label":                 self.label,
            "description":           self.description,
            "time_complexity":       self.complexity_time,
            "space_complexity":      self.complexity_space,
            "tags":                  list(self.tags),
            "supported_graph_types": list(self.supported_graph_types),
            "uses_start_vertex":     self.uses_start_vertex,
            "pseudocode":            list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        default_graph=traversal_graph,
        supported_graph_types=["directed-unweighted", "undirected-unweighted"],
        tags=["search", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores every neighbour at the current depth before going one level deeper.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        default_graph=traversal_graph,
        supported_graph_types=["directed-unweighted", "undirected-unweighted"],
        tags=["search", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Follows each branch as far as possible before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        default_graph=dijkstra_graph,
        supported_graph_types=["directed-weighted", "undirected-weighted"],
        tags=["shortest-path", "weighted"],
        complexity_time="O(V² + E)", complexity_space="O(V)",
        description="Greedily finalises the closest vertex. Requires non-negative weights.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", fn=_prim, pseudocode=_prim_pc,
        default_graph=prim_graph,
        supported_graph_types=["undirected-weighted"],
        tags=["minimum-spanning-tree", "weighted"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Grows one tree by always taking the cheapest edge leaving it.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", fn=_kruskal, pseudocode=_kr_pc,
        default_graph=kruskal_graph,
        supported_graph_types=["undirected-weighted", "undirected-unweighted"],
        uses_start_vertex=False,
        tags=["minimum-spanning-tree", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Adds edges cheapest-first, skipping any that would close a cycle.",
    ),

    "bellman-ford": AlgoInfo(
        key="bellman-ford", label="Bellman–Ford", fn=_bf, pseudocode=_bf_pc,
        default_graph=bellman_ford_graph,
        supported_graph_types=["directed-weighted", "undirected-weighted"],
        tags=["shortest-path", "weighted", "negative-edges"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Handles negative edges and detects negative-weight cycles.",
    ),
}

ALIASES: Dict[str, str] = {
    "bellman_ford": "bellman-ford",
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key (or alias), or None."""
    return REGISTRY.get(ALIASES.get(key, key))


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if tag in a.tags]


def algorithms_for_graph_type(graph_type: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if graph_type in a.supported_graph_types]


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------
def run_algorithm(
    algorithm_id: str,
    start_vertex: Optional[Union[str, int]] = None,
    graph: GraphInput = None,
) -> List[Step]:
    """
    Run one algorithm to completion and return every Step.

    Args:
        algorithm_id : "bfs" | "dfs" | "dijkstra" | "prim" | "kruskal" | "bellman-ford"
        start_vertex : Label or stringified id.  Missing / unknown → first node.
                       Ignored by Kruskal.
        graph        : Graph, graph dict, or None for the algorithm's default.

    Raises:
        ValueError   : Unknown algorithm id.
        GraphError   : Graph data that breaks the graph invariants.
    """
    info = get_algorithm(algorithm_id)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algorithm_id}")

    g = resolve_graph(graph, info.default_graph)
    if not info.supports(g):
        log.warning(
            "graph_type_mismatch",
            algorithm=info.key,
            graph_type=g.graph_type,
            supported=info.supported_graph_types,
        )

    # an empty graph has no start vertex, even for runners that ignore it
    start_node = resolve_start(g, start_vertex)
    start = start_node.id if info.uses_start_vertex else None
    steps = list(info.fn(g, start))
    log.debug("algorithm_run", algorithm=info.key, start=start, steps=len(steps))
    return steps


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "algorithms_for_graph_type",
    "run_algorithm",
]
