"""
step.py — Algorithm Step Snapshot
==================================
Every runner is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything a renderer needs to
paint one instant of a run:

    • Which nodes / edges to highlight right now
    • Which nodes / edges are visited (or already in the tree)
    • The final path or shortest-path tree, once known
    • A plain-English description of what just happened
    • ONE algorithm-specific payload (queue, stack, distance table, …)

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT: every collection is
    copied into a tuple or a fresh dict at build time, so later
    mutations of the runner's state can never leak into earlier steps.
  - `aux` is a tagged variant rather than a bag of optional fields.
    Each variant carries a `kind` class tag so serialisers and
    renderers can switch on it.
  - `graph` is the same object for every step of one run.  `to_dict`
    leaves it out; the run serialises it once.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterable, Optional, Tuple, Union

from graph import Graph

EdgeRef = Tuple[int, int]
INFINITY_LABEL = "∞"


# ---------------------------------------------------------------------------
# Highlight: a set of nodes and edges to paint
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Highlight:
    nodes: Tuple[int, ...]     = ()
    edges: Tuple[EdgeRef, ...] = ()

    def to_dict(self) -> dict:
        return {
            "nodes": list(self.nodes),
            "edges": [{"source": s, "target": t} for s, t in self.edges],
        }


def highlight(nodes: Iterable[int] = (), edges: Iterable[EdgeRef] = ()) -> Highlight:
    """Snapshot any iterables of node ids / (source, target) pairs."""
    return Highlight(
        nodes=tuple(nodes),
        edges=tuple((int(s), int(t)) for s, t in edges),
    )


# ---------------------------------------------------------------------------
# AlgorithmAux: one variant per algorithm family
# ---------------------------------------------------------------------------
class AuxKind(Enum):
    QUEUE      = "queue"        # BFS
    STACK      = "stack"        # DFS
    DISTANCES  = "distances"    # Dijkstra, Bellman-Ford
    MST        = "mst"          # Prim
    UNION_FIND = "union_find"   # Kruskal


@dataclass(frozen=True)
class QueueAux:
    labels: Tuple[str, ...] = ()
    kind: ClassVar[AuxKind] = AuxKind.QUEUE

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "queue": list(self.labels)}


@dataclass(frozen=True)
class StackAux:
    labels: Tuple[str, ...] = ()
    kind: ClassVar[AuxKind] = AuxKind.STACK

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "stack": list(self.labels)}


@dataclass(frozen=True)
class PassInfo:
    current: int
    total:   int


@dataclass(frozen=True)
class DistancesAux:
    """
    Attributes:
        table          : {label: distance or "∞"} in node order.
        pass_info      : Bellman-Ford relaxation pass, when the step belongs to one.
        negative_cycle : True on Bellman-Ford's negative-cycle steps.
    """

    table:          Dict[str, Union[float, str]] = field(default_factory=dict)
    pass_info:      Optional[PassInfo]           = None
    negative_cycle: bool                         = False
    kind: ClassVar[AuxKind] = AuxKind.DISTANCES

    def to_dict(self) -> dict:
        data = {"kind": self.kind.value, "distances": dict(self.table)}
        if self.pass_info is not None:
            data["pass"] = {"current": self.pass_info.current, "total": self.pass_info.total}
        if self.negative_cycle:
            data["negative_cycle"] = True
        return data


@dataclass(frozen=True)
class MstAux:
    weight: float = 0
    kind: ClassVar[AuxKind] = AuxKind.MST

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "mst_weight": self.weight}


@dataclass(frozen=True)
class UnionFindAux:
    weight: float                       = 0
    sets:   Tuple[Tuple[str, ...], ...] = ()
    kind: ClassVar[AuxKind] = AuxKind.UNION_FIND

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "mst_weight": self.weight,
            "union_find_sets": [list(s) for s in self.sets],
        }


AlgorithmAux = Union[QueueAux, StackAux, DistancesAux, MstAux, UnionFindAux]


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Step:
    """
    Attributes:
        index       : 1-based position of this step in the run.
        description : Human-readable account of what just happened.
        graph       : The run's Graph (identical object across the run).
        highlights  : Nodes / edges the current transition touched.
        visited     : Cumulative visited nodes, or tree nodes / edges.
        path        : Final path or shortest-path tree, when known.
        aux         : Algorithm-specific payload.
        is_final    : True on the very last step of the run.
    """

    index:       int
    description: str
    graph:       Graph                  = field(repr=False, compare=True)
    highlights:  Optional[Highlight]    = None
    visited:     Optional[Highlight]    = None
    path:        Optional[Highlight]    = None
    aux:         Optional[AlgorithmAux] = None
    is_final:    bool                   = False

    def to_dict(self) -> dict:
        return {
            "index":       self.index,
            "description": self.description,
            "highlights":  self.highlights.to_dict() if self.highlights else None,
            "visited":     self.visited.to_dict() if self.visited else None,
            "path":        self.path.to_dict() if self.path else None,
            "aux":         self.aux.to_dict() if self.aux else None,
            "is_final":    self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so runners don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Numbers the steps of one run and stamps the shared graph on each.

    Usage inside a runner generator:
        sb = StepBuilder(graph)
        yield sb.build("Start BFS at A.", highlights=highlight([start]),
                       aux=QueueAux(("A",)))
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self.count = 0

    def build(
        self,
        description: str,
        highlights: Optional[Highlight] = None,
        visited: Optional[Highlight] = None,
        path: Optional[Highlight] = None,
        aux: Optional[AlgorithmAux] = None,
        is_final: bool = False,
    ) -> Step:
        self.count += 1
        return Step(
            index=self.count,
            description=description,
            graph=self.graph,
            highlights=highlights,
            visited=visited,
            path=path,
            aux=aux,
            is_final=is_final,
        )


# ---------------------------------------------------------------------------
# Formatting helpers shared by the runners
# ---------------------------------------------------------------------------
def fmt_number(value: float) -> str:
    """4.0 → '4', 2.5 → '2.5', inf → '∞'."""
    if value == float("inf"):
        return INFINITY_LABEL
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def distance_table(graph: Graph, dist: Dict[int, float]) -> Dict[str, Union[float, str]]:
    """{label: distance} in node order, with unreachable nodes as '∞'."""
    table: Dict[str, Union[float, str]] = {}
    for nid, node in graph.nodes.items():
        d = dist[nid]
        table[node.label] = INFINITY_LABEL if d == float("inf") else d
    return table
