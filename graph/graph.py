"""
graph.py — Graph Container
==========================
Single source of truth for the graph of one run.  Runners, the recorder
and the API all talk to this object.

Responsibilities:
  1. Construction                           (add_node / add_edge, validated)
  2. Lookups                                (label, labels, find_node, …)
  3. Adjacency queries                      (neighbours, honouring `directed`)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes are stored in an insertion-ordered dict keyed by id; edges in an
    insertion-ordered list.  Every tie-break in the runners ("first node",
    "first neighbour", "first cheapest edge") relies on that order.
  - A separate adjacency dict `_adj[node_id] → [(neighbour_id, edge), …]`
    is maintained incrementally so neighbour queries are O(degree).
  - `directed` / `weighted` are graph-level flags.  Runners never add or
    remove nodes or edges, so a Graph is effectively immutable once built.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from graph.node import Node
from graph.edge import Edge


GRAPH_TYPES: Dict[str, Tuple[bool, bool]] = {
    # type string          → (directed, weighted)
    "directed-weighted":     (True,  True),
    "directed-unweighted":   (True,  False),
    "undirected-weighted":   (False, True),
    "undirected-unweighted": (False, False),
}


class GraphError(ValueError):
    """Raised when caller-supplied graph data breaks the graph invariants."""


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}  (insertion ordered)
        edges      : [Edge]           (insertion ordered)
        directed   : bool – edges are followed source→target only
        weighted   : bool – whether weights are meaningful
        _adj       : {node_id: [(neighbour_id, Edge), …]}
    """

    def __init__(self, directed: bool = False, weighted: bool = True):
        self.nodes:    Dict[int, Node] = {}
        self.edges:    List[Edge]      = []
        self.directed: bool            = directed
        self.weighted: bool            = weighted
        self._adj:     Dict[int, List[Tuple[int, Edge]]] = {}

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise GraphError(f"Duplicate node id: {node.id}")
        self.nodes[node.id] = node
        self._adj[node.id] = []
        return node

    def create_node(self, node_id: int, label: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id, label=label))

    def add_edge(self, edge: Edge) -> Edge:
        for end in edge.endpoints:
            if end not in self.nodes:
                raise GraphError(f"Edge {edge.source}-{edge.target} references unknown node {end}")
        self.edges.append(edge)
        self._adj[edge.source].append((edge.target, edge))
        if not self.directed and edge.source != edge.target:
            self._adj[edge.target].append((edge.source, edge))
        return edge

    def create_edge(self, source: int, target: int, weight=None) -> Edge:
        return self.add_edge(Edge(source, target, weight))

    @classmethod
    def build(
        cls,
        labels: Iterable[str],
        edges: Iterable[tuple],
        directed: bool = False,
        weighted: bool = True,
    ) -> "Graph":
        """
        Build a graph from node labels and label-based edge tuples.

        Node ids are assigned 1, 2, 3, … in label order.  Edge tuples are
        `(source_label, target_label)` or `(source_label, target_label, weight)`.

            Graph.build("ABC", [("A", "B", 4), ("B", "C", 1)], directed=True)
        """
        g = cls(directed=directed, weighted=weighted)
        ids: Dict[str, int] = {}
        for i, label in enumerate(labels, start=1):
            g.create_node(i, label)
            ids[label] = i
        for spec in edges:
            src, tgt = spec[0], spec[1]
            weight = spec[2] if len(spec) > 2 else None
            if src not in ids or tgt not in ids:
                raise GraphError(f"Edge {src}-{tgt} references an unknown label")
            g.create_edge(ids[src], ids[tgt], weight)
        return g

    # ==================================================================
    # LOOKUPS
    # ==================================================================
    def label(self, node_id: int) -> str:
        return self.nodes[node_id].label

    def labels(self, node_ids: Iterable[int]) -> List[str]:
        return [self.nodes[n].label for n in node_ids]

    def first_node(self) -> Optional[Node]:
        return next(iter(self.nodes.values()), None)

    def find_node(self, text: str) -> Optional[Node]:
        """First node whose label equals `text` or whose id stringifies to it."""
        for node in self.nodes.values():
            if node.label == text or str(node.id) == text:
                return node
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, Edge]]:
        """
        Return [(neighbour_id, edge)] in edge insertion order.
        Directed graphs only follow source→target; undirected graphs also
        follow target→source.
        """
        return list(self._adj.get(node_id, []))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    @property
    def graph_type(self) -> str:
        return (
            f"{'directed' if self.directed else 'undirected'}-"
            f"{'weighted' if self.weighted else 'unweighted'}"
        )

    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "type":     self.graph_type,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Accepts explicit `directed` / `weighted` flags, or the tutor's
        `type` strings ("undirected-weighted", …).  Explicit flags win.
        Weights must be numbers (or absent); flags must be real booleans.
        """
        if not isinstance(data, dict):
            raise GraphError("Graph data must be an object")

        directed, weighted = False, True
        gtype = data.get("type")
        if gtype is not None:
            if gtype not in GRAPH_TYPES:
                raise GraphError(f"Unknown graph type: {gtype}")
            directed, weighted = GRAPH_TYPES[gtype]
        directed = _flag(data, "directed", directed)
        weighted = _flag(data, "weighted", weighted)

        g = cls(directed=directed, weighted=weighted)
        try:
            for nd in data.get("nodes", []):
                g.add_node(Node.from_dict(nd))
            for ed in data.get("edges", []):
                edge = Edge.from_dict(ed)
                if not _is_weight(edge.weight):
                    raise GraphError(
                        f"Edge {edge.source}-{edge.target} has a non-numeric weight: {edge.weight!r}"
                    )
                g.add_edge(edge)
        except (KeyError, TypeError) as exc:
            raise GraphError(f"Malformed graph data: {exc}") from exc
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[int]:
        return list(self.nodes.keys())

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Graph)
            and self.directed == other.directed
            and self.weighted == other.weighted
            and list(self.nodes.values()) == list(other.nodes.values())
            and self.edges == other.edges
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Graph({self.graph_type}, nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )


def _flag(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise GraphError(f"'{key}' must be true or false, got {value!r}")
    return value


def _is_weight(value) -> bool:
    # bool is an int subclass but never a weight
    return value is None or (isinstance(value, (int, float)) and not isinstance(value, bool))
