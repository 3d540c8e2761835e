"""
adapter.py — Caller Input → Canonical Graph
============================================
Callers hand the engine whatever they have: a Graph, the JSON dict the
editor saved, or nothing at all.  The adapter turns that into one Graph
and picks the start vertex.

Start-vertex rules:
  - Matched against node labels first-come, then stringified ids
    (`Graph.find_node`), so "A" and "1" both work.
  - Missing or unknown → the first node.  This is NOT an error; the
    substitution is only logged at debug level.
"""

from typing import Callable, Optional, Union

from graph.graph import Graph, GraphError
from graph.node import Node
from utils.logging import get_logger

log = get_logger(__name__)

GraphInput = Union[Graph, dict, None]


def resolve_graph(raw: GraphInput, default_factory: Callable[[], Graph]) -> Graph:
    """Return the canonical Graph for a run, building the default when `raw` is None."""
    if raw is None:
        return default_factory()
    if isinstance(raw, Graph):
        return raw
    if isinstance(raw, dict):
        return Graph.from_dict(raw)
    raise GraphError(f"Cannot build a graph from {type(raw).__name__}")


def resolve_start(graph: Graph, start_vertex: Optional[Union[str, int]] = None) -> Node:
    first = graph.first_node()
    if first is None:
        raise GraphError("Graph has no nodes to start from")

    if start_vertex is None or start_vertex == "":
        return first

    node = graph.find_node(str(start_vertex))
    if node is None:
        log.debug("start_vertex_substituted", requested=str(start_vertex), used=first.label)
        return first
    return node
