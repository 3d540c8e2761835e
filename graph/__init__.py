"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge, GraphError
    from graph import resolve_graph, resolve_start
"""

from graph.node    import Node
from graph.edge    import Edge
from graph.graph   import Graph, GraphError, GRAPH_TYPES
from graph.adapter import resolve_graph, resolve_start

__all__ = [
    "Node",
    "Edge",
    "Graph",        "GraphError",   "GRAPH_TYPES",
    "resolve_graph", "resolve_start",
]
