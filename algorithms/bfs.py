"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every state change:
  1. Initialise  →  queue = [start]
  2. Dequeue a node and discover its unvisited neighbours
     (or note that it has none, while the queue is still non-empty)
  3. Final step  →  full visited set, empty queue, visitation order

The queue is exposed on every step (QueueAux) by label, front first.
Unreachable nodes never appear in `visited`; that is not an error.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Generator, List, Set, Tuple

from graph import Graph
from algorithms.step import QueueAux, Step, StepBuilder, highlight


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",
    "    queue ← [start]",
    "    visited ← {start}",
    "    while queue is not empty:",
    "        node ← queue.dequeue()",
    "        for neighbour in adj(node):",
    "            if neighbour not visited:",
    "                visited.add(neighbour)",
    "                queue.enqueue(neighbour)",
    "    return visited",
]


@dataclass
class _BfsState:
    queue:   Deque[int] = field(default_factory=deque)
    seen:    Set[int]   = field(default_factory=set)
    visited: List[int]  = field(default_factory=list)   # discovery order

    def mark(self, node_id: int) -> None:
        self.seen.add(node_id)
        self.visited.append(node_id)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, start: int) -> Generator[Step, None, None]:
    """
    Args:
        graph : The graph to traverse.
        start : Starting node id (already resolved by the adapter).

    Yields:
        Step – init, one per dequeue that changes something, and a final step.
    """

    sb    = StepBuilder(graph)
    state = _BfsState()
    start_label = graph.label(start)

    def queue_aux() -> QueueAux:
        return QueueAux(tuple(graph.labels(state.queue)))

    # --- initialisation step ---
    state.queue.append(start)
    yield sb.build(
        f"Step 1: Start BFS at vertex {start_label}. Enqueue: [{start_label}]",
        highlights=highlight([start]),
        visited=highlight(),
        aux=queue_aux(),
    )
    state.mark(start)

    # --- main loop ---
    while state.queue:
        node = state.queue.popleft()
        label = graph.label(node)

        discovered: List[int] = []
        discovery_edges: List[Tuple[int, int]] = []
        for nbr, _edge in graph.neighbours(node):
            if nbr in state.seen:
                continue
            state.mark(nbr)
            state.queue.append(nbr)
            discovered.append(nbr)
            discovery_edges.append((node, nbr))

        queue_labels = ", ".join(graph.labels(state.queue))
        if discovered:
            yield sb.build(
                f"Step {sb.count + 1}: Dequeue {label}. Visit neighbours: "
                f"{', '.join(graph.labels(discovered))}. Mark them visited. "
                f"Queue: [{queue_labels}]",
                highlights=highlight(discovered, discovery_edges),
                visited=highlight(state.visited),
                aux=queue_aux(),
            )
        elif state.queue:
            yield sb.build(
                f"Step {sb.count + 1}: Dequeue {label}. No unvisited neighbours. "
                f"Queue: [{queue_labels}]",
                highlights=highlight([node]),
                visited=highlight(state.visited),
                aux=queue_aux(),
            )

    # --- queue exhausted ---
    order = " -> ".join(graph.labels(state.visited))
    yield sb.build(
        f"Done: every reachable vertex was visited in BFS order. Order: {order}. "
        f"BFS explores all neighbours at the current depth before moving to "
        f"the next level.",
        visited=highlight(state.visited),
        aux=QueueAux(),
        is_final=True,
    )
