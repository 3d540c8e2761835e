"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit
issues, and every push / pop / backtrack is its own observable step).

Yields a Step at:
  1. Push start onto the stack
  2. First sight of the top-of-stack node  →  mark VISITED
  3. Push the first unvisited neighbour (edge insertion order)  →  edge highlighted
  4. Top has no unvisited neighbour  →  pop, then "backtrack to X" or "stack empty"
  5. Final step  →  full visited set and visitation order

The stack is exposed on every step (StackAux), bottom first.
"""

from dataclasses import dataclass, field
from typing import Generator, List, Optional, Set

from graph import Graph
from algorithms.step import StackAux, Step, StepBuilder, highlight


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",
    "    stack ← [start]",
    "    visited ← {}",
    "    while stack is not empty:",
    "        node ← stack.top()",
    "        if node not visited: visited.add(node)",
    "        nbr ← first unvisited neighbour of node",
    "        if nbr exists: stack.push(nbr)",
    "        else: stack.pop()          // backtrack",
    "    return visited",
]


@dataclass
class _DfsState:
    stack:   List[int] = field(default_factory=list)
    seen:    Set[int]  = field(default_factory=set)
    visited: List[int] = field(default_factory=list)   # visit order


def _first_unvisited(graph: Graph, node: int, seen: Set[int]) -> Optional[int]:
    for nbr, _edge in graph.neighbours(node):
        if nbr not in seen:
            return nbr
    return None


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph, start: int) -> Generator[Step, None, None]:

    sb    = StepBuilder(graph)
    state = _DfsState()
    start_label = graph.label(start)

    def stack_aux() -> StackAux:
        return StackAux(tuple(graph.labels(state.stack)))

    def stack_text() -> str:
        return ", ".join(graph.labels(state.stack))

    # --- init step ---
    state.stack.append(start)
    yield sb.build(
        f"Step 1: Start DFS at vertex {start_label}. Push onto stack: [{start_label}]",
        highlights=highlight([start]),
        visited=highlight(),
        aux=stack_aux(),
    )

    # --- main loop ---
    while state.stack:
        node  = state.stack[-1]
        label = graph.label(node)

        if node not in state.seen:
            state.seen.add(node)
            state.visited.append(node)
            yield sb.build(
                f"Step {sb.count + 1}: Mark vertex {label} as visited.",
                highlights=highlight([node]),
                visited=highlight(state.visited),
                aux=stack_aux(),
            )

        nxt = _first_unvisited(graph, node, state.seen)
        if nxt is not None:
            state.stack.append(nxt)
            yield sb.build(
                f"Step {sb.count + 1}: Explore neighbour {graph.label(nxt)} of {label}. "
                f"Push onto stack: [{stack_text()}]",
                highlights=highlight([nxt], [(node, nxt)]),
                visited=highlight(state.visited),
                aux=stack_aux(),
            )
            continue

        # -- dead end: backtrack --
        state.stack.pop()
        if state.stack:
            back = state.stack[-1]
            yield sb.build(
                f"Step {sb.count + 1}: No unvisited neighbours at {label}. "
                f"Backtrack to vertex {graph.label(back)}. Stack: [{stack_text()}]",
                highlights=highlight([back]),
                visited=highlight(state.visited),
                aux=stack_aux(),
            )
        else:
            yield sb.build(
                f"Step {sb.count + 1}: No unvisited neighbours at {label}. Stack is empty.",
                highlights=highlight(),
                visited=highlight(state.visited),
                aux=StackAux(),
            )

    # --- stack exhausted ---
    order = " -> ".join(graph.labels(state.visited))
    yield sb.build(
        f"Done: every reachable vertex was visited with DFS. Order: {order}",
        visited=highlight(state.visited),
        aux=StackAux(),
        is_final=True,
    )
