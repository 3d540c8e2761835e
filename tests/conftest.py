"""
Shared fixtures: the small hand-checked graphs the runner tests use.
"""
import pytest

from graph import Graph


@pytest.fixture
def relay_shortcut_graph():
    """Directed weighted: A→B(4), A→C(2), C→B(1), B→D(5)."""
    return Graph.build(
        "ABCD",
        [("A", "B", 4), ("A", "C", 2), ("C", "B", 1), ("B", "D", 5)],
        directed=True,
    )


@pytest.fixture
def mst_square_graph():
    """Undirected weighted graph whose MST is B-C, C-D, A-B (total 6)."""
    return Graph.build(
        "ABCD",
        [("A", "B", 3), ("A", "C", 5), ("B", "C", 1), ("B", "D", 4), ("C", "D", 2)],
        directed=False,
    )


@pytest.fixture
def two_branch_tree():
    """Undirected unweighted: A-B, A-C, B-D, C-E."""
    return Graph.build(
        "ABCDE",
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E")],
        directed=False,
        weighted=False,
    )


@pytest.fixture
def disconnected_graph():
    """Two components: A-B(1) and C-D(2)."""
    return Graph.build("ABCD", [("A", "B", 1), ("C", "D", 2)], directed=False)


@pytest.fixture
def single_node_graph():
    return Graph.build("A", [], directed=False)


@pytest.fixture
def weighted_mesh():
    """Connected undirected weighted graph with ties, for cross-checks."""
    return Graph.build(
        "ABCDEF",
        [
            ("A", "B", 7), ("A", "C", 9), ("A", "F", 14), ("B", "C", 10),
            ("B", "D", 15), ("C", "D", 11), ("C", "F", 2), ("D", "E", 6),
            ("E", "F", 9), ("B", "F", 9),
        ],
        directed=False,
    )
