from collections import deque

from algorithms import run_algorithm
from algorithms.step import QueueAux, StackAux
from graph import Graph


def labels(graph, ids):
    return graph.labels(ids)


def hop_distances(graph, start):
    dist = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nbr, _ in graph.neighbours(node):
            if nbr not in dist:
                dist[nbr] = dist[node] + 1
                queue.append(nbr)
    return dist


class TestBFS:
    def test_visit_order_is_level_by_level(self, two_branch_tree):
        steps = run_algorithm("bfs", "A", two_branch_tree)
        final = steps[-1]
        assert labels(two_branch_tree, final.visited.nodes) == ["A", "B", "C", "D", "E"]
        assert final.aux == QueueAux(())
        assert final.is_final

    def test_default_graph_walkthrough(self):
        steps = run_algorithm("bfs")
        g = steps[0].graph
        assert len(steps) == 7
        assert steps[0].aux.labels == ("A",)
        assert steps[0].visited.nodes == ()
        assert labels(g, steps[1].highlights.nodes) == ["B", "C"]
        assert steps[1].highlights.edges == ((1, 2), (1, 3))
        assert steps[1].aux.labels == ("B", "C")
        assert steps[2].aux.labels == ("C", "D", "E")
        # D has nothing new but the queue is not empty yet
        assert steps[4].highlights.nodes == (4,)
        assert "No unvisited neighbours" in steps[4].description
        assert steps[-1].description.endswith("next level.")
        assert "A -> B -> C -> D -> E -> F" in steps[-1].description

    def test_visited_order_is_by_hop_distance(self, weighted_mesh):
        steps = run_algorithm("bfs", "D", weighted_mesh)
        dist = hop_distances(weighted_mesh, 4)
        order = [dist[n] for n in steps[-1].visited.nodes]
        assert order == sorted(order)

    def test_unreachable_nodes_stay_unvisited(self):
        g = Graph.build("ABC", [("A", "B")], directed=True, weighted=False)
        steps = run_algorithm("bfs", "A", g)
        assert set(steps[-1].visited.nodes) == {1, 2}
        for step in steps:
            assert 3 not in step.visited.nodes

    def test_directed_edges_are_not_followed_backwards(self):
        g = Graph.build("ABC", [("B", "A"), ("B", "C")], directed=True, weighted=False)
        steps = run_algorithm("bfs", "A", g)
        assert steps[-1].visited.nodes == (1,)
        assert len(steps) == 2

    def test_single_node(self, single_node_graph):
        steps = run_algorithm("bfs", graph=single_node_graph)
        assert [s.index for s in steps] == [1, 2]
        assert steps[-1].visited.nodes == (1,)


class TestDFS:
    def test_default_graph_walkthrough(self):
        steps = run_algorithm("dfs")
        g = steps[0].graph
        assert len(steps) == 19
        assert steps[0].aux == StackAux(("A",))
        assert "visited" in steps[1].description
        assert steps[2].highlights.edges == ((1, 2),)
        assert steps[2].aux.labels == ("A", "B")
        assert "Backtrack to vertex B" in steps[6].description
        assert steps[6].aux.labels == ("A", "B")
        assert "Stack is empty" in steps[-2].description
        assert labels(g, steps[-1].visited.nodes) == ["A", "B", "D", "E", "C", "F"]

    def test_neighbour_choice_follows_edge_order_not_labels(self):
        g = Graph.build("ABC", [("A", "C"), ("A", "B")], directed=False, weighted=False)
        steps = run_algorithm("dfs", "A", g)
        assert labels(g, steps[-1].visited.nodes) == ["A", "C", "B"]

    def test_stack_shrinks_back_to_empty(self, two_branch_tree):
        steps = run_algorithm("dfs", "A", two_branch_tree)
        assert steps[-1].aux.labels == ()
        assert max(len(s.aux.labels) for s in steps) == 3

    def test_single_node(self, single_node_graph):
        steps = run_algorithm("dfs", graph=single_node_graph)
        assert len(steps) == 4
        assert steps[-1].visited.nodes == (1,)


def test_visited_never_shrinks():
    for algo in ("bfs", "dfs", "dijkstra"):
        steps = run_algorithm(algo)
        sizes = [len(s.visited.nodes) for s in steps]
        assert sizes == sorted(sizes), algo
        for before, after in zip(steps, steps[1:]):
            assert set(before.visited.nodes) <= set(after.visited.nodes), algo
