import pytest

from algorithms import run_algorithm
from algorithms.step import MstAux, UnionFindAux
from algorithms.union_find import UnionFind
from graph import Graph


class TestUnionFind:
    def test_starts_as_singletons(self):
        uf = UnionFind([10, 20, 30])
        assert uf.groups() == [[10], [20], [30]]
        assert len(uf) == 3

    def test_union_joins_once(self):
        uf = UnionFind([1, 2, 3, 4])
        assert uf.union(1, 2)
        assert uf.union(3, 4)
        assert not uf.union(2, 1)
        assert uf.connected(1, 2)
        assert not uf.connected(1, 3)
        assert uf.union(2, 4)
        assert uf.connected(1, 3)
        assert uf.groups() == [[1, 2, 3, 4]]

    def test_groups_keep_item_order(self):
        uf = UnionFind([1, 2, 3, 4, 5])
        uf.union(4, 2)
        uf.union(5, 1)
        assert uf.groups() == [[1, 5], [2, 4], [3]]

    def test_union_by_rank_and_path_compression(self):
        uf = UnionFind(range(6))
        uf.union(0, 1)
        uf.union(2, 3)
        uf.union(0, 2)
        uf.union(4, 5)
        uf.union(4, 0)
        root = uf.find(3)
        assert all(uf.find(i) == root for i in range(6))
        # after find(3) the chain below the root is flattened
        assert uf.parent[3] == uf._index[root]
        assert max(uf.rank) == 2


class TestPrim:
    def test_square_graph_weight(self, mst_square_graph):
        steps = run_algorithm("prim", "A", mst_square_graph)
        final = steps[-1]
        assert final.aux == MstAux(6)
        assert final.description.endswith("3 + 1 + 2 = 6")
        assert len(steps) == 8

    def test_candidate_step_shows_tree_before_addition(self, mst_square_graph):
        steps = run_algorithm("prim", "A", mst_square_graph)
        candidates, added = steps[1], steps[2]
        assert candidates.highlights.edges == ((1, 2), (1, 3))
        assert candidates.visited.nodes == (1,)
        assert candidates.aux.weight == 0
        assert "choose A-B" in candidates.description
        assert added.visited.nodes == (1, 2)
        assert added.visited.edges == ((1, 2),)
        assert added.aux.weight == 3

    def test_single_cut_edge_skips_candidate_step(self, disconnected_graph):
        steps = run_algorithm("prim", "A", disconnected_graph)
        assert len(steps) == 3
        assert "Add B" in steps[1].description

    def test_disconnected_graph_stops_early(self, disconnected_graph):
        final = run_algorithm("prim", "A", disconnected_graph)[-1]
        assert final.is_final
        assert "disconnected" in final.description
        assert final.visited.nodes == (1, 2)
        assert final.aux.weight == 1

    def test_default_graph(self):
        steps = run_algorithm("prim")
        assert steps[-1].aux.weight == 9
        assert len(steps[-1].visited.edges) == 4

    def test_weight_never_decreases(self, weighted_mesh):
        weights = [s.aux.weight for s in run_algorithm("prim", "A", weighted_mesh)]
        assert weights == sorted(weights)

    def test_single_node(self, single_node_graph):
        steps = run_algorithm("prim", graph=single_node_graph)
        assert len(steps) == 2
        assert steps[-1].aux.weight == 0


class TestKruskal:
    def test_cheapest_spanning_edges(self, mst_square_graph):
        steps = run_algorithm("kruskal", graph=mst_square_graph)
        final = steps[-1]
        assert len(steps) == 5
        assert final.visited.edges == ((2, 3), (3, 4), (1, 2))
        assert final.aux.weight == 6
        assert final.aux.sets == (("A", "B", "C", "D"),)
        assert "Total weight: 6" in final.description

    def test_init_step_lists_sorted_edges(self, mst_square_graph):
        first = run_algorithm("kruskal", graph=mst_square_graph)[0]
        assert "B-C(1), C-D(2), A-B(3), B-D(4), A-C(5)" in first.description
        assert first.aux == UnionFindAux(0, (("A",), ("B",), ("C",), ("D",)))

    def test_cycle_edge_is_skipped(self):
        g = Graph.build(
            "ABCD",
            [("A", "B", 1), ("B", "C", 2), ("A", "C", 3), ("C", "D", 4)],
            directed=False,
        )
        steps = run_algorithm("kruskal", graph=g)
        assert len(steps) == 6
        skip = steps[3]
        assert "would create a cycle" in skip.description
        assert skip.highlights.edges == ((1, 3),)
        assert skip.visited.edges == ((1, 2), (2, 3))
        assert steps[-1].aux.weight == 7

    def test_disconnected_graph_gives_forest(self, disconnected_graph):
        final = run_algorithm("kruskal", graph=disconnected_graph)[-1]
        assert final.visited.edges == ((1, 2), (3, 4))
        assert final.aux.weight == 3
        assert final.aux.sets == (("A", "B"), ("C", "D"))

    def test_start_vertex_is_ignored(self):
        assert run_algorithm("kruskal", "Z") == run_algorithm("kruskal", "C")

    def test_single_node(self, single_node_graph):
        steps = run_algorithm("kruskal", graph=single_node_graph)
        assert len(steps) == 2
        assert steps[-1].visited.nodes == (1,)


@pytest.mark.parametrize("fixture", ["mst_square_graph", "weighted_mesh"])
def test_prim_and_kruskal_agree_on_weight(request, fixture):
    g = request.getfixturevalue(fixture)
    prim_weight = run_algorithm("prim", "A", g)[-1].aux.weight
    kruskal_weight = run_algorithm("kruskal", graph=g)[-1].aux.weight
    assert prim_weight == kruskal_weight


def test_kruskal_on_prim_default_graph_matches_prim():
    assert run_algorithm("kruskal", graph=run_algorithm("prim")[0].graph)[-1].aux.weight == 9
