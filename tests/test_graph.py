import pytest

from graph import Edge, Graph, GraphError, Node, resolve_graph, resolve_start
from graph.defaults import DEFAULT_GRAPHS, bellman_ford_graph, traversal_graph


class TestNodeAndEdge:
    def test_label_defaults_to_stringified_id(self):
        assert Node(7).label == "7"
        assert Node(7, label="").label == "7"
        assert Node(7, label="G").label == "G"

    def test_missing_weight_costs_one(self):
        assert Edge(1, 2).cost == 1
        assert Edge(1, 2, 0).cost == 0
        assert Edge(1, 2, -3).cost == -3

    def test_edge_dict_omits_missing_weight(self):
        assert Edge(1, 2).to_dict() == {"source": 1, "target": 2}
        assert Edge.from_dict({"source": 1, "target": 2, "weight": 5}).weight == 5


class TestGraph:
    def test_build_assigns_ids_in_label_order(self):
        g = Graph.build("XYZ", [("X", "Z", 3)])
        assert g.node_ids() == [1, 2, 3]
        assert g.labels([1, 2, 3]) == ["X", "Y", "Z"]
        assert g.edges == [Edge(1, 3, 3)]

    def test_directed_neighbours_follow_source_to_target(self):
        g = Graph.build("ABC", [("A", "B"), ("C", "A")], directed=True)
        assert [n for n, _ in g.neighbours(1)] == [2]
        assert [n for n, _ in g.neighbours(2)] == []

    def test_undirected_neighbours_follow_both_ways_in_edge_order(self):
        g = Graph.build("ABC", [("A", "B"), ("C", "A")], directed=False)
        assert [n for n, _ in g.neighbours(1)] == [2, 3]
        assert [n for n, _ in g.neighbours(3)] == [1]

    def test_dangling_edge_rejected(self):
        g = Graph()
        g.create_node(1)
        with pytest.raises(GraphError):
            g.create_edge(1, 2)

    def test_duplicate_node_rejected(self):
        g = Graph()
        g.create_node(1)
        with pytest.raises(GraphError):
            g.create_node(1)

    def test_dict_round_trip(self):
        g = bellman_ford_graph()
        again = Graph.from_dict(g.to_dict())
        assert again == g
        assert again is not g

    def test_from_dict_reads_type_string(self):
        g = Graph.from_dict({
            "type": "undirected-unweighted",
            "nodes": [{"id": 1, "label": "A"}, {"id": 2}],
            "edges": [{"source": 1, "target": 2}],
        })
        assert not g.directed
        assert not g.weighted
        assert g.label(2) == "2"

    def test_explicit_flags_override_type(self):
        g = Graph.from_dict({"type": "undirected-weighted", "directed": True, "nodes": []})
        assert g.directed

    def test_from_dict_rejects_bad_input(self):
        with pytest.raises(GraphError):
            Graph.from_dict({"type": "hypergraph"})
        with pytest.raises(GraphError):
            Graph.from_dict({"nodes": [{"label": "no id"}]})
        with pytest.raises(GraphError):
            Graph.from_dict({"nodes": [{"id": 1}], "edges": [{"source": 1, "target": 9}]})

    @pytest.mark.parametrize("weight", ["4", True, [1], {"w": 1}])
    def test_from_dict_rejects_non_numeric_weight(self, weight):
        with pytest.raises(GraphError):
            Graph.from_dict({
                "nodes": [{"id": 1}, {"id": 2}],
                "edges": [{"source": 1, "target": 2, "weight": weight}],
            })

    def test_from_dict_accepts_int_and_float_weights(self):
        g = Graph.from_dict({
            "nodes": [{"id": 1}, {"id": 2}, {"id": 3}],
            "edges": [{"source": 1, "target": 2, "weight": -2}, {"source": 2, "target": 3, "weight": 0.5}],
        })
        assert [e.cost for e in g.edges] == [-2, 0.5]

    @pytest.mark.parametrize("flag", ["directed", "weighted"])
    def test_from_dict_rejects_string_flags(self, flag):
        with pytest.raises(GraphError):
            Graph.from_dict({flag: "false", "nodes": []})

    def test_graph_type(self):
        assert traversal_graph().graph_type == "undirected-unweighted"
        assert bellman_ford_graph().graph_type == "directed-weighted"


class TestAdapter:
    def test_none_builds_default(self):
        g = resolve_graph(None, traversal_graph)
        assert g == traversal_graph()

    def test_graph_passes_through(self, relay_shortcut_graph):
        assert resolve_graph(relay_shortcut_graph, traversal_graph) is relay_shortcut_graph

    def test_dict_is_converted(self, relay_shortcut_graph):
        assert resolve_graph(relay_shortcut_graph.to_dict(), traversal_graph) == relay_shortcut_graph

    def test_other_input_rejected(self):
        with pytest.raises(GraphError):
            resolve_graph([1, 2, 3], traversal_graph)

    @pytest.mark.parametrize("requested, expected", [
        ("C", "C"),
        ("3", "C"),
        (3, "C"),
        ("Z", "A"),
        (None, "A"),
        ("", "A"),
    ])
    def test_start_vertex_resolution(self, two_branch_tree, requested, expected):
        assert resolve_start(two_branch_tree, requested).label == expected

    def test_empty_graph_has_no_start(self):
        with pytest.raises(GraphError):
            resolve_start(Graph(), "A")

    def test_every_algorithm_has_a_fresh_default(self):
        for key, builder in DEFAULT_GRAPHS.items():
            assert builder() is not builder(), key
            assert builder().node_count() > 0
