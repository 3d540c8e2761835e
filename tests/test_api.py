import pytest

from config import Settings
from graph.defaults import traversal_graph
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def run(client, **payload):
    return client.post("/api/run", json=payload)


class TestCatalogue:
    def test_algorithms(self, client):
        data = client.get("/api/algorithms").get_json()
        assert [a["key"] for a in data["algorithms"]] == [
            "bfs", "dfs", "dijkstra", "prim", "kruskal", "bellman-ford",
        ]

    def test_default_graph(self, client):
        data = client.get("/api/algorithms/bellman_ford/default-graph").get_json()
        assert data["graph"]["type"] == "directed-weighted"
        assert len(data["graph"]["nodes"]) == 5

    def test_default_graph_unknown(self, client):
        assert client.get("/api/algorithms/astar/default-graph").status_code == 404


class TestRun:
    def test_run_default(self, client):
        resp = run(client, algorithm="bfs", startVertex="A")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["total_steps"] == 7
        assert len(data["steps"]) == 7
        assert data["current_step"] == 0
        assert data["summary"]["outcome"] == "success"
        assert "graph" not in data["steps"][0]

    def test_unknown_algorithm(self, client):
        resp = run(client, algorithm="astar")
        assert resp.status_code == 400
        assert "Unknown algorithm" in resp.get_json()["error"]

    def test_malformed_graph(self, client):
        resp = run(client, algorithm="bfs", graph={"nodes": [{"id": 1}], "edges": [{"source": 1, "target": 7}]})
        assert resp.status_code == 400

    def test_non_numeric_weight_is_rejected(self, client):
        graph = {
            "type": "directed-weighted",
            "nodes": [{"id": 1, "label": "A"}, {"id": 2, "label": "B"}],
            "edges": [{"source": 1, "target": 2, "weight": "4"}],
        }
        resp = run(client, algorithm="dijkstra", graph=graph)
        assert resp.status_code == 400
        assert "non-numeric weight" in resp.get_json()["error"]

    def test_graph_type_mismatch_needs_force(self, client):
        graph = traversal_graph().to_dict()
        assert run(client, algorithm="prim", graph=graph).status_code == 400
        resp = run(client, algorithm="prim", graph=graph, force=True)
        assert resp.status_code == 200
        assert resp.get_json()["summary"]["mst_weight"] == 5

    def test_negative_cycle_is_a_normal_result(self, client):
        data = run(client, algorithm="bellman-ford").get_json()
        assert data["summary"]["outcome"] == "negative_cycle"
        assert data["steps"][-1]["aux"]["negative_cycle"] is True


class TestNavigation:
    def test_requires_a_run(self, client):
        assert client.post("/api/step/next").status_code == 400

    def test_next_prev_goto(self, client):
        run(client, algorithm="bfs")

        data = client.post("/api/step/next").get_json()
        assert data["current_step"] == 1
        assert data["step"]["index"] == 2

        data = client.post("/api/step/prev").get_json()
        assert data["current_step"] == 0
        assert client.post("/api/step/prev").status_code == 400

        data = client.post("/api/step/goto", json={"index": 6}).get_json()
        assert data["is_final"]
        assert client.post("/api/step/next").status_code == 400
        assert client.post("/api/step/goto", json={"index": 99}).status_code == 400
        assert client.post("/api/step/goto", json={"index": "2"}).status_code == 400

    def test_custom_graph_survives_navigation(self, client, relay_shortcut_graph):
        run(client, algorithm="dijkstra", startVertex="A", graph=relay_shortcut_graph.to_dict())
        data = client.post("/api/step/goto", json={"index": 8}).get_json()
        assert data["step"]["aux"]["distances"] == {"A": 0, "B": 3, "C": 2, "D": 8}

    def test_state(self, client):
        run(client, algorithm="dfs", startVertex="C")
        client.post("/api/step/next")
        state = client.get("/api/state").get_json()
        assert state["algorithm"] == "dfs"
        assert state["start_vertex"] == "C"
        assert state["current_step"] == 1
        assert state["total_steps"] == 19


class TestSpeedAndCompare:
    def test_speed(self, client):
        data = client.post("/api/config/speed", json={"speed": "fast"}).get_json()
        assert data["seconds_per_step"] == 0.3
        assert client.get("/api/state").get_json()["speed"] == "fast"
        assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400

    def test_compare(self, client, mst_square_graph):
        resp = client.post("/api/compare", json={
            "left": "prim", "right": "kruskal", "graph": mst_square_graph.to_dict(),
        })
        data = resp.get_json()
        assert data["mst_weight_agree"] is True
        assert data["left"]["mst_weight"] == 6

    def test_compare_unknown(self, client):
        assert client.post("/api/compare", json={"left": "bfs"}).status_code == 400


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("GRAPH_TUTOR_PORT", "8123")
    monkeypatch.setenv("GRAPH_TUTOR_LOG_FORMAT", "json")
    s = Settings()
    assert s.PORT == 8123
    assert s.LOG_FORMAT == "json"


def test_logging_is_configured_on_import():
    import structlog

    assert structlog.is_configured()
