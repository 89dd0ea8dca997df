"""Tests for the Flask adapter (test client, session-backed runs)."""

import pytest

from services import explain as explain_module


def walk_to_end(client, limit=50):
    body = None
    for _ in range(limit):
        resp = client.post("/api/step/next")
        if resp.status_code != 200:
            break
        body = resp.get_json()
        if body["is_finished"]:
            break
    return body


def test_index_renders(client):
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Search Algorithm Lab" in html
    assert "<svg" in html
    assert "Breadth-First Search (BFS)" in html


def test_catalog_endpoints(client):
    scenarios = client.get("/api/scenarios").get_json()["scenarios"]
    assert [s["key"] for s in scenarios][0] == "standard"
    assert len(scenarios) == 5
    algos = client.get("/api/algorithms").get_json()["algorithms"]
    assert [a["key"] for a in algos] == ["bfs", "dfs", "ucs", "dijkstra"]
    assert algos[2]["frontier"] == "priority queue"


def test_unknown_keys_are_400(client):
    assert client.post("/api/config/algo", json={"algo_key": "astar"}).status_code == 400
    assert client.post("/api/config/scenario", json={"scenario_key": "maze"}).status_code == 400
    assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400


def test_stepping_requires_a_run(client):
    for url in ("/api/step/next", "/api/step/prev", "/api/step/end"):
        resp = client.post(url)
        assert resp.status_code == 400
        assert "error" in resp.get_json()


def test_run_then_step_to_solution(client):
    client.post("/api/config/algo", json={"algo_key": "ucs"})
    body = client.post("/api/run").get_json()
    assert body["current_step"] == 0
    assert body["total_steps"] == 6
    assert body["state"]["frontier"] == ["S"]

    final = walk_to_end(client)
    assert final["is_finished"]
    assert final["state"]["path"] == ["S", "A", "C", "G"]
    assert final["state"]["total_cost"] == 11
    assert final["current_step"] == 6

    assert client.post("/api/step/next").status_code == 400


def test_prev_goto_end_and_reset(client):
    client.post("/api/run")
    client.post("/api/step/next")
    client.post("/api/step/next")

    prev = client.post("/api/step/prev").get_json()
    assert prev["current_step"] == 1
    assert prev["state"]["current"] == "S"

    assert client.post("/api/step/goto", json={"index": 99}).status_code == 400
    goto = client.post("/api/step/goto", json={"index": 3}).get_json()
    assert goto["state"]["step_count"] == 3

    end = client.post("/api/step/end").get_json()
    assert end["is_finished"]
    assert end["state"]["status"] == "solved"

    reset = client.post("/api/reset").get_json()
    assert reset["state"] is None
    assert client.get("/api/state").get_json()["cursor"] is None


@pytest.mark.parametrize("index", [True, False, "2", 1.0, -1])
def test_goto_rejects_non_integer_index(client, index):
    client.post("/api/run")
    resp = client.post("/api/step/goto", json={"index": index})
    assert resp.status_code == 400
    assert client.get("/api/state").get_json()["cursor"] == 0


def test_changing_selection_drops_the_run(client):
    client.post("/api/run")
    resp = client.post("/api/config/scenario", json={"scenario_key": "deep_narrow"})
    assert resp.status_code == 200
    state = client.get("/api/state").get_json()
    assert state["scenario"] == "deep_narrow"
    assert state["state"] is None


def test_state_endpoint_tracks_selection(client):
    client.post("/api/config/algo", json={"algo_key": "DFS"})
    client.post("/api/config/speed", json={"speed": "fast"})
    client.post("/api/run")
    state = client.get("/api/state").get_json()
    assert state["algo"] == "dfs"
    assert state["speed"] == "fast"
    assert state["cursor"] == 0
    assert state["state"]["status"] == "unstarted"


def test_step_cap_from_settings(settings):
    from main import create_app

    settings.max_steps = 2
    client = create_app(settings).test_client()
    body = client.post("/api/run").get_json()
    assert body["step_limit_hit"]
    assert body["total_steps"] == 2
    client.post("/api/step/next")
    client.post("/api/step/next")
    assert client.post("/api/step/next").status_code == 400


def test_compare_endpoint(client):
    client.post("/api/config/scenario", json={"scenario_key": "variable_cost"})
    body = client.get("/api/compare").get_json()
    assert body["scenario"] == "variable_cost"
    assert body["results"]["bfs"]["path_cost"] == 20
    assert body["results"]["ucs"]["path_cost"] == 4
    assert "Criteria Comparison Matrix" in body["html"]


def test_explain_endpoint(client, monkeypatch):
    class Ok:
        def raise_for_status(self):
            pass

        def json(self):
            return {"choices": [{"message": {"content": "A stack is LIFO."}}]}

    seen = {}

    def fake_post(url, headers=None, data=None, timeout=None):
        seen["url"] = url
        return Ok()

    monkeypatch.setattr(explain_module.requests, "post", fake_post)
    resp = client.post("/api/explain", json={"topic": "What is a stack?", "algo_key": "dfs"})
    assert resp.status_code == 200
    assert resp.get_json()["answer"] == "A stack is LIFO."
    assert seen["url"] == "http://llm.test/v1/chat/completions"


@pytest.mark.parametrize("payload", [{}, {"topic": "  "}, {"topic": "x", "algo_key": "astar"}])
def test_explain_rejects_bad_input(client, payload):
    assert client.post("/api/explain", json=payload).status_code == 400
