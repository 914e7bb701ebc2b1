import pytest

import main
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_algorithm_catalogue(client):
    resp = client.get("/api/algorithms")
    assert resp.status_code == 200
    keys = [card["key"] for card in resp.get_json()]
    assert "BUBBLE_SORT" in keys and "SCC" in keys
    assert len(keys) == len(set(keys))


def test_initial_state(client):
    data = client.get("/api/state").get_json()
    assert data["algorithm"] == "BUBBLE_SORT"
    assert len(data["array"]) == 50
    assert data["grid"] is None
    assert data["replay"]["status"] == "idle"
    assert data["currentStep"] == -1


def test_select_algorithm(client):
    data = client.post("/api/config/algo", json={"algorithm": "dijkstra"}).get_json()
    assert data["algorithm"] == "DIJKSTRA"
    assert data["grid"]["rows"] == 20

    resp = client.post("/api/config/algo", json={"algorithm": "quantum_sort"})
    assert resp.status_code == 404


def test_speed_validation(client):
    assert client.post("/api/config/speed", json={"speed": "fast"}).status_code == 400
    assert client.post("/api/config/speed", json={"speed": True}).status_code == 400
    data = client.post("/api/config/speed", json={"speed": 100}).get_json()
    assert data == {"speed": 100, "delayMs": 1}


def test_run_step_and_scrub(client):
    run = client.post("/api/run", json={"paused": True}).get_json()
    assert run["status"] == "paused"
    assert run["totalSteps"] > 0

    step = client.post("/api/step/next").get_json()
    assert step["applied"] is True
    assert step["currentStep"] == 0

    code = client.get("/api/pseudocode").get_json()
    assert code["label"] == "Bubble Sort"
    assert code["currentLine"] == 4
    assert code["log"].startswith("Comparing elements at indices [0, 1]")

    scrub = client.post("/api/step/goto", json={"index": 5}).get_json()
    assert scrub["currentStep"] == 5
    assert client.post("/api/step/goto", json={"index": 10 ** 6}).status_code == 400


def test_second_run_while_live_conflicts(client):
    client.post("/api/run", json={"paused": True})
    resp = client.post("/api/run")
    assert resp.status_code == 409
    assert "error" in resp.get_json()

    assert client.post("/api/array/reset").status_code == 409
    client.post("/api/stop")
    assert client.post("/api/run").status_code == 200


def test_stop_clears_replay(client):
    client.post("/api/run", json={"paused": True})
    client.post("/api/step/next")
    data = client.post("/api/stop").get_json()
    assert data["replay"]["status"] == "stopped"
    assert data["highlightIndices"] == []
    assert data["isPlaying"] is False


def test_step_next_without_run(client):
    assert client.post("/api/step/next").status_code == 400


def test_play_toggle(client):
    client.post("/api/run", json={"paused": True})
    assert client.post("/api/step/play").get_json()["status"] == "running"
    assert client.post("/api/step/play").get_json()["status"] == "paused"


def test_wall_painting(client):
    client.post("/api/config/algo", json={"algorithm": "BFS"})
    cell = client.post("/api/grid/mouse", json={"event": "down", "row": 0, "col": 0}).get_json()["cell"]
    assert cell["isWall"] is True
    cell = client.post("/api/grid/mouse", json={"event": "enter", "row": 0, "col": 1}).get_json()["cell"]
    assert cell["isWall"] is True
    client.post("/api/grid/mouse", json={"event": "up"})
    cell = client.post("/api/grid/mouse", json={"event": "enter", "row": 0, "col": 2}).get_json()["cell"]
    assert cell["isWall"] is False

    assert client.post("/api/grid/mouse", json={"event": "wiggle"}).status_code == 400
    data = client.post("/api/grid/clear", json={"what": "board"}).get_json()
    assert not data["grid"]["nodes"][0][0]["isWall"]


def test_tree_routes(client):
    assert client.post("/api/tree/insert", json={"value": 3}).status_code == 400

    client.post("/api/config/algo", json={"algorithm": "AVL"})
    for v in (30, 20, 10):
        data = client.post("/api/tree/insert", json={"value": v}).get_json()
    assert data["treeRoot"]["value"] == 20
    assert data["lastRotations"] == ["LL"]
    assert client.post("/api/tree/insert", json={"value": "x"}).status_code == 400

    assert client.post("/api/tree/traverse", json={"kind": "inorder"}).status_code == 200
    assert client.post("/api/tree/traverse", json={"kind": "sideways"}).status_code == 400


def test_ds_routes(client):
    client.post("/api/config/algo", json={"algorithm": "STACK"})
    resp = client.post("/api/ds/push", json={"value": 7})
    assert resp.status_code == 200
    assert resp.get_json()["totalSteps"] == 4

    while client.post("/api/step/next").status_code == 200:
        pass
    assert client.get("/api/state").get_json()["array"] == [7]
    assert client.post("/api/ds/enqueue", json={"value": 1}).status_code == 400


def test_graph_generate(client):
    client.post("/api/config/algo", json={"algorithm": "SCC"})
    graph = client.post("/api/graph/generate", json={"nodes": 6}).get_json()
    assert len(graph["nodes"]) == 6
    assert client.post("/api/graph/generate", json={"nodes": 0}).status_code == 400

    run = client.post("/api/ds/run").get_json()
    assert run["totalSteps"] > 0


def test_compare_route(client):
    data = client.post("/api/compare", json={"left": "BUBBLE_SORT", "right": "QUICK_SORT"}).get_json()
    assert data["left"]["algo_label"] == "Bubble Sort"
    assert data["right"]["algo_label"] == "Quick Sort"
    assert data["winner_steps"] in ("Bubble Sort", "Quick Sort", "tie")

    assert client.post("/api/compare", json={"left": "BUBBLE_SORT", "right": "??"}).status_code == 404


def test_string_config(client):
    client.post("/api/config/algo", json={"algorithm": "KMP"})
    data = client.post("/api/config/strings", json={"first": "abcab", "second": "ab"}).get_json()
    assert data["text"] == "abcab"
    assert data["pattern"] == "ab"
    assert client.post("/api/config/strings", json={"first": 1, "second": "a"}).status_code == 400


def test_catalogue_filters(client):
    keys = {card["key"] for card in client.get("/api/algorithms?tag=mst").get_json()}
    assert keys == {"PRIMS", "KRUSKALS"}

    graph = {card["key"] for card in client.get("/api/algorithms?family=graph").get_json()}
    assert {"SCC", "TOPOLOGICAL_SORT", "CONNECTED_COMPONENTS"} <= graph
    assert "BFS" not in graph
    assert client.get("/api/algorithms?family=nope").status_code == 404


def test_stop_cancels_tree_traversal(client):
    client.post("/api/config/algo", json={"algorithm": "BST"})
    for v in (5, 3, 8):
        client.post("/api/tree/insert", json={"value": v})
    assert client.post("/api/tree/traverse", json={"kind": "inorder"}).status_code == 200
    assert client.post("/api/config/algo", json={"algorithm": "BUBBLE_SORT"}).status_code == 409

    data = client.post("/api/stop").get_json()
    assert data["isPlaying"] is False
    assert data["activeNodeId"] is None
    assert client.post("/api/tree/tick").get_json()["advanced"] is False
    assert client.post("/api/config/algo", json={"algorithm": "BUBBLE_SORT"}).status_code == 200


def test_workspace_table_is_bounded(monkeypatch):
    monkeypatch.setitem(app.config, "MAX_WORKSPACES", 3)
    for _ in range(10):
        app.test_client().get("/api/state")
    assert len(main._workspaces) <= 3


def test_workspace_eviction_is_least_recently_used(monkeypatch):
    monkeypatch.setitem(app.config, "MAX_WORKSPACES", 3)
    a, b, c, d = (app.test_client() for _ in range(4))

    a.post("/api/config/algo", json={"algorithm": "BFS"})
    b.post("/api/config/algo", json={"algorithm": "KMP"})
    c.get("/api/state")
    a.get("/api/state")
    d.get("/api/state")

    assert a.get("/api/state").get_json()["algorithm"] == "BFS"
    assert b.get("/api/state").get_json()["algorithm"] == "BUBBLE_SORT"


def test_heap_layout_in_state(client):
    assert client.get("/api/state").get_json()["heapLayout"] is None

    client.post("/api/config/algo", json={"algorithm": "MIN_HEAP"})
    client.post("/api/ds/build")
    while client.post("/api/step/next").status_code == 200:
        pass
    data = client.get("/api/state").get_json()
    assert len(data["heapLayout"]) == len(data["array"]) == 10
    assert data["heapLayout"][0]["y"] < data["heapLayout"][1]["y"]


def test_topological_sort_route(client):
    client.post("/api/config/algo", json={"algorithm": "TOPOLOGICAL_SORT"})
    client.post("/api/graph/generate", json={"nodes": 7})
    run = client.post("/api/ds/run").get_json()
    assert run["totalSteps"] > 0
