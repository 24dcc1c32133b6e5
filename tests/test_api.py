"""Tests for the Flask JSON API."""

import pytest

from main import app

SAMPLE_TEXT = "23,1,10,5,2,7,15"


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def _generate(client, **body):
    body.setdefault("algorithm", "bubble-sort")
    body.setdefault("array", SAMPLE_TEXT)
    return client.post("/api/generate", json=body)


class TestAlgorithms:
    def test_lists_registry(self, client):
        data = client.get("/api/algorithms").get_json()
        keys = [a["key"] for a in data["algorithms"]]
        assert len(keys) == 10
        assert "interpolation-search" in keys


class TestGenerate:
    def test_generate_bubble(self, client):
        resp = _generate(client)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["generated"] is True
        assert data["total_steps"] == 34
        assert data["state"] == "ready"
        assert data["steps"][0]["label"] == "Initial Array"
        assert data["steps"][-1]["after"] == [1, 2, 5, 7, 10, 15, 23]

    def test_array_as_list(self, client):
        data = _generate(client, array=[3, 1, 2]).get_json()
        assert data["steps"][-1]["after"] == [1, 2, 3]

    def test_fractional_tokens_keep_integer_part(self, client):
        data = _generate(client, array="3.5,7x,1").get_json()
        assert data["steps"][0]["before"] == [3, 7, 1]

    def test_unknown_algorithm(self, client):
        resp = _generate(client, algorithm="bogo-sort")
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_malformed_body(self, client):
        resp = client.post("/api/generate", data="not json", content_type="text/plain")
        assert resp.status_code == 400

    def test_empty_array_clears_trace(self, client):
        _generate(client)
        data = _generate(client, array="x,y").get_json()
        assert data["generated"] is False
        assert data["total_steps"] == 0
        assert data["state"] == "idle"

    def test_search_target(self, client):
        data = _generate(client, algorithm="binary-search", target="10").get_json()
        assert data["steps"][-1]["highlights"]["after"]["found"] == [4]


class TestStepping:
    def test_state_before_generate(self, client):
        data = client.get("/api/state").get_json()
        assert data["total_steps"] == 0
        assert data["current_step"] is None

    def test_next_prev_persist_across_requests(self, client):
        _generate(client)
        client.post("/api/step/next")
        data = client.post("/api/step/next").get_json()
        assert data["current_index"] == 2
        data = client.post("/api/step/prev").get_json()
        assert data["current_index"] == 1
        assert client.get("/api/state").get_json()["current_index"] == 1

    def test_prev_at_start_is_ignored(self, client):
        _generate(client)
        data = client.post("/api/step/prev").get_json()
        assert data["moved"] is False
        assert data["current_index"] == 0

    def test_goto(self, client):
        _generate(client)
        data = client.post("/api/step/goto", json={"index": 5}).get_json()
        assert data["current_index"] == 5

    def test_goto_out_of_range_is_ignored(self, client):
        _generate(client)
        client.post("/api/step/goto", json={"index": 3})
        data = client.post("/api/step/goto", json={"index": 999}).get_json()
        assert data["moved"] is False
        assert data["current_index"] == 3

    def test_goto_bad_index(self, client):
        _generate(client)
        assert client.post("/api/step/goto", json={"index": "abc"}).status_code == 400

    def test_play_pause_reset(self, client):
        _generate(client)
        assert client.post("/api/step/play").get_json()["state"] == "playing"
        client.post("/api/step/next")
        assert client.post("/api/step/pause").get_json()["state"] == "paused"
        data = client.post("/api/step/reset").get_json()
        assert data["state"] == "ready"
        assert data["current_index"] == 0

    def test_speed_preset(self, client):
        assert client.post("/api/config/speed", json={"speed": "fast"}).get_json()["interval_s"] == 0.5
        assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400
        assert client.get("/api/state").get_json()["speed"] == "fast"

    def test_random_array(self, client):
        data = client.post("/api/array/random", json={"size": 5, "seed": 1}).get_json()
        assert len(data["array"]) == 5
        assert data["array_input"] == ",".join(map(str, data["array"]))


class TestCompare:
    def test_bubble_vs_selection(self, client):
        resp = client.post("/api/compare", json={
            "array": SAMPLE_TEXT,
            "left": "bubble-sort",
            "right": "selection-sort",
            "interval_ms": 1200,
            "frame_ms": 100,
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["left"]["playback_end"] < data["right"]["playback_end"]
        assert data["speed"]["winner"] == "A"
        assert data["speed"]["relative_a"] == "1x"
        assert data["work_winner"] == "B"

    def test_interval_floor_applied(self, client):
        data = client.post("/api/compare", json={"interval_ms": 10, "frame_ms": 100}).get_json()
        assert data["step_every_ms"] == 1200

    def test_unknown_algorithm(self, client):
        resp = client.post("/api/compare", json={"left": "nope"})
        assert resp.status_code == 400

    def test_empty_array(self, client):
        resp = client.post("/api/compare", json={"array": "x"})
        assert resp.status_code == 400


class TestMergeTree:
    def test_tree(self, client):
        data = client.post("/api/merge-tree", json={"array": [3, 1, 2]}).get_json()
        assert data["tree"]["merged"] == [1, 2, 3]
        assert data["tree"]["left"]["values"] == [3]

    def test_empty(self, client):
        assert client.post("/api/merge-tree", json={"array": ""}).status_code == 400


class TestQuickTree:
    def test_tree(self, client):
        data = client.post("/api/quick-tree", json={"array": [3, 1, 2]}).get_json()
        assert data["sorted_values"] == [1, 2, 3]
        assert data["root"]["pivot_value"] == 2
        assert data["root"]["left"]["values"] == [1]

    def test_empty(self, client):
        assert client.post("/api/quick-tree", json={"array": "x"}).status_code == 400

    def test_not_an_object(self, client):
        assert client.post("/api/quick-tree", json=[1, 2]).status_code == 400
