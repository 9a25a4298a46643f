from ulan.routes import dungeon_api

SCENARIO_QS = "min_rooms=5&max_rooms=5&min_room_size=5&max_room_size=5&width=40&height=40"


def test_list_generators(client):
    resp = client.get("/api/generators")
    assert resp.status_code == 200
    assert resp.get_json() == {"generators": [{"key": "simple", "name": "Simple Room Generator"}]}


def test_generate_scenario(client):
    resp = client.get(f"/api/dungeon?seed=42&{SCENARIO_QS}")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["seed"] == 42
    assert data["config"]["dungeon_width"] == 40
    assert len(data["rooms"]) == 5
    assert data["current_room_id"] == "room_0"
    assert data["player"] == {"x": 2, "y": 2}
    stairs = [rid for rid, r in data["rooms"].items() if any(">" in row for row in r["tiles"])]
    assert len(stairs) == 1


def test_generate_is_deterministic_for_text_seeds(client, test_app):
    test_app.config["DUNGEON_DISABLE_CACHE"] = True
    try:
        a = client.get("/api/dungeon?seed=moonlit-crypt").get_json()
        b = client.get("/api/dungeon?seed=moonlit-crypt").get_json()
    finally:
        test_app.config["DUNGEON_DISABLE_CACHE"] = False
    assert a["seed"] == b["seed"]
    assert a["rooms"] == b["rooms"]
    assert a["corridors"] == b["corridors"]


def test_random_seed_is_reported(client):
    data = client.get("/api/dungeon").get_json()
    assert isinstance(data["seed"], int)
    again = client.get(f"/api/dungeon?seed={data['seed']}").get_json()
    assert again["rooms"] == data["rooms"]


def test_invalid_config(client):
    resp = client.get("/api/dungeon?seed=1&width=10&height=10&min_room_size=12&max_room_size=12")
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "invalid_config"
    assert body["constraint"] == "fit_width"


def test_non_integer_param(client):
    resp = client.get("/api/dungeon?seed=1&min_rooms=lots")
    assert resp.status_code == 400
    assert resp.get_json()["constraint"] == "min_rooms"


def test_insufficient_rooms(client):
    resp = client.get("/api/dungeon?seed=3&min_rooms=2&max_rooms=2&min_room_size=7&max_room_size=7&width=9&height=9")
    assert resp.status_code == 422
    body = resp.get_json()
    assert body == {
        "error": "insufficient_rooms",
        "achieved": 1,
        "required": 2,
        "message": "Could only generate 1 rooms, minimum is 2",
    }


def test_unknown_generator(client):
    resp = client.get("/api/dungeon?seed=1&generator=maze")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "unknown_generator"


def test_app_config_defaults_apply(client, test_app):
    test_app.config["DUNGEON_MIN_ROOMS"] = 3
    test_app.config["DUNGEON_MAX_ROOMS"] = 3
    try:
        data = client.get("/api/dungeon?seed=8").get_json()
    finally:
        test_app.config["DUNGEON_MIN_ROOMS"] = None
        test_app.config["DUNGEON_MAX_ROOMS"] = None
    assert len(data["rooms"]) == 3
    assert data["config"]["min_rooms"] == 3


def test_room_view(client):
    resp = client.get(f"/api/dungeon/42/rooms/room_0?{SCENARIO_QS}")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["id"] == "room_0"
    assert data["ascii"].count("@") == 1
    assert data["ascii"].startswith("=== ")
    other = client.get(f"/api/dungeon/42/rooms/room_4?{SCENARIO_QS}").get_json()
    assert "@" not in other["ascii"]
    assert ">" in other["ascii"]


def test_unknown_room(client):
    resp = client.get(f"/api/dungeon/42/rooms/room_99?{SCENARIO_QS}")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "unknown_room", "room_id": "room_99"}


def test_cache_reuses_generated_dungeon(client, monkeypatch):
    calls = []
    real_build = dungeon_api.build_dungeon

    def counting_build(config, seed, generator=None):
        calls.append(seed)
        return real_build(config, seed, generator)

    monkeypatch.setattr(dungeon_api, "build_dungeon", counting_build)
    client.get(f"/api/dungeon?seed=77&{SCENARIO_QS}")
    client.get(f"/api/dungeon/77/rooms/room_1?{SCENARIO_QS}")
    assert calls == [77]


def test_cache_is_bounded(client, test_app):
    test_app.config["DUNGEON_CACHE_MAX"] = 2
    try:
        for seed in (1, 2, 3):
            client.get(f"/api/dungeon?seed={seed}&{SCENARIO_QS}")
        assert len(dungeon_api._dungeon_cache) == 2
    finally:
        test_app.config["DUNGEON_CACHE_MAX"] = 8


def test_oversized_grid_rejected_before_generation(client, monkeypatch):
    calls = []
    monkeypatch.setattr(dungeon_api, "build_dungeon", lambda *a, **k: calls.append(a))
    resp = client.get("/api/dungeon?seed=1&width=1000000&height=1000000")
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "invalid_config"
    assert body["constraint"] == "grid_size"
    assert calls == []


def test_grid_cap_is_configurable(client, test_app):
    test_app.config["DUNGEON_MAX_GRID"] = 1000
    try:
        small = client.get(f"/api/dungeon?seed=1&{SCENARIO_QS}")
        large = client.get("/api/dungeon?seed=1")
    finally:
        test_app.config["DUNGEON_MAX_GRID"] = 250_000
    # 40x40 = 1600 cells, default 80x50 = 4000 cells
    assert small.status_code == 400
    assert large.status_code == 400
    assert client.get("/api/dungeon?seed=1").status_code == 200


def test_cache_max_zero_disables_cache(client, test_app, monkeypatch):
    calls = []
    real_build = dungeon_api.build_dungeon

    def counting_build(config, seed, generator=None):
        calls.append(seed)
        return real_build(config, seed, generator)

    monkeypatch.setattr(dungeon_api, "build_dungeon", counting_build)
    test_app.config["DUNGEON_CACHE_MAX"] = 0
    try:
        client.get(f"/api/dungeon?seed=77&{SCENARIO_QS}")
        client.get(f"/api/dungeon?seed=77&{SCENARIO_QS}")
        assert dungeon_api._dungeon_cache == {}
    finally:
        test_app.config["DUNGEON_CACHE_MAX"] = 8
    assert calls == [77, 77]
