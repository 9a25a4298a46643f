import importlib
import json
import sys

import pytest

# run.py is imported as a module; parse_args + main are exercised with
# start_server patched so no network listener is started.


@pytest.fixture()
def run_module():
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "Myths of Ulan" in out


def test_default_command_is_generate(run_module):
    assert run_module.parse_args([]).command == "generate"


def test_generate_json(run_module, capsys):
    code = run_module.main(
        ["generate", "--seed", "42", "--min-rooms", "5", "--max-rooms", "5", "--min-room-size", "5", "--max-room-size", "5", "--width", "40", "--height", "40", "--json"]
    )
    assert code == 0
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["seed"] == 42
    assert len(data["rooms"]) == 5


def test_generate_summary_and_ascii(run_module, capsys):
    code = run_module.main(["generate", "--seed", "7", "--ascii"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Simple Room Generator" in out
    assert "room_0" in out
    assert out.count("@") == 1
    assert "===" in out


def test_generate_invalid_config_exits_nonzero(run_module, capsys):
    code = run_module.main(["generate", "--seed", "1", "--width", "10", "--height", "10", "--min-room-size", "12", "--max-room-size", "12"])
    assert code == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_generate_unknown_generator(run_module, capsys):
    assert run_module.main(["generate", "--generator", "maze"]) == 1
    assert "Unknown generator" in capsys.readouterr().out


def test_env_file_supplies_config(run_module, tmp_path, monkeypatch, capsys):
    for key in ("DUNGEON_MIN_ROOMS", "DUNGEON_MAX_ROOMS"):
        monkeypatch.delenv(key, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DUNGEON_MIN_ROOMS=2\nDUNGEON_MAX_ROOMS=2\n")
    try:
        code = run_module.main(["--env-file", str(env_file), "generate", "--seed", "3", "--json"])
        out = capsys.readouterr().out
    finally:
        monkeypatch.delenv("DUNGEON_MIN_ROOMS", raising=False)
        monkeypatch.delenv("DUNGEON_MAX_ROOMS", raising=False)
    assert code == 0
    data = json.loads(out)
    assert len(data["rooms"]) == 2


def test_generators_command(run_module, capsys):
    assert run_module.main(["generators"]) == 0
    assert "Simple Room Generator" in capsys.readouterr().out


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setenv("HOST", "127.0.0.1")
    import ulan.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    assert run_module.main(["server"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": False}


def test_server_flags_override_env(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    import ulan.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    run_module.main(["server", "--host", "0.0.0.0", "--port", "8080", "--debug"])
    assert calls == {"host": "0.0.0.0", "port": 8080, "debug": True}
