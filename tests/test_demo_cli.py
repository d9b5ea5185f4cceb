import json

import pytest

from specfilter import demo, logging_config


def run_main(monkeypatch, *args):
    monkeypatch.setattr(demo.sys, "argv", ["specfilter", *args])
    demo.main()


def test_main_prints_all_scenarios(monkeypatch, capsys):
    run_main(monkeypatch)

    out = capsys.readouterr().out
    assert "Green products (old):" in out
    assert "Green products (new):" in out
    assert " * House is large and blue" in out
    assert out.index("Apple") < out.index("Tree")


def test_main_json_output(monkeypatch, capsys):
    run_main(monkeypatch, "--json")

    data = json.loads(capsys.readouterr().out)
    assert [s["name"] for s in data["scenarios"]] == ["green-old", "green", "large-blue"]
    assert data["scenarios"][1]["matches"] == ["Apple", "Tree"]
    assert data["scenarios"][2]["matches"] == ["House"]


def test_main_selected_scenarios(monkeypatch, capsys):
    run_main(monkeypatch, "--json", "--scenario", "large-blue", "--scenario", "green")

    data = json.loads(capsys.readouterr().out)
    assert [s["name"] for s in data["scenarios"]] == ["large-blue", "green"]


def test_main_exits_on_unknown_scenario(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "--scenario", "missing")

    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "Error: Invalid scenario." in err
    assert "Unknown scenario 'missing'" in err


def test_main_exits_on_strict_config_error(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("SPECFILTER_STRICT_CONFIG", "1")

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "--config-dir", str(tmp_path / "nowhere"))

    assert exc.value.code == 2
    assert "Invalid runtime configuration." in capsys.readouterr().err


def test_main_writes_audit_log(monkeypatch, capsys):
    run_main(monkeypatch, "--json", "--scenario", "green")
    capsys.readouterr()

    audit = (logging_config.LOG_DIR / "specfilter-audit.log").read_text()
    assert "scenario=green | matches=2" in audit


def test_select_scenarios_defaults_to_all():
    assert demo.select_scenarios(None) == demo.DEFAULT_SCENARIOS
    assert demo.select_scenarios([]) == demo.DEFAULT_SCENARIOS


def write_config(tmp_path, payload):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "runtime_config.json").write_text(json.dumps(payload))
    return config_dir


BAD_VALUES = {
    "display": {"header_style": "not a style"},
    "system": {"console_log_level": 10},
}


def test_main_bad_config_values_lenient(monkeypatch, capsys, tmp_path):
    config_dir = write_config(tmp_path, BAD_VALUES)

    run_main(monkeypatch, "--config-dir", str(config_dir))

    captured = capsys.readouterr()
    assert "Warning: display.header_style must be" in captured.err
    assert "Warning: system.console_log_level must be" in captured.err
    assert "Large and blue products:" in captured.out
    assert " * House is large and blue" in captured.out


def test_main_bad_config_values_strict(monkeypatch, capsys, tmp_path):
    config_dir = write_config(tmp_path, BAD_VALUES)
    monkeypatch.setenv("SPECFILTER_STRICT_CONFIG", "1")

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "--config-dir", str(config_dir))

    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "Error: Invalid runtime configuration." in err
    assert "system.console_log_level must be" in err


def test_main_rejects_unknown_log_level(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "--log-level", "loud")

    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_main_accepts_lowercase_log_level(monkeypatch, capsys):
    run_main(monkeypatch, "--json", "--log-level", "debug", "--scenario", "green")

    data = json.loads(capsys.readouterr().out)
    assert data["scenarios"][0]["matches"] == ["Apple", "Tree"]
