from pathlib import Path

import yaml

from threatnav.main import build_navigator, load_config, main

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write_config(tmp_path, cfg):
    path = tmp_path / "scenario.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_main_prints_route(tmp_path, capsys):
    path = _write_config(
        tmp_path,
        {
            "grid": {"rows": 4, "columns": 4},
            "mode": "pursuer",
            "origin": [0, 0],
            "target": [3, 3],
        },
    )
    assert main(["--config", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["1,1", "2,2", "3,3"]


def test_main_reports_unreachable(tmp_path, capsys):
    cfg = {
        "grid": {"rows": 3, "columns": 7},
        "mode": "evader",
        "origin": [1, 0],
        "target": [1, 6],
        "threats": [[1, 3]],
    }
    path = _write_config(tmp_path, cfg)
    assert main(["--config", str(path)]) == 2
    assert capsys.readouterr().out == ""
    assert main(["--config", str(path), "--mode", "pursuer"]) == 0


def test_main_rejects_malformed_cells(tmp_path):
    path = _write_config(tmp_path, {"grid": {"rows": 4, "columns": 4}, "origin": [0], "target": [1, 1]})
    assert main(["--config", str(path)]) == 2


def test_build_navigator_defaults():
    navigator = build_navigator({})
    assert navigator.config.distance_scale == 1000
    assert navigator.config.repulsion_scale == 10000
    assert navigator.config.exclusion_radius == 1


def test_default_config_plans_around_threat():
    cfg = load_config(REPO_ROOT / "configs" / "default.yaml")
    assert cfg["mode"] == "evader"
    assert main(["--config", str(REPO_ROOT / "configs" / "default.yaml")]) == 0
