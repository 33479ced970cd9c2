#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行入口测试
"""

import json

import cv2
import numpy as np
import pytest

from maze_vision.main import main, EXIT_OK, EXIT_INPUT_ERROR, EXIT_NO_OPENINGS, EXIT_NO_PATH


def _write(tmp_path, name, image):
    path = tmp_path / name
    assert cv2.imwrite(str(path), image)
    return str(path)


def test_cli_json_output(tmp_path, capsys, maze_image):
    image_path = _write(tmp_path, "maze.png", maze_image)
    out_path = tmp_path / "out" / "solved.png"

    code = main(["--image", image_path, "--out", str(out_path), "--json", "--log-level", "ERROR"])

    assert code == EXIT_OK
    assert out_path.exists()
    payload = json.loads(capsys.readouterr().out)
    assert payload["start"] == [1, 0]
    assert payload["goal"] == [5, 6]
    assert payload["moves"][0] == {"dir": "S", "steps": 1}
    assert payload["instructions"][:2] == ["FORWARD 1", "TURN LEFT"]
    assert len(payload["path"]) == 15


def test_cli_text_output(tmp_path, capsys, maze_image):
    image_path = _write(tmp_path, "maze.png", maze_image)
    code = main(["--image", image_path, "--out", str(tmp_path / "o.png"), "--log-level", "ERROR"])
    assert code == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert json.loads(lines[0])[1] == {"dir": "E", "steps": 2}
    assert lines[1] == "Step 1: FORWARD 1"


def test_cli_exit_codes(tmp_path, blocked_maze_image):
    args = ["--out", str(tmp_path / "o.png"), "--log-level", "ERROR"]

    dark = _write(tmp_path, "dark.png", np.zeros((10, 10, 3), dtype=np.uint8))
    assert main(["--image", dark] + args) == EXIT_NO_OPENINGS

    blocked = _write(tmp_path, "blocked.png", blocked_maze_image)
    assert main(["--image", blocked] + args) == EXIT_NO_PATH

    assert main(["--image", str(tmp_path / "missing.png")] + args) == EXIT_INPUT_ERROR


def test_cli_config_and_overrides(tmp_path, maze_image):
    image_path = _write(tmp_path, "maze.png", maze_image)
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("solver:\n  cell_size: 3\nlogging:\n  level: ERROR\n", encoding="utf-8")
    args = ["--image", image_path, "--out", str(tmp_path / "o.png"), "--config", str(cfg)]

    assert main(args) == EXIT_OK
    assert main(args + ["--cell-size", "0"]) == EXIT_INPUT_ERROR

    bad = tmp_path / "bad.yaml"
    bad.write_text("solver:\n  cell_size: -1\n", encoding="utf-8")
    assert main(["--image", image_path, "--config", str(bad)]) == EXIT_INPUT_ERROR


def test_cli_rejects_unknown_log_level(tmp_path, capsys, maze_image):
    image_path = _write(tmp_path, "maze.png", maze_image)
    args = ["--image", image_path, "--out", str(tmp_path / "o.png")]

    with pytest.raises(SystemExit) as exc_info:
        main(args + ["--log-level", "VERBOSE"])
    assert exc_info.value.code == 2
    assert "--log-level" in capsys.readouterr().err

    # 大小写不敏感
    assert main(args + ["--log-level", "error"]) == EXIT_OK
