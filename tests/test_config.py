#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模型与加载器测试
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from maze_vision.solver.common.exceptions import ConfigurationError
from maze_vision.solver.config import MazeVisionConfig, SolverConfig, RenderConfig, load_config

SAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "maze_solver.yaml"


def test_defaults():
    cfg = SolverConfig()
    assert cfg.wall_luminance_threshold == 200
    assert cfg.free_luminance_threshold == 230
    assert cfg.bbox_padding == 2
    assert cfg.cell_size == 3
    assert cfg.free_ratio_threshold == 0.7
    assert cfg.color_order == "BGR"
    assert RenderConfig().thickness is None


@pytest.mark.parametrize("field,value", [
    ("wall_luminance_threshold", 300),
    ("free_luminance_threshold", -1),
    ("bbox_padding", -2),
    ("cell_size", 0),
    ("free_ratio_threshold", 1.5),
    ("max_grid_dimension", 0),
    ("color_order", "HSV"),
])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        SolverConfig(**{field: value})


def test_sample_config_loads():
    cfg = load_config(SAMPLE_CONFIG)
    assert cfg.solver == SolverConfig()
    assert cfg.render.color == (0, 0, 255)
    assert cfg.logging.level == "INFO"


def test_partial_yaml_uses_defaults(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("solver:\n  cell_size: 5\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.solver.cell_size == 5
    assert cfg.solver.wall_luminance_threshold == 200
    assert cfg.render == RenderConfig()


@pytest.mark.parametrize("content", [
    "",
    "solver: [unclosed\n",
    "- just\n- a list\n",
    "solver:\n  cell_size: 0\n",
])
def test_bad_config_files(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.yaml")


def test_top_level_model_defaults():
    cfg = MazeVisionConfig()
    assert cfg.solver.cell_size == 3
    assert cfg.logging.log_dir is None
