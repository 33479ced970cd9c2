#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解命令行入口
读取迷宫照片，输出路径叠加图、移动指令 JSON 和分步导航指令
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, get_args

import cv2
from loguru import logger

from maze_vision.utils.logger import SetupLogger
from maze_vision.solver import (
    MazeSolver,
    InputError,
    ConfigurationError,
    OpeningDetectionError,
    UnreachableGoalError,
)
from maze_vision.solver.config import LogLevel, MazeVisionConfig, SolverConfig, load_config
from maze_vision.solver.core.instructions import moves_to_instructions, format_instructions

EXIT_OK = 0
EXIT_INPUT_ERROR = 2
EXIT_NO_OPENINGS = 3
EXIT_NO_PATH = 4


def ParseArgs(argv: Optional[List[str]] = None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description="迷宫照片求解",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例用法：
  python -m maze_vision.main --image maze.jpg --out outputs/maze_solved.png

  # 使用配置文件并输出 JSON
  python -m maze_vision.main --image maze.jpg --config configs/maze_solver.yaml --json
        """
    )

    parser.add_argument("--image", type=str, required=True,
                        help="迷宫图像路径")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML配置文件路径（可选）")
    parser.add_argument("--out", type=str, default="outputs/maze_solved.png",
                        help="叠加图输出路径（默认: outputs/maze_solved.png）")
    parser.add_argument("--cell-size", type=int, default=None,
                        help="栅格单元边长，覆盖配置文件")
    parser.add_argument("--log-level", type=str.upper, default=None, choices=get_args(LogLevel),
                        help="日志级别，覆盖配置文件")
    parser.add_argument("--json", action="store_true",
                        help="以 JSON 输出结果（moves/instructions/points）")

    return parser.parse_args(argv)


def LoadSettings(args) -> MazeVisionConfig:
    """加载配置并应用命令行覆盖项"""
    config = load_config(Path(args.config)) if args.config else MazeVisionConfig()
    if args.cell_size is not None:
        solver_cfg = SolverConfig(**{**config.solver.model_dump(), "cell_size": args.cell_size})
        config = config.model_copy(update={"solver": solver_cfg})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    args = ParseArgs(argv)

    try:
        config = LoadSettings(args)
    except (ConfigurationError, ValueError) as e:
        SetupLogger(level=args.log_level or "INFO")
        logger.error(f"配置无效: {e}")
        return EXIT_INPUT_ERROR

    SetupLogger(log_dir=config.logging.log_dir, level=args.log_level or config.logging.level)

    image = cv2.imread(args.image)
    if image is None:
        logger.error(f"无法读取图像: {args.image}")
        return EXIT_INPUT_ERROR

    solver = MazeSolver(config.solver)
    try:
        result = solver.Solve(image)
    except InputError as e:
        logger.error(f"输入无效: {e}")
        return EXIT_INPUT_ERROR
    except OpeningDetectionError as e:
        logger.error(f"无法找到迷宫出入口: {e}")
        return EXIT_NO_OPENINGS
    except UnreachableGoalError as e:
        logger.error(f"BFS 未找到路径: {e}")
        return EXIT_NO_PATH

    overlay = solver.RenderOverlay(image, result, config.render)
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(out_path), overlay):
        logger.error(f"保存叠加图失败: {out_path}")
        return EXIT_INPUT_ERROR
    logger.info(f"迷宫已求解（BFS），叠加图保存至: {out_path}")

    instructions = moves_to_instructions(result.moves)
    if args.json:
        print(json.dumps({
            "start": list(result.start),
            "goal": list(result.goal),
            "moves": result.MovesAsDicts(),
            "instructions": instructions,
            "path": [list(p) for p in result.normalized_points],
        }))
    else:
        print(result.MovesJson())
        print(format_instructions(instructions))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
