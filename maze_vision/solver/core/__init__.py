#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心算法模块
"""

from .maze_model import BoundingBox, Direction, Move, SolveResult
from .frame_locator import locate_maze_frame
from .grid_rasterizer import build_occupancy_grid
from .openings import collect_openings, find_openings, seal_border
from .bfs_planner import bfs_shortest_path, bfs_distance_map
from .move_compressor import compress_path, expand_moves, moves_to_json
from .coordinate_utils import grid_path_to_normalized, normalized_to_pixels
from .instructions import moves_to_instructions, format_instructions

__all__ = [
    'BoundingBox',
    'Direction',
    'Move',
    'SolveResult',
    'locate_maze_frame',
    'build_occupancy_grid',
    'collect_openings',
    'find_openings',
    'seal_border',
    'bfs_shortest_path',
    'bfs_distance_map',
    'compress_path',
    'expand_moves',
    'moves_to_json',
    'grid_path_to_normalized',
    'normalized_to_pixels',
    'moves_to_instructions',
    'format_instructions',
]
