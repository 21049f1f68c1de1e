#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心工具：坐标转换
"""

from .coordinate_utils import (
    CoordinateTransform,
    to_3d_path,
    to_2d_path,
    world_to_grid,
    grid_to_world,
    path_length,
)

__all__ = [
    'CoordinateTransform',
    'to_3d_path',
    'to_2d_path',
    'world_to_grid',
    'grid_to_world',
    'path_length',
]
