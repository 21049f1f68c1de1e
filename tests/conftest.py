"""
测试公共夹具：常用的代价栅格
"""

import numpy as np
import pytest

from wayfinding.common.constants import OBSTACLE_COST
from wayfinding.path_planner.map_model import CostGrid


def make_wall_grid(width: int = 10, depth: int = 10, wall_x: int = 5, gap_y: int = 5) -> CostGrid:
    """x=wall_x 整列是墙，只在 gap_y 处开一个口"""
    weights = np.ones((width, depth), dtype=np.int32)
    weights[wall_x, :] = OBSTACLE_COST
    weights[wall_x, gap_y] = 1
    return CostGrid(weights)


def is_adjacent(a, b, diagonal: bool) -> bool:
    dx = abs(int(a[0]) - int(b[0]))
    dy = abs(int(a[1]) - int(b[1]))
    if diagonal:
        return max(dx, dy) == 1
    return dx + dy == 1


@pytest.fixture
def open_grid() -> CostGrid:
    return CostGrid.Uniform(10, 10)


@pytest.fixture
def wall_grid() -> CostGrid:
    return make_wall_grid()


@pytest.fixture
def obstacle_field() -> CostGrid:
    """20x20 栅格，散布若干矩形障碍"""
    weights = np.ones((20, 20), dtype=np.int32)
    weights[4:6, 0:14] = OBSTACLE_COST
    weights[9:11, 6:20] = OBSTACLE_COST
    weights[14:16, 0:12] = OBSTACLE_COST
    weights[14:18, 15:17] = OBSTACLE_COST
    return CostGrid(weights)
