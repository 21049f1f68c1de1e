"""
代价栅格与距离函数测试
"""

import math

import numpy as np
import pytest

from wayfinding.common.constants import OBSTACLE_COST
from wayfinding.common.exceptions import ConfigurationError
from wayfinding.path_planner.distance_metric import DistanceMetric
from wayfinding.path_planner.map_model import CostGrid, GridNode


def test_grid_indexing_is_x_then_y():
    weights = np.ones((4, 3), dtype=np.int32)
    weights[3, 1] = OBSTACLE_COST
    grid = CostGrid(weights)

    assert grid.Size == (4, 3)
    assert grid.Width == 4 and grid.Depth == 3
    assert grid.IsObstacle(3, 1)
    assert not grid.IsObstacle(1, 2)
    assert grid.InBounds(3, 2)
    assert not grid.InBounds(4, 0)
    assert not grid.InBounds(0, -1)


def test_grid_is_read_only():
    grid = CostGrid.Uniform(3, 3, cost=2)

    assert grid.Cost(1, 1) == 2
    with pytest.raises(ValueError):
        grid.data_[0, 0] = 5


def test_grid_copies_input():
    weights = np.ones((3, 3), dtype=np.int64)
    grid = CostGrid(weights)
    weights[0, 0] = OBSTACLE_COST

    assert not grid.IsObstacle(0, 0)
    assert grid.data_.dtype == np.int32


def test_integral_float_grid_accepted():
    grid = CostGrid(np.array([[1.0, 2.0], [3.0, float(OBSTACLE_COST)]]))

    assert grid.Cost(1, 0) == 3
    assert grid.IsObstacle(1, 1)


@pytest.mark.parametrize(
    "data",
    [
        np.ones(5),                                   # 一维
        np.ones((2, 2, 2)),                           # 三维
        np.ones((0, 4)),                              # 空
        np.array([["a", "b"], ["c", "d"]]),           # 字符串
        np.ones((2, 2), dtype=bool),                  # 布尔
        np.ones((2, 2), dtype=complex),               # 复数
        np.array([[1.0, np.nan], [1.0, 1.0]]),        # NaN
        np.array([[1.0, np.inf], [1.0, 1.0]]),        # inf
        np.array([[1.5, 1.0], [1.0, 1.0]]),           # 非整数
        np.array([[-1, 1], [1, 1]]),                  # 负代价
        np.array([[OBSTACLE_COST + 1, 1], [1, 1]]),   # 超过哨兵值
    ],
)
def test_invalid_grid_data_rejected(data):
    with pytest.raises(ConfigurationError):
        CostGrid(data)


def test_from_obstacle_mask_transposes_image_layout():
    mask = np.zeros((3, 5), dtype=np.uint8)  # 3 行(z) x 5 列(x)
    mask[2, 4] = 1

    grid = CostGrid.FromObstacleMask(mask, free_cost=2)

    assert grid.Size == (5, 3)
    assert grid.IsObstacle(4, 2)
    assert grid.Cost(0, 0) == 2


def test_from_cost_map_maps_inf_to_sentinel():
    cost_map = np.array([[1.0, np.inf, 2.4], [1.6, 1.0, 1.0]], dtype=np.float32)

    grid = CostGrid.FromCostMap(cost_map)

    assert grid.Size == (3, 2)
    assert grid.IsObstacle(1, 0)
    assert grid.Cost(2, 0) == 2
    assert grid.Cost(0, 1) == 2


def test_from_cost_map_rejects_nan():
    with pytest.raises(ConfigurationError):
        CostGrid.FromCostMap(np.array([[np.nan, 1.0]]))


def test_grid_node_identity_is_coordinates():
    a = GridNode(2, 3, g_score=1.0, f_score=4.0)
    b = GridNode(2, 3, g_score=7.0, f_score=9.0)

    assert a == b
    assert hash(a) == hash(b)
    assert a != GridNode(3, 2)
    assert len({a, b}) == 1


def test_distance_functions():
    a, b = (1, 2), (4, 6)

    assert DistanceMetric.EUCLIDEAN.Distance(a, b) == pytest.approx(5.0)
    assert DistanceMetric.MANHATTAN.Distance(a, b) == 7.0
    assert DistanceMetric.CHEBYSHEV.Distance(a, b) == 4.0
    assert DistanceMetric.EUCLIDEAN.Distance((0, 0), (1, 1)) == pytest.approx(math.sqrt(2))


def test_connectivity_per_metric():
    assert len(DistanceMetric.EUCLIDEAN.NeighborOffsets()) == 4
    assert len(DistanceMetric.MANHATTAN.NeighborOffsets()) == 4
    assert len(DistanceMetric.CHEBYSHEV.NeighborOffsets()) == 8


def test_metric_from_name():
    assert DistanceMetric.FromName("Chebyshev") is DistanceMetric.CHEBYSHEV
    assert DistanceMetric.FromName(DistanceMetric.MANHATTAN) is DistanceMetric.MANHATTAN
    with pytest.raises(ConfigurationError):
        DistanceMetric.FromName("octile")
