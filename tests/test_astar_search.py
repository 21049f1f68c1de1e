"""
A* 搜索测试
"""

import numpy as np
import pytest

from wayfinding.common.constants import OBSTACLE_COST
from wayfinding.common.exceptions import ConfigurationError, PathPlanningError
from wayfinding.path_planner.astar_search import AStarSearch, snap_to_cell
from wayfinding.path_planner.distance_metric import DistanceMetric
from wayfinding.path_planner.map_model import CostGrid

from conftest import is_adjacent


def test_chebyshev_open_grid_diagonal(open_grid):
    """10x10 空栅格，(0,0) -> (9,9)，切比雪夫：10 个格子且每步都是对角"""
    result = AStarSearch(DistanceMetric.CHEBYSHEV).FindPath(open_grid, None, (0, 0), (9, 9))

    assert result.reached_goal
    assert result.Found
    assert len(result.path) == 10
    assert result.path[0] == (0.0, 0.0)
    assert result.path[-1] == (9.0, 9.0)
    for a, b in zip(result.path, result.path[1:]):
        assert abs(b[0] - a[0]) == 1 and abs(b[1] - a[1]) == 1


@pytest.mark.parametrize("goal", [(3, 7), (9, 0), (0, 9), (6, 2)])
def test_chebyshev_open_grid_minimal_length(open_grid, goal):
    result = AStarSearch(DistanceMetric.CHEBYSHEV).FindPath(open_grid, None, (0, 0), goal)

    assert result.reached_goal
    assert len(result.path) == max(goal[0], goal[1]) + 1


@pytest.mark.parametrize("start,goal", [((0, 0), (3, 4)), ((9, 9), (2, 5)), ((4, 0), (4, 9))])
def test_manhattan_open_grid_minimal_length(open_grid, start, goal):
    result = AStarSearch(DistanceMetric.MANHATTAN).FindPath(open_grid, None, start, goal)

    assert result.reached_goal
    assert len(result.path) == abs(goal[0] - start[0]) + abs(goal[1] - start[1]) + 1


@pytest.mark.parametrize(
    "metric,diagonal",
    [
        (DistanceMetric.EUCLIDEAN, False),
        (DistanceMetric.MANHATTAN, False),
        (DistanceMetric.CHEBYSHEV, True),
    ],
)
def test_raw_path_steps_are_adjacent(obstacle_field, metric, diagonal):
    result = AStarSearch(metric).FindPath(obstacle_field, None, (0, 0), (19, 19))

    assert result.reached_goal
    assert result.path[0] == (0.0, 0.0)
    assert result.path[-1] == (19.0, 19.0)
    for a, b in zip(result.path, result.path[1:]):
        assert is_adjacent(a, b, diagonal)
    for x, y in result.path:
        assert not obstacle_field.IsObstacle(int(x), int(y))


def test_wall_with_gap_routes_through_gap(wall_grid):
    result = AStarSearch(DistanceMetric.CHEBYSHEV).FindPath(wall_grid, None, (0, 0), (9, 9))

    assert result.reached_goal
    assert (5.0, 5.0) in result.path
    assert all(not wall_grid.IsObstacle(int(x), int(y)) for x, y in result.path)


@pytest.mark.parametrize("metric", list(DistanceMetric))
@pytest.mark.parametrize("start", [(0, 0), (2, 7), (4, 4)])
def test_obstacle_goal_returns_empty(wall_grid, metric, start):
    result = AStarSearch(metric).FindPath(wall_grid, None, start, (5, 0))

    assert result.path == []
    assert not result.reached_goal
    assert not result.Found


def test_start_equals_goal(open_grid):
    result = AStarSearch(DistanceMetric.EUCLIDEAN).FindPath(open_grid, None, (4, 4), (4, 4))

    assert len(result.path) <= 1
    assert not result.Found


def test_destination_is_not_snapped(open_grid):
    """终点按调用方给出的浮点坐标结尾"""
    result = AStarSearch(DistanceMetric.CHEBYSHEV).FindPath(open_grid, None, (0.2, 0.7), (6.4, 3.9))

    assert result.reached_goal
    assert result.path[0] == (0.0, 0.0)
    assert result.path[-1] == (6.4, 3.9)
    assert result.path[-2] != (6.0, 3.0)
    assert is_adjacent(result.path[-2], (6, 3), diagonal=True)


def test_boundary_row_and_column_are_traversable():
    """第 0 行/列也是合法邻居"""
    weights = np.full((5, 5), OBSTACLE_COST, dtype=np.int32)
    weights[0, :] = 1
    weights[:, 0] = 1
    grid = CostGrid(weights)

    result = AStarSearch(DistanceMetric.MANHATTAN).FindPath(grid, None, (4, 0), (0, 4))

    assert result.reached_goal
    assert len(result.path) == 9
    assert (0.0, 0.0) in result.path


def test_isolated_start_is_degenerate():
    weights = np.ones((5, 5), dtype=np.int32)
    weights[1, 0] = OBSTACLE_COST
    weights[0, 1] = OBSTACLE_COST
    weights[1, 1] = OBSTACLE_COST
    grid = CostGrid(weights)

    result = AStarSearch(DistanceMetric.CHEBYSHEV).FindPath(grid, None, (0, 0), (4, 4))

    assert not result.reached_goal
    assert result.path == [(0.0, 0.0)]
    assert result.nodes_explored == 1
    assert not result.Found


def test_exhausted_search_returns_partial_path():
    """墙把栅格完全隔开：返回到最后出队节点的部分路径，且不追加终点"""
    weights = np.ones((6, 6), dtype=np.int32)
    weights[3, :] = OBSTACLE_COST
    grid = CostGrid(weights)

    result = AStarSearch(DistanceMetric.MANHATTAN).FindPath(grid, None, (0, 0), (5, 5))

    assert not result.reached_goal
    assert result.nodes_explored == 18
    assert result.terminal is not None
    assert result.path[0] == (0.0, 0.0)
    assert result.path[-1] == (float(result.terminal[0]), float(result.terminal[1]))
    assert all(x < 3 for x, _ in result.path)
    for a, b in zip(result.path, result.path[1:]):
        assert is_adjacent(a, b, diagonal=False)


def test_out_of_range_endpoints_raise(open_grid):
    search = AStarSearch()
    with pytest.raises(PathPlanningError):
        search.FindPath(open_grid, None, (-1, 0), (5, 5))
    with pytest.raises(PathPlanningError):
        search.FindPath(open_grid, None, (0, 0), (10, 5))


def test_metric_argument_overrides_default(open_grid):
    search = AStarSearch(DistanceMetric.MANHATTAN)
    result = search.FindPath(open_grid, DistanceMetric.CHEBYSHEV, (0, 0), (9, 9))

    assert len(result.path) == 10
    assert search.Metric is DistanceMetric.MANHATTAN


def test_invalid_metric_rejected():
    with pytest.raises(ConfigurationError):
        AStarSearch("chebyshev")

    search = AStarSearch()
    with pytest.raises(ConfigurationError):
        search.Metric = 3


def test_instances_hold_no_state_between_calls(open_grid, wall_grid):
    search = AStarSearch(DistanceMetric.CHEBYSHEV)
    first = search.FindPath(wall_grid, None, (0, 0), (9, 9))
    search.FindPath(open_grid, None, (9, 0), (0, 9))
    again = search.FindPath(wall_grid, None, (0, 0), (9, 9))

    assert first.path == again.path


def test_snap_to_cell_truncates():
    assert snap_to_cell((3.9, 0.2)) == (3, 0)


def test_open_neighbour_is_repointed_by_later_expansion():
    """
    未关闭的邻居总会被当前节点覆盖前驱，即使新的 g 更差

    只有底行、右列和死胡同 (1,1) 可走。(1,1) 先于 (1,0) 出队，
    把 (1,0) 的前驱改成 (1,1)，结果比最短路多绕一步。
    """
    free = [(x, 0) for x in range(5)] + [(4, y) for y in range(1, 5)] + [(1, 1)]
    weights = np.full((5, 5), OBSTACLE_COST, dtype=np.int32)
    for x, y in free:
        weights[x, y] = 1
    grid = CostGrid(weights)

    result = AStarSearch(DistanceMetric.CHEBYSHEV).FindPath(grid, None, (0, 0), (4, 4))

    assert result.reached_goal
    assert result.path == [
        (0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0),
        (4.0, 1.0), (4.0, 2.0), (4.0, 3.0), (4.0, 4.0),
    ]
    # 最短路只需 8 个格子
    assert len(result.path) == 9
    assert result.nodes_explored == 8
