#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：在二维代价栅格上实现 A* 搜索

与教科书 A* 的差异（保持原有行为）：
- 未关闭的邻居总是被当前节点重新松弛（前驱与分数被覆盖）
- 已关闭的邻居仅当 tentative_g < current.g 且 weight(n) < weight(current) 时重新打开
- 到达终点的判断发生在查看队首时，终点节点不出队
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from loguru import logger

from wayfinding.common.exceptions import ConfigurationError, PathPlanningError
from wayfinding.path_planner.distance_metric import DistanceMetric
from wayfinding.path_planner.map_model import CostGrid, GridCoord, GridNode, Point2D
from wayfinding.path_planner.priority_frontier import PriorityFrontier


@dataclass
class SearchResult:
    """
    A* 搜索结果

    Attributes:
        path: 栅格空间路径；到达终点时以调用方给出的（未取整的）终点结尾
        reached_goal: 是否连通到终点；False 表示开放集耗尽，path 只到最后出队的格子
        nodes_explored: 出队（关闭）的节点数
        terminal: 搜索结束时的节点坐标
    """
    path: List[Point2D] = field(default_factory=list)
    reached_goal: bool = False
    nodes_explored: int = 0
    terminal: Optional[GridCoord] = None

    @property
    def Found(self) -> bool:
        """长度 <= 1 的路径视为未找到路径"""
        return self.reached_goal and len(self.path) > 1


def snap_to_cell(point: Point2D) -> GridCoord:
    """平面点取整为栅格索引（向零截断）"""
    return (int(point[0]), int(point[1]))


class AStarSearch:
    """
    A* 搜索器

    实例只保存配置（默认距离函数），不在调用之间保留任何搜索状态。

    示例:
        ```python
        search = AStarSearch(DistanceMetric.CHEBYSHEV)
        result = search.FindPath(grid, None, start=(0, 0), goal=(9, 9))
        ```
    """

    def __init__(self, metric: DistanceMetric = DistanceMetric.EUCLIDEAN) -> None:
        """
        Args:
            metric: 默认距离函数

        Raises:
            ConfigurationError: metric 不是 DistanceMetric
        """
        if not isinstance(metric, DistanceMetric):
            raise ConfigurationError(f"metric 必须是 DistanceMetric: {metric!r}")
        self.metric_ = metric

    @property
    def Metric(self) -> DistanceMetric:
        return self.metric_

    @Metric.setter
    def Metric(self, metric: DistanceMetric) -> None:
        if not isinstance(metric, DistanceMetric):
            raise ConfigurationError(f"metric 必须是 DistanceMetric: {metric!r}")
        self.metric_ = metric

    def FindPath(
        self,
        grid: CostGrid,
        metric: Optional[DistanceMetric],
        start: Point2D,
        goal: Point2D,
    ) -> SearchResult:
        """
        在代价栅格上搜索从 start 到 goal 的路径

        Args:
            grid: 代价栅格
            metric: 距离函数，None 时使用实例默认值
            start: 起点（栅格空间，取整后必须在栅格内）
            goal: 终点（栅格空间，取整后必须在栅格内）

        Returns:
            SearchResult；终点为障碍时返回空路径

        Raises:
            PathPlanningError: 起点或终点超出栅格范围
        """
        metric = metric or self.metric_
        start_cell = snap_to_cell(start)
        goal_cell = snap_to_cell(goal)

        if not grid.InBounds(*start_cell) or not grid.InBounds(*goal_cell):
            error_msg = f"起点或终点超出栅格范围: start={start}, goal={goal}, grid_size={grid.Size}"
            logger.error(error_msg)
            raise PathPlanningError(error_msg)

        # 终点是障碍，必然不可达
        if grid.IsObstacle(*goal_cell):
            logger.warning(f"[A*] 终点位于障碍上，不可达: goal={goal_cell}")
            return SearchResult(path=[], reached_goal=False)

        logger.debug(f"[A*] 开始搜索: grid_size={grid.Size}, start={start_cell}, goal={goal_cell}, metric={metric.value}")

        start_node = GridNode(*start_cell, g_score=0.0)
        start_node.f_score = start_node.g_score + metric.Distance(start_cell, goal_cell)

        open_set = PriorityFrontier()
        closed_set: Set[GridCoord] = set()
        came_from: Dict[GridCoord, GridCoord] = {}
        nodes_explored = 0
        reached_goal = False

        open_set.Insert(start_node)
        current = start_node

        while open_set.Count > 0:
            current = open_set.PeekMin()

            if current.Coord == goal_cell:
                reached_goal = True
                open_set.Clear()
                break

            current = open_set.ExtractMin()
            closed_set.add(current.Coord)
            nodes_explored += 1

            for n in self._Neighbors(grid, metric, current):
                tentative_g = current.g_score + metric.Distance(current.Coord, n.Coord)
                is_closed = n.Coord in closed_set

                if is_closed and tentative_g >= current.g_score:
                    continue

                if not is_closed or (
                    tentative_g < current.g_score
                    and grid.Cost(*n.Coord) < grid.Cost(*current.Coord)
                ):
                    came_from[n.Coord] = current.Coord
                    n.g_score = tentative_g
                    n.f_score = tentative_g + metric.Distance(n.Coord, goal_cell)

                    if open_set.Contains(n):
                        open_set.Update(n)
                    else:
                        open_set.Insert(n)

        if reached_goal:
            path = self._ReconstructPath(came_from, current.Coord)
            path.append((float(goal[0]), float(goal[1])))
            logger.debug(f"[A*] 搜索成功: 路径长度={len(path)}, 探索节点数={nodes_explored}")
        else:
            path = self._ReconstructPath(came_from, current.Coord)
            path.append((float(current.x), float(current.y)))
            logger.warning(
                f"[A*] 开放集耗尽，未到达终点: start={start_cell}, goal={goal_cell}, "
                f"最后节点={current.Coord}, 部分路径长度={len(path)}, 探索节点数={nodes_explored}"
            )

        return SearchResult(
            path=path,
            reached_goal=reached_goal,
            nodes_explored=nodes_explored,
            terminal=current.Coord,
        )

    def _Neighbors(self, grid: CostGrid, metric: DistanceMetric, node: GridNode) -> List[GridNode]:
        """按距离函数的邻接规则枚举邻居，排除越界与障碍格子"""
        neighbors = []
        for dx, dy in metric.NeighborOffsets():
            nx, ny = node.x + dx, node.y + dy
            if not grid.InBounds(nx, ny):
                continue
            if grid.IsObstacle(nx, ny):
                continue
            neighbors.append(GridNode(nx, ny))
        return neighbors

    def _ReconstructPath(self, came_from: Dict[GridCoord, GridCoord], terminal: GridCoord) -> List[Point2D]:
        """
        沿前驱表从终止节点回溯到起点（不含终止节点本身），再反转

        Args:
            came_from: 节点坐标 -> 前驱坐标
            terminal: 终止节点坐标

        Returns:
            起点到终止节点前驱的路径
        """
        path: List[Point2D] = []
        visited = {terminal}
        pos = terminal
        while pos in came_from:
            pos = came_from[pos]
            # 重新打开的节点可能让前驱链成环
            if pos in visited:
                break
            visited.add(pos)
            path.append((float(pos[0]), float(pos[1])))
        path.reverse()
        return path
