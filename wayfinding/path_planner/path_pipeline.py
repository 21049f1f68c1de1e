#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划管线

固定顺序：A* 搜索 → 可视性剪枝（可选）→ 共线简化（可选）→ 坐标转换
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from wayfinding.common.constants import DEFAULT_ELEVATION, PIPELINE_COLLINEARITY_EPSILON
from wayfinding.core.coordinate_utils import CoordinateTransform, path_length, to_3d_path
from wayfinding.path_planner.astar_search import AStarSearch
from wayfinding.path_planner.collinearity_reducer import CollinearityReducer
from wayfinding.path_planner.distance_metric import DistanceMetric
from wayfinding.path_planner.map_model import CostGrid, PlanRequest, PlanResult, Point2D
from wayfinding.path_planner.visibility_pruner import VisibilityPruner


@dataclass
class PipelineOptions:
    """管线开关与参数"""
    visibility_pruning: bool = True
    collinearity_pruning: bool = True
    collinearity_epsilon: float = PIPELINE_COLLINEARITY_EPSILON
    elevation: float = DEFAULT_ELEVATION


class PathPipeline:
    """纯路径规划管线：只关心代价栅格与端点，不关心场景。"""

    def __init__(
        self,
        search: Optional[AStarSearch] = None,
        pruner: Optional[VisibilityPruner] = None,
    ) -> None:
        self._search = search or AStarSearch()
        self._pruner = pruner or VisibilityPruner()

    def ComputePath(
        self,
        grid: CostGrid,
        metric: Optional[DistanceMetric],
        start: Point2D,
        goal: Point2D,
        options: Optional[PipelineOptions] = None,
        transform: Optional[CoordinateTransform] = None,
    ) -> PlanResult:
        """
        在给定栅格上做一次完整的路径计算

        Args:
            grid: 代价栅格
            metric: 距离函数（None 使用搜索器默认值）
            start: 起点（栅格空间）
            goal: 终点（栅格空间）
            options: 剪枝开关
            transform: 栅格→外部坐标变换，None 表示保持栅格空间

        Returns:
            PlanResult；ok 仅在完整连通且路径长度 > 1 时为 True

        Raises:
            PathPlanningError: 起点或终点超出栅格范围
        """
        options = options or PipelineOptions()
        transform = transform or CoordinateTransform.Identity()

        # 1) A* 搜索
        search_result = self._search.FindPath(grid, metric, start, goal)
        raw_path = search_result.path

        if len(raw_path) <= 1:
            reason = "终点不可达" if not raw_path else "起点与终点重合或无路径"
            logger.warning(f"[PathPipeline] 未找到路径: {reason}, start={start}, goal={goal}")
            return PlanResult(ok=False, path=[], reason=reason, raw_path=raw_path)

        path = to_3d_path(raw_path, options.elevation)

        # 2) 可视性剪枝
        pruned_path = None
        if options.visibility_pruning:
            path = self._pruner.Prune(path, grid)
            pruned_path = list(path)

        # 3) 共线简化
        if options.collinearity_pruning:
            path = CollinearityReducer(options.collinearity_epsilon).Reduce(path)

        # 4) 坐标转换
        world_path = transform.ApplyPath(path)
        length = path_length(world_path)

        if not search_result.reached_goal:
            logger.warning(
                f"[PathPipeline] 只得到部分路径: 最后节点={search_result.terminal}, goal={goal}, "
                f"航点数={len(world_path)}"
            )
            return PlanResult(
                ok=False,
                path=world_path,
                reason="搜索耗尽，返回部分路径",
                partial=True,
                raw_path=raw_path,
                pruned_path=pruned_path,
                length=length,
            )

        logger.info(
            f"[PathPipeline] 路径计算成功: 原始={len(raw_path)}, "
            f"剪枝后={len(pruned_path) if pruned_path is not None else '-'}, "
            f"最终={len(world_path)}, 长度={length:.2f}, 探索节点数={search_result.nodes_explored}"
        )
        return PlanResult(
            ok=True,
            path=world_path,
            reason="ok",
            raw_path=raw_path,
            pruned_path=pruned_path,
            length=length,
        )

    def Plan(
        self,
        grid: CostGrid,
        req: PlanRequest,
        options: Optional[PipelineOptions] = None,
        transform: Optional[CoordinateTransform] = None,
    ) -> PlanResult:
        """按搜索器默认距离函数处理一次规划请求"""
        return self.ComputePath(grid, None, req.start, req.goal, options=options, transform=transform)


if __name__ == "__main__":
    # 简单自测：在 10x10 栅格上绕开一堵墙
    import numpy as np
    from wayfinding.common.constants import OBSTACLE_COST
    from wayfinding.common.logger import SetupLogger

    SetupLogger(level="DEBUG")

    # 1. 构造栅格：x=5 整列是墙，y=5 处开一个口
    width, depth = 10, 10
    weights = np.ones((width, depth), dtype=np.int32)
    weights[5, :] = OBSTACLE_COST
    weights[5, 5] = 1
    grid = CostGrid(weights)

    # 2. 计算路径
    pipeline = PathPipeline(AStarSearch(DistanceMetric.CHEBYSHEV))
    result = pipeline.ComputePath(grid, None, start=(0, 0), goal=(9, 9))

    print(f"ok: {result.ok}")
    print(f"raw_path: {result.raw_path}")
    print(f"path: {result.path}")

    # 3. ASCII 可视化：'#' = 障碍, '.' = 空地, '*' = 原始路径, 'o' = 最终航点
    vis = np.full((depth, width), '.', dtype=str)
    for x in range(width):
        for z in range(depth):
            if grid.IsObstacle(x, z):
                vis[z, x] = '#'
    for x, z in result.raw_path:
        vis[int(z), int(x)] = '*'
    for x, _, z in result.path:
        vis[int(z), int(x)] = 'o'

    print("\nASCII 地图：")
    for row in vis:
        print("".join(row))
