#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PathPlanningService

中间层：
- 负责接收外部生成的代价栅格
- 做 world<->grid 坐标转换
- 调用底层 PathPipeline 进行栅格路径计算
- 输出：世界坐标航点，供外部的运动/动画层使用
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from wayfinding.config.loader import load_config
from wayfinding.config.models import WayfindingConfig
from wayfinding.common.exceptions import PathPlanningError
from wayfinding.common.logger import SetupLogger
from wayfinding.core.coordinate_utils import CoordinateTransform, world_to_grid, path_length
from wayfinding.path_planner.astar_search import AStarSearch, snap_to_cell
from wayfinding.path_planner.map_model import CostGrid, PlanRequest, PlanResult, Point2D
from wayfinding.path_planner.path_pipeline import PathPipeline, PipelineOptions


class PathPlanningService:
    """
    路径规划服务（中间层）

    生命周期大致是：

    1. 创建实例：pps = PathPlanningService(cfg)
    2. 场景生成完成后调用：pps.load_grid(grid)
    3. 需要寻路时调用：pps.plan_path(start_world, goal_world)
       拿到世界坐标航点
    4. 场景重新生成时再次调用 load_grid（旧栅格直接丢弃）
    """

    def __init__(self, cfg: WayfindingConfig) -> None:
        self.cfg = cfg

        self._metric = cfg.search.ToMetric()
        self._options = PipelineOptions(
            visibility_pruning=cfg.pruning.visibility_pruning,
            collinearity_pruning=cfg.pruning.collinearity_pruning,
            collinearity_epsilon=cfg.pruning.collinearity_epsilon,
            elevation=cfg.path.elevation,
        )
        self._transform = CoordinateTransform(
            offset=tuple(cfg.transform.offset),
            scale=tuple(cfg.transform.scale),
        )
        self._pipeline = PathPipeline(AStarSearch(self._metric))
        self._grid: Optional[CostGrid] = None

    @classmethod
    def from_config_file(cls, config_path: Union[str, Path]) -> "PathPlanningService":
        """
        读取配置文件、按 logging 段配置日志，再创建服务

        Raises:
            FileNotFoundError / yaml.YAMLError / ValueError / ConfigurationError: 同 load_config
        """
        cfg = load_config(Path(config_path))
        SetupLogger(cfg.logging.log_dir, cfg.logging.level)
        return cls(cfg)

    @property
    def grid(self) -> Optional[CostGrid]:
        return self._grid

    @property
    def transform(self) -> CoordinateTransform:
        return self._transform

    # ------------------------------------------------------------------
    # 栅格加载
    # ------------------------------------------------------------------
    def load_grid(self, grid: CostGrid) -> None:
        """
        装载当前场景的代价栅格

        Args:
            grid: 外部生成器构建好的代价栅格
        """
        expected = self.cfg.grid.size
        if expected is not None and tuple(expected) != grid.Size:
            logger.warning(f"[PathPlanningService] 栅格尺寸与配置不一致: grid={grid.Size}, cfg={tuple(expected)}")

        self._grid = grid
        logger.info(f"[PathPlanningService] 栅格已装载: {grid}")

    def unload_grid(self) -> None:
        self._grid = None

    # ------------------------------------------------------------------
    # 路径规划主接口
    # ------------------------------------------------------------------
    def plan_path(self, start_world: Point2D, goal_world: Point2D) -> PlanResult:
        """
        从世界坐标起点规划到世界坐标终点

        输入：
            - start_world / goal_world: 世界平面坐标 (x, z)

        输出：
            - PlanResult.path: 世界坐标航点 [(x, elevation, z), ...]
        """
        elevation = self.cfg.path.elevation

        # 尚未生成场景时直接点对点移动
        if self._grid is None:
            logger.warning("[PathPlanningService] 栅格未装载，退化为点对点路径")
            straight = [
                (float(start_world[0]), elevation, float(start_world[1])),
                (float(goal_world[0]), elevation, float(goal_world[1])),
            ]
            return PlanResult(ok=False, path=straight, reason="no grid", length=path_length(straight))

        start_grid = self._ToGridPoint(start_world, "起点")
        goal_grid = self._ToGridPoint(goal_world, "终点")

        logger.info(
            f"[PathPlanningService] 规划请求: start_world={start_world}, goal_world={goal_world}, "
            f"start_grid={start_grid}, goal_grid={goal_grid}"
        )

        req = PlanRequest(start=start_grid, goal=goal_grid)
        try:
            result = self._pipeline.Plan(self._grid, req, options=self._options, transform=self._transform)
        except PathPlanningError as e:
            logger.error(f"[PathPlanningService] 路径规划失败: {e}")
            return PlanResult(ok=False, path=[], reason=str(e))

        if not result.ok:
            logger.warning(f"[PathPlanningService] 路径规划未完全成功: {result.reason}")
        return result

    def _ToGridPoint(self, world_pos: Point2D, label: str) -> Point2D:
        """世界点 → 栅格空间点；落在栅格外时限制到最近的格子"""
        point = self._transform.Inverse(world_pos)
        cell = world_to_grid(world_pos, self._transform, self._grid.Size)

        if point[0] < 0 or point[1] < 0 or snap_to_cell(point) != cell:
            logger.warning(f"[PathPlanningService] {label}超出栅格范围，已限制: {point} -> {cell}")
            return (float(cell[0]), float(cell[1]))
        return point
