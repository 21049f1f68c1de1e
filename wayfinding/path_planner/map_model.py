#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地图模型：代价栅格、搜索节点以及规划请求/结果的数据结构

代价栅格按 [x, y] 索引（x ∈ [0, width)，y ∈ [0, depth)），
代价等于 OBSTACLE_COST 的格子视为障碍。
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from loguru import logger

from wayfinding.common.constants import OBSTACLE_COST, DEFAULT_FREE_COST
from wayfinding.common.exceptions import ConfigurationError

GridCoord = Tuple[int, int]               # (x, y) 栅格索引
Point2D = Tuple[float, float]             # (x, y) 栅格空间平面点
Waypoint = Tuple[float, float, float]     # (x, elevation, z) 三维航点


class CostGrid:
    """
    二维代价栅格（寻路期间只读）

    所有格子统一存储为 int32：要么是非负的通行代价，要么是障碍哨兵值。

    示例:
        ```python
        grid = CostGrid(np.ones((10, 10), dtype=np.int32))
        grid.IsObstacle(3, 4)
        ```
    """

    def __init__(self, data) -> None:
        """
        Args:
            data: 形状为 (width, depth) 的数值数组

        Raises:
            ConfigurationError: 数据维度、类型或取值非法
        """
        array = np.asarray(data)
        _ValidateGridData(array)

        self.data_ = array.astype(np.int32)
        self.data_.setflags(write=False)

    @classmethod
    def Uniform(cls, width: int, depth: int, cost: int = DEFAULT_FREE_COST) -> "CostGrid":
        """构建代价处处相同的栅格"""
        return cls(np.full((width, depth), cost, dtype=np.int32))

    @classmethod
    def FromObstacleMask(cls, mask: np.ndarray, free_cost: int = DEFAULT_FREE_COST) -> "CostGrid":
        """
        从 0/1 障碍掩码构建栅格

        Args:
            mask: HxW 掩码（图像习惯，按 [z, x] 索引），非零=障碍
            free_cost: 可通行格子的代价

        Returns:
            CostGrid
        """
        mask = np.asarray(mask)
        if mask.ndim != 2:
            raise ConfigurationError(f"障碍掩码必须是二维数组: ndim={mask.ndim}")

        weights = np.where(mask != 0, OBSTACLE_COST, free_cost)
        return cls(weights.T)

    @classmethod
    def FromCostMap(cls, cost_map: np.ndarray) -> "CostGrid":
        """
        从浮点代价图构建栅格

        Args:
            cost_map: HxW 浮点代价图（按 [z, x] 索引），障碍为 np.inf

        Returns:
            CostGrid
        """
        cost_map = np.asarray(cost_map, dtype=np.float64)
        if cost_map.ndim != 2:
            raise ConfigurationError(f"代价图必须是二维数组: ndim={cost_map.ndim}")
        if np.isnan(cost_map).any():
            raise ConfigurationError("代价图包含 NaN")

        blocked = ~np.isfinite(cost_map) | (cost_map >= OBSTACLE_COST)
        weights = np.where(blocked, OBSTACLE_COST, np.rint(np.where(blocked, 0, cost_map)))
        return cls(weights.astype(np.int64).T)

    @property
    def Width(self) -> int:
        return int(self.data_.shape[0])

    @property
    def Depth(self) -> int:
        return int(self.data_.shape[1])

    @property
    def Size(self) -> Tuple[int, int]:
        """(width, depth)"""
        return (self.Width, self.Depth)

    def InBounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.Width and 0 <= y < self.Depth

    def Cost(self, x: int, y: int) -> int:
        return int(self.data_[x, y])

    def IsObstacle(self, x: int, y: int) -> bool:
        return self.data_[x, y] >= OBSTACLE_COST

    def __repr__(self) -> str:
        obstacles = int((self.data_ >= OBSTACLE_COST).sum())
        return f"CostGrid(width={self.Width}, depth={self.Depth}, obstacles={obstacles})"


def _ValidateGridData(array: np.ndarray) -> None:
    """构造期校验：维度、数值类型与取值范围"""
    if array.ndim != 2:
        error_msg = f"代价栅格必须是二维数组: ndim={array.ndim}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if array.size == 0:
        error_msg = f"代价栅格不能为空: shape={array.shape}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if array.dtype == np.bool_ or not (
        np.issubdtype(array.dtype, np.integer) or np.issubdtype(array.dtype, np.floating)
    ):
        error_msg = f"代价栅格的数值类型不受支持: dtype={array.dtype}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if np.issubdtype(array.dtype, np.floating):
        if not np.isfinite(array).all():
            error_msg = "代价栅格包含 NaN/inf（障碍请使用哨兵值，或使用 FromCostMap）"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)
        if not (array == np.floor(array)).all():
            error_msg = "代价栅格只接受整数代价"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

    low, high = array.min(), array.max()
    if low < 0:
        error_msg = f"代价不能为负数: min={low}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)
    if high > OBSTACLE_COST:
        error_msg = f"代价超过障碍哨兵值 {OBSTACLE_COST}: max={high}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)


@dataclass(eq=False)
class GridNode:
    """
    A* 搜索节点

    节点的身份仅由坐标决定；前驱关系保存在搜索的前驱表里，不在节点上。
    """
    x: int
    y: int
    g_score: float = 0.0
    f_score: float = 0.0

    @property
    def Coord(self) -> GridCoord:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridNode):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))


@dataclass
class PlanRequest:
    start: Point2D
    goal: Point2D


@dataclass
class PlanResult:
    ok: bool
    path: List[Waypoint]
    reason: str = ""
    partial: bool = False
    raw_path: List[Point2D] = field(default_factory=list)
    pruned_path: Optional[List[Waypoint]] = None
    length: float = 0.0
