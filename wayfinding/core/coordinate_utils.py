#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标转换工具模块

提供栅格坐标与外部（世界）坐标之间的仿射转换，以及二维/三维路径的互转。
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from wayfinding.common.constants import DEFAULT_ELEVATION
from wayfinding.common.exceptions import ConfigurationError

GridCoord = Tuple[int, int]
Point2D = Tuple[float, float]
Waypoint = Tuple[float, float, float]


@dataclass(frozen=True)
class CoordinateTransform:
    """
    栅格空间 → 世界空间的仿射变换（逐轴：world = offset + scale * grid）

    只作用于两个平面分量 (x, z)，高度分量保持不变。
    """
    offset: Tuple[float, float] = (0.0, 0.0)
    scale: Tuple[float, float] = (1.0, 1.0)

    def __post_init__(self) -> None:
        if len(self.offset) != 2 or len(self.scale) != 2:
            raise ConfigurationError(f"offset/scale 必须是二元组: offset={self.offset}, scale={self.scale}")
        if self.scale[0] == 0 or self.scale[1] == 0:
            raise ConfigurationError(f"缩放系数不能为0: {self.scale}")

    @classmethod
    def Identity(cls) -> "CoordinateTransform":
        return cls()

    @classmethod
    def Centered(cls, width: int, depth: int) -> "CoordinateTransform":
        """
        以栅格中心为原点、x 轴镜像的场景坐标

        格子 (x, z) 的中心映射到 (width // 2 - x - 0.5, -(depth // 2) + z + 0.5)。
        """
        return cls(
            offset=(width // 2 - 0.5, -(depth // 2) + 0.5),
            scale=(-1.0, 1.0),
        )

    def Apply(self, point: Waypoint) -> Waypoint:
        x, elevation, z = point
        return (
            self.offset[0] + self.scale[0] * x,
            elevation,
            self.offset[1] + self.scale[1] * z,
        )

    def ApplyPath(self, path: Sequence[Waypoint]) -> List[Waypoint]:
        return [self.Apply(p) for p in path]

    def Inverse(self, point: Point2D) -> Point2D:
        """世界平面点 (x, z) → 栅格空间平面点"""
        wx, wz = point
        return (
            (wx - self.offset[0]) / self.scale[0],
            (wz - self.offset[1]) / self.scale[1],
        )


def to_3d_path(path: Sequence[Point2D], elevation: float = DEFAULT_ELEVATION) -> List[Waypoint]:
    """
    二维栅格路径转三维航点

    Args:
        path: [(x, z), ...]
        elevation: 所有航点共享的高度

    Returns:
        [(x, elevation, z), ...]
    """
    return [(float(x), float(elevation), float(z)) for x, z in path]


def to_2d_path(path: Sequence[Waypoint]) -> List[Point2D]:
    """三维航点转回二维平面点（丢弃高度）"""
    return [(p[0], p[2]) for p in path]


def world_to_grid(
    world_pos: Point2D,
    transform: CoordinateTransform,
    grid_size: Tuple[int, int]
) -> GridCoord:
    """
    将世界坐标转换为栅格坐标

    Args:
        world_pos: 世界坐标 (x, z)
        transform: 栅格→世界变换
        grid_size: 栅格尺寸 (width, depth)

    Returns:
        栅格坐标 (x, z)，已限制在栅格范围内
    """
    gx, gz = transform.Inverse(world_pos)
    grid_w, grid_d = grid_size

    gx = int(math.floor(gx))
    gz = int(math.floor(gz))

    # 确保坐标在有效范围内
    gx = max(0, min(gx, grid_w - 1))
    gz = max(0, min(gz, grid_d - 1))

    return (gx, gz)


def grid_to_world(grid_pos: Point2D, transform: CoordinateTransform) -> Point2D:
    """
    将栅格坐标转换为世界坐标

    Args:
        grid_pos: 栅格坐标 (x, z)
        transform: 栅格→世界变换

    Returns:
        世界坐标 (x, z)
    """
    wx, _, wz = transform.Apply((grid_pos[0], 0.0, grid_pos[1]))
    return (wx, wz)


def path_length(path: Sequence[Sequence[float]]) -> float:
    """逐段欧氏距离之和"""
    length = 0.0
    for i in range(1, len(path)):
        length += math.dist(path[i - 1], path[i])
    return length
