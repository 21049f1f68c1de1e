#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
距离函数：A* 的步长代价与启发式估计共用同一个距离函数

- 欧氏距离 / 曼哈顿距离：四方向邻接
- 切比雪夫距离：八方向邻接
"""

import math
from enum import Enum
from typing import List, Tuple

from wayfinding.common.constants import DIRECTIONS_4WAY, DIRECTIONS_8WAY
from wayfinding.common.exceptions import ConfigurationError

Coord = Tuple[int, int]


def euclidean_distance(a: Coord, b: Coord) -> float:
    """直线距离"""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def manhattan_distance(a: Coord, b: Coord) -> float:
    """坐标差绝对值之和"""
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def chebyshev_distance(a: Coord, b: Coord) -> float:
    """坐标差绝对值的最大值"""
    return float(max(abs(b[0] - a[0]), abs(b[1] - a[1])))


class DistanceMetric(Enum):
    """可选的距离函数"""
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"

    @classmethod
    def FromName(cls, name: str) -> "DistanceMetric":
        """
        按名称（不区分大小写）解析距离函数

        Raises:
            ConfigurationError: 未知名称
        """
        if isinstance(name, DistanceMetric):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError as e:
            valid = ", ".join(m.value for m in cls)
            raise ConfigurationError(f"未知的距离函数: {name}（可选: {valid}）") from e

    def Distance(self, a: Coord, b: Coord) -> float:
        if self is DistanceMetric.EUCLIDEAN:
            return euclidean_distance(a, b)
        if self is DistanceMetric.MANHATTAN:
            return manhattan_distance(a, b)
        return chebyshev_distance(a, b)

    def NeighborOffsets(self) -> List[Coord]:
        """切比雪夫使用八邻接，其余四邻接"""
        if self is DistanceMetric.CHEBYSHEV:
            return DIRECTIONS_8WAY
        return DIRECTIONS_4WAY
