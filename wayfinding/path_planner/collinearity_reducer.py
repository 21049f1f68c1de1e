#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
共线简化：去除位于前后两点连线上的中间航点

以三点为行组成 3x3 矩阵，行列式绝对值小于阈值即视为共线。
纯几何处理，不检查障碍，只能用于已知无障碍的路径。
"""

from typing import List, Optional, Sequence

from loguru import logger

from wayfinding.common.constants import COLLINEARITY_EPSILON
from wayfinding.common.exceptions import ConfigurationError
from wayfinding.path_planner.map_model import Waypoint


def determinant_3x3(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> float:
    """三个三维点作为矩阵行时的行列式（按第一行展开）"""
    m11, m12, m13 = p1
    m21, m22, m23 = p2
    m31, m32, m33 = p3

    return (
        m11 * (m22 * m33 - m23 * m32)
        + m12 * (m23 * m31 - m21 * m33)
        + m13 * (m21 * m32 - m22 * m31)
    )


def is_collinear(p1: Waypoint, p2: Waypoint, p3: Waypoint, epsilon: float = COLLINEARITY_EPSILON) -> bool:
    return abs(determinant_3x3(p1, p2, p3)) < epsilon


class CollinearityReducer:
    """
    共线航点简化器

    示例:
        ```python
        reducer = CollinearityReducer(epsilon=1.0)
        path = reducer.Reduce([(0, 0, 0), (1, 0, 1), (2, 0, 2)])  # -> [(0, 0, 0), (2, 0, 2)]
        ```
    """

    def __init__(self, epsilon: float = COLLINEARITY_EPSILON) -> None:
        """
        Args:
            epsilon: 共线判定阈值

        Raises:
            ConfigurationError: 阈值不是正数
        """
        if not isinstance(epsilon, (int, float)) or epsilon <= 0:
            raise ConfigurationError(f"epsilon 必须是正数: {epsilon!r}")
        self.epsilon_ = float(epsilon)

    @property
    def Epsilon(self) -> float:
        return self.epsilon_

    def IsCollinear(self, p1: Waypoint, p2: Waypoint, p3: Waypoint, epsilon: Optional[float] = None) -> bool:
        return is_collinear(p1, p2, p3, self.epsilon_ if epsilon is None else epsilon)

    def Reduce(self, path: List[Waypoint]) -> List[Waypoint]:
        """
        扫描相邻三元组，共线则删除中间点

        删除后回退一个三元组重新检查，保证输出中任意相邻三点都不共线，
        因此对输出再次简化不会有变化。

        Args:
            path: 三维航点路径

        Returns:
            简化后的路径（新列表）
        """
        reduced = list(path)
        i = 0

        while i < len(reduced) - 2:
            if self.IsCollinear(reduced[i], reduced[i + 1], reduced[i + 2]):
                del reduced[i + 1]
                # 回退而非原地重测：原地重测会漏掉 (i-1, i, i+1) 新形成的共线
                i = max(i - 1, 0)
            else:
                i += 1

        logger.debug(f"共线简化: 原始路径长度={len(path)}, 简化后={len(reduced)}")
        return reduced
