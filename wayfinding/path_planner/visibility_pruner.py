#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
可视性剪枝：用三维 Bresenham 光栅化检测两航点间的直线是否穿过障碍

功能：
- bresenham_3d：整数增量的三维直线光栅化
- segment_is_clear：直线经过的每个格子都不是障碍
- VisibilityPruner：保留绕开障碍所必需的航点，去掉其余中间点
"""

from typing import List, Sequence, Tuple

from loguru import logger

from wayfinding.path_planner.map_model import CostGrid, Waypoint

Cell3D = Tuple[int, int, int]


def bresenham_3d(p1: Sequence[float], p2: Sequence[float]) -> List[Cell3D]:
    """
    三维 Bresenham 直线光栅化

    选取增量绝对值最大的轴为驱动轴，每次沿驱动轴走一格，
    另外两轴累积误差项，误差越过零时走一格。

    Args:
        p1: 起点 (x, y, z)，各分量向零截断为整数
        p2: 终点 (x, y, z)

    Returns:
        从 p1 到 p2（含两端）经过的整数格子
    """
    x1, y1, z1 = (int(c) for c in p1)
    x2, y2, z2 = (int(c) for c in p2)
    cells = [(x1, y1, z1)]

    dx, dy, dz = abs(x2 - x1), abs(y2 - y1), abs(z2 - z1)
    xs = 1 if x2 > x1 else -1
    ys = 1 if y2 > y1 else -1
    zs = 1 if z2 > z1 else -1

    if dx >= dy and dx >= dz:
        # 驱动轴: X
        e1 = 2 * dy - dx
        e2 = 2 * dz - dx
        while x1 != x2:
            x1 += xs
            if e1 >= 0:
                y1 += ys
                e1 -= 2 * dx
            if e2 >= 0:
                z1 += zs
                e2 -= 2 * dx
            e1 += 2 * dy
            e2 += 2 * dz
            cells.append((x1, y1, z1))
    elif dy >= dx and dy >= dz:
        # 驱动轴: Y
        e1 = 2 * dx - dy
        e2 = 2 * dz - dy
        while y1 != y2:
            y1 += ys
            if e1 >= 0:
                x1 += xs
                e1 -= 2 * dy
            if e2 >= 0:
                z1 += zs
                e2 -= 2 * dy
            e1 += 2 * dx
            e2 += 2 * dz
            cells.append((x1, y1, z1))
    else:
        # 驱动轴: Z
        e1 = 2 * dy - dz
        e2 = 2 * dx - dz
        while z1 != z2:
            z1 += zs
            if e1 >= 0:
                y1 += ys
                e1 -= 2 * dz
            if e2 >= 0:
                x1 += xs
                e2 -= 2 * dz
            e1 += 2 * dy
            e2 += 2 * dx
            cells.append((x1, y1, z1))

    return cells


def segment_is_clear(grid: CostGrid, p1: Waypoint, p2: Waypoint) -> bool:
    """
    两航点间的直线是否无障碍

    航点布局为 (x, elevation, z)，对应栅格索引 [x, z]；越界视为阻挡。

    Args:
        grid: 代价栅格
        p1: 起点航点
        p2: 终点航点

    Returns:
        True: 光栅化后的每个格子都可通行
    """
    for x, _, z in bresenham_3d(p1, p2):
        if not grid.InBounds(x, z):
            return False
        if grid.IsObstacle(x, z):
            return False
    return True


class VisibilityPruner:
    """
    基于栅格可视性的航点剪枝

    从锚点向前扫描候选航点，直到某条候选直线碰到障碍为止；
    碰到障碍前最后一个可直连的航点成为新的锚点。首尾航点始终保留。
    只会用已验证无障碍的直线替换原有折线，不会引入穿越障碍的线段。
    """

    def Prune(self, path: List[Waypoint], grid: CostGrid) -> List[Waypoint]:
        """
        Args:
            path: 三维航点路径 [(x, elevation, z), ...]
            grid: 代价栅格

        Returns:
            剪枝后的路径
        """
        if len(path) <= 2:
            return list(path)

        pruned = [path[0]]
        anchor = 0
        n = len(path)

        while anchor < n - 1:
            farthest = anchor + 1
            for candidate in range(anchor + 2, n):
                if not segment_is_clear(grid, path[anchor], path[candidate]):
                    break
                farthest = candidate

            pruned.append(path[farthest])
            anchor = farthest

        logger.debug(f"可视性剪枝: 原始路径长度={len(path)}, 剪枝后={len(pruned)}")
        return pruned
