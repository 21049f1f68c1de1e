#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理寻路核心的魔法数字
"""

# =============================
# 代价栅格相关常量
# =============================

# 障碍哨兵值（int16 最大值），代价等于该值的格子不可通行
OBSTACLE_COST: int = 32767

# 可通行格子的默认代价
DEFAULT_FREE_COST: int = 1

# =============================
# 路径相关常量
# =============================

# 三维航点的默认高度（所有航点共享同一高度）
DEFAULT_ELEVATION: float = 1.01

# 共线判定阈值：单独调用时的默认值
COLLINEARITY_EPSILON: float = 1e-6

# 共线判定阈值：管线默认值（容忍轻微绕行）
PIPELINE_COLLINEARITY_EPSILON: float = 1.0

# =============================
# 邻居方向
# =============================

# 四方向移动（欧氏/曼哈顿）
DIRECTIONS_4WAY = [(-1, 0), (0, -1), (1, 0), (0, 1)]

# 八方向移动（切比雪夫）
DIRECTIONS_8WAY = [
    (-1, 0), (0, -1), (-1, -1), (1, -1),
    (1, 0), (0, 1), (1, 1), (-1, 1),
]
