#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路模块

在二维代价栅格上做 A* 搜索，并对结果路径做可视性剪枝与共线简化。
"""

from .path_planner import (
    CostGrid,
    DistanceMetric,
    AStarSearch,
    VisibilityPruner,
    CollinearityReducer,
    PathPipeline,
    PipelineOptions,
    PlanResult,
)
from .core import CoordinateTransform
from .service import PathPlanningService

__version__ = "0.1.0"

__all__ = [
    'CostGrid',
    'DistanceMetric',
    'AStarSearch',
    'VisibilityPruner',
    'CollinearityReducer',
    'PathPipeline',
    'PipelineOptions',
    'PlanResult',
    'CoordinateTransform',
    'PathPlanningService',
]
