#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：A* 搜索、可视性剪枝与共线简化
"""

from .map_model import CostGrid, GridNode, PlanRequest, PlanResult
from .distance_metric import DistanceMetric
from .priority_frontier import PriorityFrontier
from .astar_search import AStarSearch, SearchResult
from .visibility_pruner import VisibilityPruner, bresenham_3d, segment_is_clear
from .collinearity_reducer import CollinearityReducer, determinant_3x3, is_collinear
from .path_pipeline import PathPipeline, PipelineOptions

__all__ = [
    'CostGrid',
    'GridNode',
    'PlanRequest',
    'PlanResult',
    'DistanceMetric',
    'PriorityFrontier',
    'AStarSearch',
    'SearchResult',
    'VisibilityPruner',
    'bresenham_3d',
    'segment_is_clear',
    'CollinearityReducer',
    'determinant_3x3',
    'is_collinear',
    'PathPipeline',
    'PipelineOptions',
]
