#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共模块：常量、异常与日志配置
"""

from .constants import (
    OBSTACLE_COST,
    DEFAULT_FREE_COST,
    DEFAULT_ELEVATION,
    COLLINEARITY_EPSILON,
    PIPELINE_COLLINEARITY_EPSILON,
)
from .exceptions import WayfindingError, ConfigurationError, PathPlanningError
from .logger import SetupLogger

__all__ = [
    'OBSTACLE_COST',
    'DEFAULT_FREE_COST',
    'DEFAULT_ELEVATION',
    'COLLINEARITY_EPSILON',
    'PIPELINE_COLLINEARITY_EPSILON',
    'WayfindingError',
    'ConfigurationError',
    'PathPlanningError',
    'SetupLogger',
]
