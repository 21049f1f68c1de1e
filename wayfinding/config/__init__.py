#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    WayfindingConfig,
    SearchConfig,
    PruningConfig,
    PathConfig,
    TransformConfig,
    GridConfig,
    LoggingConfig,
)
from .loader import load_config, parse_config

__all__ = [
    'WayfindingConfig',
    'SearchConfig',
    'PruningConfig',
    'PathConfig',
    'TransformConfig',
    'GridConfig',
    'LoggingConfig',
    'load_config',
    'parse_config',
]
