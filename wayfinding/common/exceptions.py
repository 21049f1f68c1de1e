#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义寻路模块的专用异常
"""


class WayfindingError(Exception):
    """寻路模块基础异常类"""
    pass


class ConfigurationError(WayfindingError, ValueError):
    """配置错误异常（栅格数据非法、配置文件校验失败等）"""
    pass


class PathPlanningError(WayfindingError):
    """路径规划前置条件不满足（起点/终点越界）"""
    pass
