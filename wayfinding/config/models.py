#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路配置模型

使用Pydantic定义类型安全的配置模型，各段均有默认值，可按需覆盖。
"""

from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator, AliasChoices

from wayfinding.common.constants import DEFAULT_ELEVATION, PIPELINE_COLLINEARITY_EPSILON
from wayfinding.path_planner.distance_metric import DistanceMetric


class SearchConfig(BaseModel):
    """A* 搜索配置"""
    metric: str = Field(
        "chebyshev",
        description="距离函数: 'euclidean' / 'manhattan' / 'chebyshev'",
        validation_alias=AliasChoices("metric", "distance_function"),
    )

    @field_validator('metric')
    @classmethod
    def validate_metric(cls, v: str) -> str:
        """验证距离函数名称"""
        valid = [m.value for m in DistanceMetric]
        name = str(v).strip().lower()
        if name not in valid:
            raise ValueError(f"距离函数必须是 {valid} 之一: {v}")
        return name

    def ToMetric(self) -> DistanceMetric:
        return DistanceMetric.FromName(self.metric)


class PruningConfig(BaseModel):
    """路径剪枝配置"""
    visibility_pruning: bool = Field(
        True,
        description="是否启用可视性（Bresenham）剪枝",
        validation_alias=AliasChoices("visibility_pruning", "bresenham_pruning"),
    )
    collinearity_pruning: bool = Field(True, description="是否启用共线简化")
    collinearity_epsilon: float = Field(PIPELINE_COLLINEARITY_EPSILON, description="共线判定阈值")

    @field_validator('collinearity_epsilon')
    @classmethod
    def validate_epsilon(cls, v: float) -> float:
        """验证共线阈值"""
        if v <= 0:
            raise ValueError(f"共线阈值必须大于0: {v}")
        return v


class PathConfig(BaseModel):
    """航点配置"""
    elevation: float = Field(DEFAULT_ELEVATION, description="航点统一高度")


class TransformConfig(BaseModel):
    """栅格→世界坐标变换配置"""
    offset: Tuple[float, float] = Field((0.0, 0.0), description="平移 (x, z)")
    scale: Tuple[float, float] = Field((1.0, 1.0), description="缩放 (x, z)")

    @field_validator('scale')
    @classmethod
    def validate_scale(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """验证缩放系数"""
        sx, sz = v
        if sx == 0 or sz == 0:
            raise ValueError(f"缩放系数不能为0: {v}")
        return v


class GridConfig(BaseModel):
    """栅格配置"""
    size: Optional[Tuple[int, int]] = Field(None, description="栅格尺寸 (width, depth)")

    @field_validator('size')
    @classmethod
    def validate_size(cls, v: Optional[Tuple[int, int]]) -> Optional[Tuple[int, int]]:
        """验证栅格尺寸"""
        if v is None:
            return v
        width, depth = v
        if width <= 0 or depth <= 0:
            raise ValueError(f"栅格尺寸必须大于0: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录（为空则只输出到控制台）")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        valid = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        level = str(v).upper()
        if level not in valid:
            raise ValueError(f"日志级别必须是 {valid} 之一: {v}")
        return level


class WayfindingConfig(BaseModel):
    """寻路主配置"""
    search: SearchConfig = Field(default_factory=SearchConfig, description="A* 搜索配置")
    pruning: PruningConfig = Field(default_factory=PruningConfig, description="路径剪枝配置")
    path: PathConfig = Field(default_factory=PathConfig, description="航点配置")
    transform: TransformConfig = Field(default_factory=TransformConfig, description="坐标变换配置")
    grid: GridConfig = Field(default_factory=GridConfig, description="栅格配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
