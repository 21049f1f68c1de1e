#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* 开放集：按 fScore 升序取出节点

基于 heapq 的二叉堆，配合坐标→条目的索引表：
- 包含判断按坐标（与 GridNode 的相等性一致）
- 同一坐标重复插入时更新其 fScore，旧条目惰性作废
- fScore 相同时按首次插入顺序取出
"""

import heapq
import itertools
from typing import Dict, List

from wayfinding.path_planner.map_model import GridNode, GridCoord

# 条目布局: [f_score, 首次插入序号, 唯一序号, 节点或 None（已作废）]
_NODE = 3


class PriorityFrontier:
    """
    优先队列形式的开放集

    示例:
        ```python
        frontier = PriorityFrontier()
        frontier.Insert(GridNode(0, 0, g_score=0.0, f_score=5.0))
        node = frontier.ExtractMin()
        ```
    """

    def __init__(self) -> None:
        self.heap_: List[list] = []
        self.entries_: Dict[GridCoord, list] = {}
        self.counter_ = itertools.count()

    @property
    def Count(self) -> int:
        return len(self.entries_)

    def __len__(self) -> int:
        return len(self.entries_)

    def Insert(self, node: GridNode) -> "PriorityFrontier":
        """
        插入节点；坐标已存在时以新节点替换并按新的 fScore 重新排序

        Args:
            node: 搜索节点

        Returns:
            自身，便于链式调用
        """
        existing = self.entries_.get(node.Coord)
        if existing is not None:
            order = existing[1]
            existing[_NODE] = None
        else:
            order = next(self.counter_)

        entry = [node.f_score, order, next(self.counter_), node]
        self.entries_[node.Coord] = entry
        heapq.heappush(self.heap_, entry)
        return self

    def Update(self, node: GridNode) -> "PriorityFrontier":
        """更新已在队列中的节点（不存在时等同插入）"""
        return self.Insert(node)

    def Contains(self, node: GridNode) -> bool:
        return node.Coord in self.entries_

    def PeekMin(self) -> GridNode:
        """
        查看 fScore 最小的节点（不出队）

        Raises:
            IndexError: 队列为空
        """
        self._DropStale()
        if not self.heap_:
            raise IndexError("PeekMin: 开放集为空")
        return self.heap_[0][_NODE]

    def ExtractMin(self) -> GridNode:
        """
        取出 fScore 最小的节点

        Raises:
            IndexError: 队列为空
        """
        self._DropStale()
        if not self.heap_:
            raise IndexError("ExtractMin: 开放集为空")
        node = heapq.heappop(self.heap_)[_NODE]
        del self.entries_[node.Coord]
        return node

    def Clear(self) -> "PriorityFrontier":
        self.heap_.clear()
        self.entries_.clear()
        return self

    def _DropStale(self) -> None:
        """弹出堆顶已作废的条目"""
        while self.heap_ and self.heap_[0][_NODE] is None:
            heapq.heappop(self.heap_)
