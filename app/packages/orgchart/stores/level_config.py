"""层级配置存储：具名、带颜色的层级序列，可由用户编辑。

编辑层级只改变某个 ``level`` 整数对应的展示名称与颜色，不会改写已有节点。
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple

from app.packages.orgchart.core.constants import DEFAULT_LEVELS, EXCEPTION_BADGE, TOP_BADGE
from app.packages.orgchart.core.logger import logger
from app.packages.orgchart.models.chart_node import ChartNode
from app.packages.orgchart.models.level import LevelConfig


def default_levels() -> Tuple[LevelConfig, ...]:
    return tuple(
        LevelConfig(id=index + 1, name=name, color=color)
        for index, (name, color) in enumerate(DEFAULT_LEVELS)
    )


class LevelConfigStore:
    def __init__(self, levels: Optional[Tuple[LevelConfig, ...]] = None) -> None:
        self.levels: Tuple[LevelConfig, ...] = levels if levels is not None else default_levels()

    def __len__(self) -> int:
        return len(self.levels)

    def get(self, index: int) -> Optional[LevelConfig]:
        """按下标取层级；下标越界（含负数）时返回 ``None``。"""
        if 0 <= index < len(self.levels):
            return self.levels[index]
        return None

    def update(self, index: int, *, name: Optional[str] = None, color: Optional[str] = None) -> Optional[LevelConfig]:
        """修改指定层级的名称或颜色，整体替换层级序列。"""
        current = self.get(index)
        if current is None:
            return None
        changes = {}
        if name is not None:
            changes["name"] = name
        if color is not None:
            changes["color"] = color
        updated = replace(current, **changes)
        self.levels = self.levels[:index] + (updated,) + self.levels[index + 1:]
        logger.debug("Level %s updated: %s", index, changes)
        return updated

    def badge_for(self, node: ChartNode) -> Tuple[str, str]:
        """返回节点展示用的层级名称与颜色。

        例外组织固定为 ``EXC``；``level`` 为 1..N 时取第 ``level - 1`` 个层级，
        其余（如根节点的 0）显示为 ``TOP``。
        """
        if node.is_exception:
            return EXCEPTION_BADGE
        level = self.get(node.level - 1) if node.level >= 1 else None
        if level is None:
            return TOP_BADGE
        return level.name, level.color
