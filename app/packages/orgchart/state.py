"""应用状态：把员工池、层级配置与组织图树集中到一个显式对象中。

该对象在启动时由 ``init_state`` 创建并挂到 ``app.state``，
所有请求处理函数通过依赖注入拿到同一个引用。
"""

from __future__ import annotations

from typing import List

from app.packages.orgchart.core.logger import logger
from app.packages.orgchart.models.chart_node import ChartNode
from app.packages.orgchart.stores.chart_tree import ChartTreeStore
from app.packages.orgchart.stores.employee_pool import EmployeePoolStore
from app.packages.orgchart.stores.level_config import LevelConfigStore


class OrgChartState:
    def __init__(self) -> None:
        self.pool = EmployeePoolStore()
        self.levels = LevelConfigStore()
        self.tree = ChartTreeStore(levels=self.levels)

    def add_selected_as_persons(self, parent_id: str) -> List[ChartNode]:
        """把选择集中的员工批量放到 ``parent_id`` 下，无论成功与否都清空选择集。"""
        employees = self.pool.selected_employees()
        created = self.tree.add_person_nodes(parent_id, employees)
        self.pool.clear_selection()
        logger.info("Placed %s of %s selected employees under %s", len(created), len(employees), parent_id)
        return created


def init_state() -> OrgChartState:
    """创建一份全新的应用状态（只含两个引导节点与默认层级）。"""
    return OrgChartState()
