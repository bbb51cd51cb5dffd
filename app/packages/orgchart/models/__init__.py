"""模型包初始化，便于统一导入组织图的领域实体。"""

from app.packages.orgchart.models.chart_node import ChartNode
from app.packages.orgchart.models.employee import Employee
from app.packages.orgchart.models.level import LevelConfig

__all__ = [
    "ChartNode",
    "Employee",
    "LevelConfig",
]
