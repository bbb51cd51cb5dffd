"""依赖注入模块：封装 FastAPI 中复用度高的依赖函数。"""

from fastapi import Request

from app.packages.orgchart.services.feed_service import EmployeeFeedService
from app.packages.orgchart.state import OrgChartState


def get_state(request: Request) -> OrgChartState:
    """返回挂在应用上的组织图状态对象。"""
    return request.app.state.chart_state


def get_feed_service() -> EmployeeFeedService:
    """按当前配置构建员工数据源客户端。"""
    return EmployeeFeedService()
