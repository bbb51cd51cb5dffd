"""员工池路由定义：查询、刷新与多选。"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.packages.orgchart.api.v1.schemas.employees import (
    EmployeeListResponse,
    EmployeePoolStatusResponse,
    SelectionResponse,
)
from app.packages.orgchart.core.dependencies import get_feed_service, get_state
from app.packages.orgchart.services.chart_service import chart_service
from app.packages.orgchart.services.feed_service import EmployeeFeedService
from app.packages.orgchart.state import OrgChartState

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeeListResponse)
def list_employees(
    keyword: Optional[str] = Query(None, description="按姓名、部门、团队或职位模糊搜索"),
    state: OrgChartState = Depends(get_state),
) -> EmployeeListResponse:
    """返回过滤后的员工池，并标记每位员工是否已被选中。"""
    return chart_service.list_employees(state, keyword=keyword)


@router.get("/status", response_model=EmployeePoolStatusResponse)
def get_pool_status(state: OrgChartState = Depends(get_state)) -> EmployeePoolStatusResponse:
    return chart_service.pool_status(state)


@router.post("/refresh", response_model=EmployeePoolStatusResponse)
async def refresh_employees(
    state: OrgChartState = Depends(get_state),
    feed: EmployeeFeedService = Depends(get_feed_service),
) -> EmployeePoolStatusResponse:
    """重新拉取员工数据源；失败时员工池保持原样，仅记录日志。"""
    await feed.refresh(state)
    return chart_service.pool_status(state)


@router.post("/selection/all", response_model=SelectionResponse)
def select_all_employees(
    keyword: Optional[str] = Query(None, description="与列表接口相同的过滤条件"),
    state: OrgChartState = Depends(get_state),
) -> SelectionResponse:
    """用当前过滤结果替换选择集。"""
    return chart_service.select_all(state, keyword=keyword)


@router.delete("/selection", response_model=SelectionResponse)
def clear_selection(state: OrgChartState = Depends(get_state)) -> SelectionResponse:
    return chart_service.clear_selection(state)


@router.post("/selection/{employee_id}", response_model=SelectionResponse)
def select_employee(employee_id: str, state: OrgChartState = Depends(get_state)) -> SelectionResponse:
    return chart_service.select(state, employee_id=employee_id)


@router.delete("/selection/{employee_id}", response_model=SelectionResponse)
def deselect_employee(employee_id: str, state: OrgChartState = Depends(get_state)) -> SelectionResponse:
    return chart_service.deselect(state, employee_id=employee_id)


@router.post("/selection/{employee_id}/toggle", response_model=SelectionResponse)
def toggle_employee(employee_id: str, state: OrgChartState = Depends(get_state)) -> SelectionResponse:
    """点击员工卡片：已选则取消，未选则选中。"""
    return chart_service.toggle(state, employee_id=employee_id)
