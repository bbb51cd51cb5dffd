"""层级配置路由定义。"""

from fastapi import APIRouter, Depends, Path

from app.packages.orgchart.api.v1.schemas.levels import LevelListResponse, LevelMutationResponse, LevelUpdateRequest
from app.packages.orgchart.core.dependencies import get_state
from app.packages.orgchart.services.chart_service import chart_service
from app.packages.orgchart.state import OrgChartState

router = APIRouter(prefix="/levels", tags=["levels"])


@router.get("", response_model=LevelListResponse)
def list_levels(state: OrgChartState = Depends(get_state)) -> LevelListResponse:
    return chart_service.list_levels(state)


@router.patch("/{index}", response_model=LevelMutationResponse)
def update_level(
    payload: LevelUpdateRequest,
    index: int = Path(..., description="层级下标，从 0 开始"),
    state: OrgChartState = Depends(get_state),
) -> LevelMutationResponse:
    """修改层级名称或颜色；已有节点保存的 level 不变，仅展示随之变化。"""
    return chart_service.update_level(state, index=index, name=payload.name, color=payload.color)
