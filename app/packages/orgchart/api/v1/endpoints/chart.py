"""组织图路由定义：节点增删改、移动、拖拽与统计。"""

from fastapi import APIRouter, Depends

from app.packages.orgchart.api.v1.schemas.chart import (
    BatchPlacementResponse,
    ChartNodeListResponse,
    ChartNodeResponse,
    ChartStatisticsResponse,
    ChartTreeResponse,
    DragStartRequest,
    DragStartResponse,
    DropRequest,
    DropResponse,
    LabelUpdateRequest,
    NodeDeletionResponse,
    NodeMutationResponse,
    OrgNodeCreateRequest,
    ParentUpdateRequest,
    PersonCreateRequest,
    SideUnitCreateRequest,
)
from app.packages.orgchart.core.dependencies import get_state
from app.packages.orgchart.services.chart_service import chart_service
from app.packages.orgchart.state import OrgChartState

router = APIRouter(prefix="/chart", tags=["chart"])


@router.get("", response_model=ChartNodeListResponse)
def list_nodes(state: OrgChartState = Depends(get_state)) -> ChartNodeListResponse:
    """按插入顺序返回全部节点（扁平结构）。"""
    return chart_service.list_nodes(state)


@router.get("/tree", response_model=ChartTreeResponse)
def get_tree(state: OrgChartState = Depends(get_state)) -> ChartTreeResponse:
    """以嵌套结构返回组织图（成员、横向直属组织、纵向下级组织）。"""
    return chart_service.tree(state)


@router.get("/statistics", response_model=ChartStatisticsResponse)
def get_statistics(state: OrgChartState = Depends(get_state)) -> ChartStatisticsResponse:
    return chart_service.statistics(state)


@router.post("/nodes", response_model=ChartNodeResponse)
def create_org_node(payload: OrgNodeCreateRequest, state: OrgChartState = Depends(get_state)) -> ChartNodeResponse:
    """新增组织节点。"""
    return chart_service.add_org_node(
        state,
        parent_id=payload.parent_id,
        is_exception=payload.is_exception,
        layout=payload.layout,
        level_index=payload.level_index,
        label=payload.label,
    )


@router.post("/nodes/{node_id}/side-units", response_model=ChartNodeResponse)
def create_side_unit(
    node_id: str,
    payload: SideUnitCreateRequest,
    state: OrgChartState = Depends(get_state),
) -> ChartNodeResponse:
    """快捷新增横向直属组织或横向例外组织。"""
    return chart_service.add_side_unit(state, parent_id=node_id, is_exception=payload.is_exception)


@router.post("/nodes/{node_id}/persons", response_model=NodeMutationResponse)
def place_employee(
    node_id: str,
    payload: PersonCreateRequest,
    state: OrgChartState = Depends(get_state),
) -> NodeMutationResponse:
    return chart_service.add_person(state, parent_id=node_id, employee_id=payload.employee_id)


@router.post("/nodes/{node_id}/selected", response_model=BatchPlacementResponse)
def place_selected_employees(node_id: str, state: OrgChartState = Depends(get_state)) -> BatchPlacementResponse:
    """把选择集中的员工批量放到该组织下，随后清空选择集。"""
    return chart_service.add_selected(state, parent_id=node_id)


@router.patch("/nodes/{node_id}", response_model=NodeMutationResponse)
def update_node_label(
    node_id: str,
    payload: LabelUpdateRequest,
    state: OrgChartState = Depends(get_state),
) -> NodeMutationResponse:
    return chart_service.update_label(state, node_id=node_id, label=payload.label)


@router.put("/nodes/{node_id}/parent", response_model=NodeMutationResponse)
def move_node(
    node_id: str,
    payload: ParentUpdateRequest,
    state: OrgChartState = Depends(get_state),
) -> NodeMutationResponse:
    """移动节点；目标不是组织或会形成环时不做任何修改。"""
    return chart_service.reparent(state, node_id=node_id, parent_id=payload.parent_id)


@router.delete("/nodes/{node_id}", response_model=NodeDeletionResponse)
def delete_node(node_id: str, state: OrgChartState = Depends(get_state)) -> NodeDeletionResponse:
    """级联删除节点及其全部后代；引导节点不可删除。"""
    return chart_service.delete_node(state, node_id=node_id)


@router.post("/reset", response_model=ChartNodeListResponse)
def reset_chart(state: OrgChartState = Depends(get_state)) -> ChartNodeListResponse:
    """恢复到初始的两个引导节点。"""
    return chart_service.reset(state)


@router.post("/drag", response_model=DragStartResponse)
def start_drag(payload: DragStartRequest, state: OrgChartState = Depends(get_state)) -> DragStartResponse:
    return chart_service.start_drag(state, node_id=payload.node_id, employee_id=payload.employee_id)


@router.post("/drop", response_model=DropResponse)
def drop(payload: DropRequest, state: OrgChartState = Depends(get_state)) -> DropResponse:
    """按拖拽载荷类型放置：员工池员工新建人员节点，节点则移动到目标组织。"""
    return chart_service.drop(state, payload=payload.payload, target_id=payload.target_id)
