"""组织图相关的请求与响应模型定义。"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from app.packages.orgchart.api.v1.schemas.common import ResponseEnvelope
from app.packages.orgchart.core.enums import DropOutcome, LeaderRole, NodeType, OrgLayout
from app.packages.orgchart.services.drag_drop import DragPayload


# ---------------------------------------------------------------------------
# 请求体
# ---------------------------------------------------------------------------


class OrgNodeCreateRequest(BaseModel):
    """新增组织节点的请求体。"""

    parent_id: str = Field(..., min_length=1, description="父组织编号")
    is_exception: bool = Field(default=False, description="是否为例外组织（虚线框，不参与层级）")
    layout: OrgLayout = Field(default=OrgLayout.STANDARD, description="standard 为纵向下级，side 为横向直属")
    level_index: Optional[int] = Field(default=None, ge=0, description="层级下标，缺省时取父节点层级 + 1")
    label: Optional[str] = Field(default=None, description="组织名称，缺省时取层级名称")


class SideUnitCreateRequest(BaseModel):
    """横向快捷组织：直属组织或例外组织。"""

    is_exception: bool = False


class PersonCreateRequest(BaseModel):
    employee_id: str = Field(..., min_length=1)


class LabelUpdateRequest(BaseModel):
    """修改节点名称，允许空字符串。"""

    label: str


class ParentUpdateRequest(BaseModel):
    parent_id: str = Field(..., min_length=1)


class DragStartRequest(BaseModel):
    """拖拽开始：图中节点与员工池员工二选一。"""

    node_id: Optional[str] = None
    employee_id: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "DragStartRequest":
        if (self.node_id is None) == (self.employee_id is None):
            raise ValueError("node_id 与 employee_id 必须且只能提供一个")
        return self


class DropRequest(BaseModel):
    payload: DragPayload
    target_id: str = Field(..., min_length=1, description="放置目标组织编号")


# ---------------------------------------------------------------------------
# 响应体
# ---------------------------------------------------------------------------


class ChartNodeItem(BaseModel):
    """扁平的组织图节点。"""

    id: str
    type: NodeType
    label: str
    parent_id: Optional[str]
    level: int
    is_exception: bool
    layout: OrgLayout
    original_position: Optional[str] = None
    role: Optional[LeaderRole] = None
    employee_id: Optional[str] = None


class LeaderBadgeItem(BaseModel):
    label: str
    color: str
    text_color: str


class PersonTreeItem(ChartNodeItem):
    badge: Optional[LeaderBadgeItem] = None


class ChartTreeNode(ChartNodeItem):
    """组织图树节点，包含成员与两类下级组织。"""

    level_name: str
    level_color: str
    person_count: int
    persons: List[PersonTreeItem]
    side_children: List["ChartTreeNode"]
    children: List["ChartTreeNode"]


class NodeMutationPayload(BaseModel):
    changed: bool
    node: Optional[ChartNodeItem] = None


class BatchPlacementPayload(BaseModel):
    changed: bool
    nodes: List[ChartNodeItem]


class NodeDeletionPayload(BaseModel):
    changed: bool
    deleted_ids: List[str]


class DropResultPayload(BaseModel):
    outcome: DropOutcome
    node_id: Optional[str] = None
    changed: bool


class ChartStatisticsItem(BaseModel):
    division: int
    group: int
    team: int
    person: int


ChartNodeListResponse = ResponseEnvelope[List[ChartNodeItem]]
ChartNodeResponse = ResponseEnvelope[ChartNodeItem]
ChartTreeResponse = ResponseEnvelope[ChartTreeNode]
NodeMutationResponse = ResponseEnvelope[NodeMutationPayload]
BatchPlacementResponse = ResponseEnvelope[BatchPlacementPayload]
NodeDeletionResponse = ResponseEnvelope[NodeDeletionPayload]
DragStartResponse = ResponseEnvelope[DragPayload]
DropResponse = ResponseEnvelope[DropResultPayload]
ChartStatisticsResponse = ResponseEnvelope[ChartStatisticsItem]
