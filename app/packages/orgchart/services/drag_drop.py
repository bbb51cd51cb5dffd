"""拖拽协议：把拖拽手势（员工池→组织、组织→组织、人员→组织）映射为树操作。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, model_validator

from app.packages.orgchart.core.constants import PRESIDENT_NODE_ID
from app.packages.orgchart.core.enums import DragKind, DropOutcome
from app.packages.orgchart.core.logger import logger
from app.packages.orgchart.models.chart_node import ChartNode
from app.packages.orgchart.models.employee import Employee
from app.packages.orgchart.state import OrgChartState


class DraggedEmployee(BaseModel):
    """随 ``pool-emp`` 载荷序列化的员工记录。"""

    id: str
    no: str = ""
    division: str = ""
    group: str = ""
    team: str = ""
    name: str
    position: str = ""

    def to_employee(self) -> Employee:
        return Employee(**self.model_dump())


class DragPayload(BaseModel):
    """拖拽载荷：类型标识 + 节点编号或员工记录。"""

    kind: DragKind
    node_id: Optional[str] = None
    employee: Optional[DraggedEmployee] = None

    @model_validator(mode="after")
    def _check_reference(self) -> "DragPayload":
        if self.kind is DragKind.POOL_EMPLOYEE:
            if self.employee is None:
                raise ValueError("pool-emp 载荷必须携带员工记录")
        elif not self.node_id:
            raise ValueError("节点拖拽载荷必须携带 node_id")
        return self

    def encode(self) -> str:
        return self.model_dump_json(exclude_none=True)

    @classmethod
    def decode(cls, raw: Union[str, bytes]) -> "DragPayload":
        return cls.model_validate_json(raw)


@dataclass(frozen=True)
class DropResult:
    outcome: DropOutcome
    node_id: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.outcome is not DropOutcome.IGNORED


IGNORED = DropResult(DropOutcome.IGNORED)


def start_drag(source: Union[ChartNode, Employee]) -> Optional[DragPayload]:
    """为图中节点或员工池中的员工生成拖拽载荷；最顶层的“사장”节点不可拖动。"""
    if isinstance(source, Employee):
        return DragPayload(kind=DragKind.POOL_EMPLOYEE, employee=DraggedEmployee(**source.to_dict()))
    if source.id == PRESIDENT_NODE_ID:
        return None
    kind = DragKind.ORG if source.is_org else DragKind.PERSON
    return DragPayload(kind=kind, node_id=source.id)


def drop(state: OrgChartState, payload: DragPayload, target_id: str) -> DropResult:
    """按载荷类型分发放置操作；目标必须是现存的组织节点，否则忽略。"""
    tree = state.tree
    if tree.snapshot.get_org(target_id) is None:
        logger.debug("Drop ignored: %s is not an org node", target_id)
        return IGNORED

    if payload.kind is DragKind.POOL_EMPLOYEE:
        created = tree.add_person_node(target_id, payload.employee.to_employee())
        if created is None:
            return IGNORED
        return DropResult(DropOutcome.CREATED, created.id)

    dragged = tree.get(payload.node_id)
    # 载荷声明的类型必须与节点实际类型一致
    if dragged is None or dragged.type.value != payload.kind.value:
        logger.debug("Drop ignored: payload %s does not match a %s node", payload.node_id, payload.kind.value)
        return IGNORED
    if not tree.reparent(dragged.id, target_id):
        return IGNORED
    return DropResult(DropOutcome.MOVED, dragged.id)
