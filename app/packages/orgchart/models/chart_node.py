"""组织图节点模型。

节点是不可变记录：任何修改都通过 ``dataclasses.replace`` 生成新对象，
再由 ``ChartSnapshot`` 整体替换，读者永远不会看到修改到一半的树。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

from app.packages.orgchart.core.constants import UNRANKED_LEVEL
from app.packages.orgchart.core.enums import LeaderRole, NodeType, OrgLayout


@dataclass(frozen=True)
class ChartNode:
    """组织节点（org）或已放置人员（person）。

    - org 节点使用 ``is_exception`` 与 ``layout``；
    - person 节点使用 ``original_position``、``role`` 与 ``employee_id``；
    - person 节点与例外组织的 ``level`` 固定为 -1。
    """

    id: str
    type: NodeType
    label: str
    parent_id: Optional[str]
    level: int = UNRANKED_LEVEL
    is_exception: bool = False
    layout: OrgLayout = OrgLayout.STANDARD
    original_position: Optional[str] = None
    role: Optional[LeaderRole] = None
    employee_id: Optional[str] = None

    @property
    def is_org(self) -> bool:
        return self.type is NodeType.ORG

    @property
    def is_person(self) -> bool:
        return self.type is NodeType.PERSON

    def with_label(self, label: str) -> "ChartNode":
        return replace(self, label=label)

    def with_parent(self, parent_id: Optional[str]) -> "ChartNode":
        return replace(self, parent_id=parent_id)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["type"] = self.type.value
        payload["layout"] = self.layout.value
        payload["role"] = self.role.value if self.role is not None else None
        return payload
