"""员工池相关的响应模型定义。"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from app.packages.orgchart.api.v1.schemas.common import ResponseEnvelope


class EmployeeItem(BaseModel):
    """员工池中的单条记录，附带是否已被选中。"""

    id: str
    no: str
    division: str
    group: str
    team: str
    name: str
    position: str
    selected: bool = False


class EmployeePoolStatus(BaseModel):
    loading: bool
    total: int
    selected: int
    generation: int
    loaded_at: Optional[str]


EmployeeListResponse = ResponseEnvelope[List[EmployeeItem]]
EmployeePoolStatusResponse = ResponseEnvelope[EmployeePoolStatus]
SelectionResponse = ResponseEnvelope[List[str]]
