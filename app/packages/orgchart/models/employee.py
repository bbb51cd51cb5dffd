"""员工模型：描述从外部数据源载入的人员记录。"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Employee:
    """员工记录，载入后不再修改；以 ``id`` 作为唯一标识。"""

    id: str
    no: str
    division: str
    group: str
    team: str
    name: str
    position: str = ""

    def matches(self, lowered_term: str) -> bool:
        """按姓名、部门、团队、职位做不区分大小写的包含匹配。"""
        return (
            lowered_term in self.name.lower()
            or lowered_term in self.division.lower()
            or lowered_term in self.team.lower()
            or lowered_term in self.position.lower()
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
