"""领导角色识别：根据职位文本推导领导徽章。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from app.packages.orgchart.core.enums import LeaderRole


@dataclass(frozen=True)
class LeaderBadge:
    """领导徽章的展示信息。"""

    label: str
    color: str
    text_color: str


# 关键字 -> 角色，按顺序匹配，先命中者生效。
# 同一职位包含多个关键字时结果取决于这里的顺序，如需其它优先级可传入自定义表。
LEADER_ROLE_TABLE: Tuple[Tuple[str, LeaderRole], ...] = (
    ("사장", LeaderRole.PRESIDENT),
    ("대표이사", LeaderRole.CEO),
    ("부문리더", LeaderRole.DIVISION),
    ("그룹리더", LeaderRole.GROUP),
    ("팀리더", LeaderRole.TEAM),
)

LEADER_BADGES: dict[LeaderRole, LeaderBadge] = {
    LeaderRole.PRESIDENT: LeaderBadge("사장", "#0f172a", "#ffffff"),
    LeaderRole.CEO: LeaderBadge("대표이사", "#334155", "#ffffff"),
    LeaderRole.DIVISION: LeaderBadge("부문리더", "#10b981", "#ffffff"),
    LeaderRole.GROUP: LeaderBadge("그룹리더", "#f97316", "#ffffff"),
    LeaderRole.TEAM: LeaderBadge("팀리더", "#fbbf24", "#111827"),
}


def classify_role(
    position: Optional[str],
    table: Sequence[Tuple[str, LeaderRole]] = LEADER_ROLE_TABLE,
) -> Optional[LeaderRole]:
    """返回第一个关键字出现在职位中的角色，没有命中时返回 ``None``。"""
    if not position:
        return None
    for keyword, role in table:
        if keyword in position:
            return role
    return None


def badge_for(role: Optional[LeaderRole]) -> Optional[LeaderBadge]:
    if role is None:
        return None
    return LEADER_BADGES.get(role)
