"""汇总统计：由当前快照派生的部门/组/团队数量与总人数。"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from functools import lru_cache

from app.packages.orgchart.core.constants import DIVISION_LEVEL, GROUP_LEVEL, TEAM_LEVEL
from app.packages.orgchart.stores.chart_tree import ChartSnapshot


@dataclass(frozen=True)
class ChartStatistics:
    division: int
    group: int
    team: int
    person: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@lru_cache(maxsize=32)
def compute_statistics(snapshot: ChartSnapshot) -> ChartStatistics:
    """统计非例外节点在 2/3/4 层的数量与人员节点总数。

    快照按对象身份哈希，因此缓存以快照为键，任何修改都会产生新快照。
    """
    division = group = team = person = 0
    for node in snapshot.nodes:
        if node.is_person:
            person += 1
        if node.is_exception:
            continue
        if node.level == DIVISION_LEVEL:
            division += 1
        elif node.level == GROUP_LEVEL:
            group += 1
        elif node.level == TEAM_LEVEL:
            team += 1
    return ChartStatistics(division=division, group=group, team=team, person=person)
