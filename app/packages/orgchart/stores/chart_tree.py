"""组织图树存储：维护组织节点与人员节点组成的可变森林。

所有修改都生成新的 ``ChartSnapshot`` 并整体替换当前快照（写时复制），
不合法的操作（成环、目标不存在、删除受保护节点等）静默忽略。
"""

from __future__ import annotations

import itertools
from collections import defaultdict
from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Iterable, List, Optional, Set, TYPE_CHECKING, Tuple

from app.packages.orgchart.core.constants import (
    CEO_LABEL,
    CEO_NODE_ID,
    DEFAULT_ORG_LABEL,
    EXCEPTION_ORG_LABEL,
    PRESIDENT_LABEL,
    PRESIDENT_NODE_ID,
    PROTECTED_NODE_IDS,
    UNRANKED_LEVEL,
)
from app.packages.orgchart.core.enums import NodeType, OrgLayout
from app.packages.orgchart.core.logger import logger
from app.packages.orgchart.models.chart_node import ChartNode
from app.packages.orgchart.models.employee import Employee
from app.packages.orgchart.services.role_classifier import classify_role

if TYPE_CHECKING:
    from app.packages.orgchart.stores.level_config import LevelConfigStore


INITIAL_NODES: Tuple[ChartNode, ...] = (
    ChartNode(
        id=PRESIDENT_NODE_ID,
        type=NodeType.ORG,
        label=PRESIDENT_LABEL,
        parent_id=None,
        level=0,
    ),
    ChartNode(
        id=CEO_NODE_ID,
        type=NodeType.ORG,
        label=CEO_LABEL,
        parent_id=PRESIDENT_NODE_ID,
        level=1,
    ),
)


@dataclass(frozen=True, eq=False)
class ChartSnapshot:
    """某一时刻的整棵树，节点按插入顺序保存；快照之间不共享可变状态。"""

    nodes: Tuple[ChartNode, ...] = field(default=INITIAL_NODES)

    @cached_property
    def by_id(self) -> Dict[str, ChartNode]:
        return {node.id: node for node in self.nodes}

    @cached_property
    def children_index(self) -> Dict[Optional[str], List[ChartNode]]:
        """父节点 -> 子节点列表（保持插入顺序）。"""
        index: Dict[Optional[str], List[ChartNode]] = defaultdict(list)
        for node in self.nodes:
            index[node.parent_id].append(node)
        return dict(index)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.by_id

    def get(self, node_id: Optional[str]) -> Optional[ChartNode]:
        if node_id is None:
            return None
        return self.by_id.get(node_id)

    def get_org(self, node_id: Optional[str]) -> Optional[ChartNode]:
        node = self.get(node_id)
        if node is None or not node.is_org:
            return None
        return node

    def children_of(self, node_id: Optional[str]) -> List[ChartNode]:
        return list(self.children_index.get(node_id, ()))

    @property
    def root(self) -> Optional[ChartNode]:
        """首个节点即渲染起点（引导节点“사장”）。"""
        return self.nodes[0] if self.nodes else None

    def descendants(self, node_id: str) -> Set[str]:
        """沿父子索引做一次深度优先遍历，返回全部后代编号（不含自身）。"""
        found: Set[str] = set()
        stack = [node_id]
        while stack:
            current = stack.pop()
            for child in self.children_index.get(current, ()):
                if child.id in found or child.id == node_id:
                    continue
                found.add(child.id)
                stack.append(child.id)
        return found

    def is_descendant(self, ancestor_id: str, node_id: str) -> bool:
        return node_id in self.descendants(ancestor_id)


class ChartTreeStore:
    """持有当前快照并提供插入、移动、改名与级联删除。

    节点编号由单调计数器生成，``reset`` 不会回拨计数器，因此编号在整个
    存储的生命周期内不会被复用。
    """

    def __init__(self, levels: Optional["LevelConfigStore"] = None) -> None:
        self._levels = levels
        self._sequence = itertools.count(1)
        self.snapshot = ChartSnapshot()

    @property
    def nodes(self) -> Tuple[ChartNode, ...]:
        return self.snapshot.nodes

    def get(self, node_id: Optional[str]) -> Optional[ChartNode]:
        return self.snapshot.get(node_id)

    def _next_id(self, node_type: NodeType) -> str:
        return f"{node_type.value}-{next(self._sequence)}"

    def _commit(self, nodes: Iterable[ChartNode]) -> ChartSnapshot:
        self.snapshot = ChartSnapshot(tuple(nodes))
        return self.snapshot

    # ------------------------------------------------------------------
    # 插入
    # ------------------------------------------------------------------

    def add_org_node(
        self,
        parent_id: str,
        is_exception: bool = False,
        layout: OrgLayout = OrgLayout.STANDARD,
        level_index: Optional[int] = None,
        label: Optional[str] = None,
    ) -> Optional[ChartNode]:
        """在 ``parent_id`` 下新建组织节点。

        父节点不存在时依然创建（父引用悬空），层级按 1 处理；
        父节点是人员时不创建，返回 ``None``。
        """
        parent = self.snapshot.get(parent_id)
        if parent is not None and not parent.is_org:
            logger.debug("Ignored org insertion under person node %s", parent_id)
            return None
        if is_exception:
            level = UNRANKED_LEVEL
            default_label = EXCEPTION_ORG_LABEL
        elif level_index is not None:
            level = level_index + 1
            default_label = self._level_name(level_index) or DEFAULT_ORG_LABEL
        else:
            level = parent.level + 1 if parent is not None else 1
            default_label = DEFAULT_ORG_LABEL

        node = ChartNode(
            id=self._next_id(NodeType.ORG),
            type=NodeType.ORG,
            label=default_label if label is None or is_exception else label,
            parent_id=parent_id,
            level=level,
            is_exception=is_exception,
            layout=OrgLayout(layout),
        )
        if parent is None:
            logger.debug("Org node %s created under missing parent %s", node.id, parent_id)
        self._commit((*self.snapshot.nodes, node))
        logger.debug("Added org node %s (level %s) under %s", node.id, node.level, parent_id)
        return node

    def add_person_node(self, parent_id: str, employee: Employee) -> Optional[ChartNode]:
        """把员工放到组织节点下；父节点不是组织时返回 ``None``。"""
        nodes = self.add_person_nodes(parent_id, [employee])
        return nodes[0] if nodes else None

    def add_person_nodes(self, parent_id: str, employees: Iterable[Employee]) -> List[ChartNode]:
        """批量放置员工，只产生一次快照替换。"""
        if self.snapshot.get_org(parent_id) is None:
            logger.debug("Ignored person insertion under non-org parent %s", parent_id)
            return []
        created = [
            ChartNode(
                id=self._next_id(NodeType.PERSON),
                type=NodeType.PERSON,
                label=employee.name,
                parent_id=parent_id,
                level=UNRANKED_LEVEL,
                original_position=employee.position,
                role=classify_role(employee.position),
                employee_id=employee.id,
            )
            for employee in employees
        ]
        if created:
            self._commit((*self.snapshot.nodes, *created))
            logger.debug("Added %s person nodes under %s", len(created), parent_id)
        return created

    # ------------------------------------------------------------------
    # 修改与删除
    # ------------------------------------------------------------------

    def update_label(self, node_id: str, label: str) -> bool:
        """原地替换标签，不做任何校验（允许空串）。"""
        if node_id not in self.snapshot:
            return False
        self._commit(node.with_label(label) if node.id == node_id else node for node in self.snapshot.nodes)
        return True

    def reparent(self, node_id: str, new_parent_id: str) -> bool:
        """把节点挂到新的组织节点下，成功时只改写这一个节点的 ``parent_id``。

        最顶层的“사장”节点始终是唯一的根，不可移动。
        """
        if node_id == new_parent_id or node_id == PRESIDENT_NODE_ID:
            return False
        snapshot = self.snapshot
        moving = snapshot.get(node_id)
        if moving is None:
            return False
        if snapshot.get_org(new_parent_id) is None:
            logger.debug("Ignored move of %s: target %s is not an org node", node_id, new_parent_id)
            return False
        if moving.is_org and snapshot.is_descendant(node_id, new_parent_id):
            logger.debug("Ignored move of %s under its own descendant %s", node_id, new_parent_id)
            return False
        self._commit(node.with_parent(new_parent_id) if node.id == node_id else node for node in snapshot.nodes)
        logger.debug("Moved %s under %s", node_id, new_parent_id)
        return True

    def delete_node(self, node_id: str) -> Set[str]:
        """删除节点及其全部后代，返回被删除的编号集合；受保护节点不可删除。"""
        if node_id in PROTECTED_NODE_IDS or node_id not in self.snapshot:
            return set()
        doomed = self.snapshot.descendants(node_id)
        doomed.add(node_id)
        self._commit(node for node in self.snapshot.nodes if node.id not in doomed)
        logger.debug("Deleted %s nodes rooted at %s", len(doomed), node_id)
        return doomed

    def reset(self) -> ChartSnapshot:
        """恢复到只有两个引导节点的初始状态。"""
        logger.debug("Chart reset to bootstrap nodes")
        return self._commit(INITIAL_NODES)

    def _level_name(self, level_index: int) -> Optional[str]:
        if self._levels is None:
            return None
        level = self._levels.get(level_index)
        return level.name if level is not None else None
