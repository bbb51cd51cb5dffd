"""组织图业务逻辑：把状态操作包装为统一响应，并输出嵌套的树形视图。"""

from __future__ import annotations

from typing import Any, Dict, Optional

from app.packages.orgchart.core.constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_OK,
    SIDE_UNIT_LEVEL_INDEX,
)
from app.packages.orgchart.core.enums import OrgLayout
from app.packages.orgchart.core.exceptions import AppException
from app.packages.orgchart.core.responses import create_response
from app.packages.orgchart.core.timezone import format_datetime
from app.packages.orgchart.models.chart_node import ChartNode
from app.packages.orgchart.services import drag_drop
from app.packages.orgchart.services.role_classifier import badge_for
from app.packages.orgchart.services.statistics import compute_statistics
from app.packages.orgchart.state import OrgChartState
from app.packages.orgchart.stores.chart_tree import ChartSnapshot
from app.packages.orgchart.stores.level_config import LevelConfigStore


def build_tree(snapshot: ChartSnapshot, levels: LevelConfigStore) -> Optional[Dict[str, Any]]:
    """从首个节点开始组装 UI 绘制所需的嵌套结构。

    每个组织节点拆分为三类子节点：人员成员、横向直属组织（side）、
    纵向下级组织（standard），均保持插入顺序。
    """
    root = snapshot.root
    if root is None:
        return None

    def build(node: ChartNode) -> Dict[str, Any]:
        children = snapshot.children_of(node.id)
        persons = [child for child in children if child.is_person]
        level_name, level_color = levels.badge_for(node)
        return {
            **node.to_dict(),
            "level_name": level_name,
            "level_color": level_color,
            "person_count": len(persons),
            "persons": [_serialize_person(person) for person in persons],
            "side_children": [
                build(child) for child in children if child.is_org and child.layout is OrgLayout.SIDE
            ],
            "children": [
                build(child) for child in children if child.is_org and child.layout is OrgLayout.STANDARD
            ],
        }

    return build(root)


def _serialize_person(node: ChartNode) -> Dict[str, Any]:
    badge = badge_for(node.role)
    return {
        **node.to_dict(),
        "badge": None if badge is None else {"label": badge.label, "color": badge.color, "text_color": badge.text_color},
    }


class ChartService:
    """封装组织图、员工池与层级配置的接口级操作。"""

    # ------------------------------------------------------------------
    # 员工池
    # ------------------------------------------------------------------

    def list_employees(self, state: OrgChartState, *, keyword: Optional[str] = None) -> dict[str, Any]:
        pool = state.pool
        data = [
            {**employee.to_dict(), "selected": pool.is_selected(employee.id)}
            for employee in pool.filter(keyword)
        ]
        return create_response("获取员工列表成功", data, HTTP_STATUS_OK)

    def pool_status(self, state: OrgChartState) -> dict[str, Any]:
        pool = state.pool
        payload = {
            "loading": pool.loading,
            "total": len(pool.employees),
            "selected": len(pool.selected_ids),
            "generation": pool.generation,
            "loaded_at": format_datetime(pool.loaded_at),
        }
        return create_response("获取员工池状态成功", payload, HTTP_STATUS_OK)

    def selection(self, state: OrgChartState) -> dict[str, Any]:
        return create_response("更新选择成功", sorted(state.pool.selected_ids), HTTP_STATUS_OK)

    def select(self, state: OrgChartState, *, employee_id: str) -> dict[str, Any]:
        state.pool.select(employee_id)
        return self.selection(state)

    def deselect(self, state: OrgChartState, *, employee_id: str) -> dict[str, Any]:
        state.pool.deselect(employee_id)
        return self.selection(state)

    def toggle(self, state: OrgChartState, *, employee_id: str) -> dict[str, Any]:
        state.pool.toggle(employee_id)
        return self.selection(state)

    def select_all(self, state: OrgChartState, *, keyword: Optional[str] = None) -> dict[str, Any]:
        """选中当前过滤条件下可见的全部员工。"""
        pool = state.pool
        pool.select_all(pool.filter(keyword).ids())
        return self.selection(state)

    def clear_selection(self, state: OrgChartState) -> dict[str, Any]:
        state.pool.clear_selection()
        return self.selection(state)

    # ------------------------------------------------------------------
    # 组织图
    # ------------------------------------------------------------------

    def list_nodes(self, state: OrgChartState) -> dict[str, Any]:
        data = [node.to_dict() for node in state.tree.nodes]
        return create_response("获取组织图节点成功", data, HTTP_STATUS_OK)

    def tree(self, state: OrgChartState) -> dict[str, Any]:
        return create_response("获取组织图成功", build_tree(state.tree.snapshot, state.levels), HTTP_STATUS_OK)

    def add_org_node(
        self,
        state: OrgChartState,
        *,
        parent_id: str,
        is_exception: bool = False,
        layout: OrgLayout = OrgLayout.STANDARD,
        level_index: Optional[int] = None,
        label: Optional[str] = None,
    ) -> dict[str, Any]:
        if level_index is not None and not is_exception and state.levels.get(level_index) is None:
            raise AppException("层级下标超出范围", HTTP_STATUS_BAD_REQUEST)
        node = state.tree.add_org_node(
            parent_id,
            is_exception=is_exception,
            layout=layout,
            level_index=level_index,
            label=label,
        )
        if node is None:
            raise AppException("父节点不是组织节点", HTTP_STATUS_BAD_REQUEST)
        return create_response("新增组织成功", node.to_dict(), HTTP_STATUS_OK)

    def add_side_unit(self, state: OrgChartState, *, parent_id: str, is_exception: bool) -> dict[str, Any]:
        """快捷入口：横向直属组织或横向例外组织。"""
        return self.add_org_node(
            state,
            parent_id=parent_id,
            is_exception=is_exception,
            layout=OrgLayout.SIDE,
            level_index=None if is_exception else SIDE_UNIT_LEVEL_INDEX,
        )

    def add_person(self, state: OrgChartState, *, parent_id: str, employee_id: str) -> dict[str, Any]:
        employee = state.pool.get(employee_id)
        if employee is None:
            raise AppException("员工不存在", HTTP_STATUS_NOT_FOUND)
        node = state.tree.add_person_node(parent_id, employee)
        data = {"changed": node is not None, "node": None if node is None else node.to_dict()}
        return create_response("放置员工成功" if node is not None else "目标不是组织节点，未放置", data, HTTP_STATUS_OK)

    def add_selected(self, state: OrgChartState, *, parent_id: str) -> dict[str, Any]:
        created = state.add_selected_as_persons(parent_id)
        data = {"changed": bool(created), "nodes": [node.to_dict() for node in created]}
        return create_response("批量放置员工成功", data, HTTP_STATUS_OK)

    def update_label(self, state: OrgChartState, *, node_id: str, label: str) -> dict[str, Any]:
        changed = state.tree.update_label(node_id, label)
        return create_response("更新组织名称成功", self._mutation_payload(state, node_id, changed), HTTP_STATUS_OK)

    def reparent(self, state: OrgChartState, *, node_id: str, parent_id: str) -> dict[str, Any]:
        changed = state.tree.reparent(node_id, parent_id)
        return create_response("移动节点成功", self._mutation_payload(state, node_id, changed), HTTP_STATUS_OK)

    def delete_node(self, state: OrgChartState, *, node_id: str) -> dict[str, Any]:
        deleted = state.tree.delete_node(node_id)
        data = {"changed": bool(deleted), "deleted_ids": sorted(deleted)}
        return create_response("删除节点成功", data, HTTP_STATUS_OK)

    def reset(self, state: OrgChartState) -> dict[str, Any]:
        state.tree.reset()
        return self.list_nodes(state)

    def statistics(self, state: OrgChartState) -> dict[str, Any]:
        stats = compute_statistics(state.tree.snapshot)
        return create_response("获取统计成功", stats.to_dict(), HTTP_STATUS_OK)

    # ------------------------------------------------------------------
    # 拖拽
    # ------------------------------------------------------------------

    def start_drag(
        self,
        state: OrgChartState,
        *,
        node_id: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> dict[str, Any]:
        if employee_id is not None:
            source = state.pool.get(employee_id)
            if source is None:
                raise AppException("员工不存在", HTTP_STATUS_NOT_FOUND)
        else:
            source = state.tree.get(node_id)
            if source is None:
                raise AppException("节点不存在", HTTP_STATUS_NOT_FOUND)
        payload = drag_drop.start_drag(source)
        if payload is None:
            return create_response("该节点不可拖动", None, HTTP_STATUS_OK)
        return create_response("开始拖拽", payload.model_dump(mode="json", exclude_none=True), HTTP_STATUS_OK)

    def drop(self, state: OrgChartState, *, payload: drag_drop.DragPayload, target_id: str) -> dict[str, Any]:
        result = drag_drop.drop(state, payload, target_id)
        data = {"outcome": result.outcome.value, "node_id": result.node_id, "changed": result.changed}
        return create_response("拖拽放置完成", data, HTTP_STATUS_OK)

    # ------------------------------------------------------------------
    # 层级配置
    # ------------------------------------------------------------------

    def list_levels(self, state: OrgChartState) -> dict[str, Any]:
        data = [level.to_dict() for level in state.levels.levels]
        return create_response("获取层级配置成功", data, HTTP_STATUS_OK)

    def update_level(
        self,
        state: OrgChartState,
        *,
        index: int,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> dict[str, Any]:
        updated = state.levels.update(index, name=name, color=color)
        if updated is None:
            raise AppException("层级不存在", HTTP_STATUS_NOT_FOUND)
        return create_response("更新层级配置成功", updated.to_dict(), HTTP_STATUS_OK)

    @staticmethod
    def _mutation_payload(state: OrgChartState, node_id: str, changed: bool) -> Dict[str, Any]:
        node = state.tree.get(node_id)
        return {"changed": changed, "node": None if node is None else node.to_dict()}


chart_service = ChartService()
