"""拖拽协议的单元测试。"""

import pytest
from pydantic import ValidationError

from app.packages.orgchart.core.constants import CEO_NODE_ID, PRESIDENT_NODE_ID
from app.packages.orgchart.core.enums import DragKind, DropOutcome, LeaderRole
from app.packages.orgchart.services.drag_drop import DragPayload, drop, start_drag


def test_start_drag_builds_payloads(loaded_state):
    tree = loaded_state.tree
    org = tree.add_org_node(CEO_NODE_ID, level_index=0)
    person = tree.add_person_node(org.id, loaded_state.pool.get("emp-1"))

    assert start_drag(org) == DragPayload(kind=DragKind.ORG, node_id=org.id)
    assert start_drag(person).kind is DragKind.PERSON
    assert start_drag(tree.get(CEO_NODE_ID)).kind is DragKind.ORG

    pool_payload = start_drag(loaded_state.pool.get("emp-0"))
    assert pool_payload.kind is DragKind.POOL_EMPLOYEE
    assert pool_payload.employee.name == "Kim"


def test_president_is_not_draggable(state):
    assert start_drag(state.tree.get(PRESIDENT_NODE_ID)) is None


def test_payload_json_round_trip_uses_wire_tags(loaded_state):
    payload = start_drag(loaded_state.pool.get("emp-0"))
    encoded = payload.encode()

    assert '"kind":"pool-emp"' in encoded
    assert DragPayload.decode(encoded) == payload


def test_payload_requires_matching_reference():
    with pytest.raises(ValidationError):
        DragPayload(kind=DragKind.POOL_EMPLOYEE)
    with pytest.raises(ValidationError):
        DragPayload(kind=DragKind.ORG)


def test_drop_pool_employee_creates_person(loaded_state):
    tree = loaded_state.tree
    org = tree.add_org_node(CEO_NODE_ID, level_index=0)

    result = drop(loaded_state, start_drag(loaded_state.pool.get("emp-2")), org.id)

    assert result.outcome is DropOutcome.CREATED
    created = tree.get(result.node_id)
    assert created.parent_id == org.id
    assert created.label == "Park"
    assert created.role is LeaderRole.GROUP


def test_drop_on_person_or_missing_target_is_ignored(loaded_state):
    tree = loaded_state.tree
    org = tree.add_org_node(CEO_NODE_ID, level_index=0)
    person = tree.add_person_node(org.id, loaded_state.pool.get("emp-1"))
    before = tree.snapshot

    payload = start_drag(loaded_state.pool.get("emp-0"))
    assert drop(loaded_state, payload, person.id).outcome is DropOutcome.IGNORED
    assert drop(loaded_state, payload, "org-missing").outcome is DropOutcome.IGNORED
    assert tree.snapshot is before


def test_drop_org_moves_and_guards_cycles(state):
    tree = state.tree
    a = tree.add_org_node(CEO_NODE_ID, level_index=0)
    b = tree.add_org_node(a.id, level_index=1)
    c = tree.add_org_node(CEO_NODE_ID, level_index=0)

    moved = drop(state, start_drag(b), c.id)
    assert moved.outcome is DropOutcome.MOVED
    assert tree.get(b.id).parent_id == c.id

    assert drop(state, start_drag(c), b.id).outcome is DropOutcome.IGNORED
    assert drop(state, start_drag(c), c.id).outcome is DropOutcome.IGNORED
    assert tree.get(c.id).parent_id == CEO_NODE_ID


def test_drop_person_moves_between_orgs(loaded_state):
    tree = loaded_state.tree
    a = tree.add_org_node(CEO_NODE_ID, level_index=0)
    b = tree.add_org_node(CEO_NODE_ID, level_index=0)
    person = tree.add_person_node(a.id, loaded_state.pool.get("emp-1"))

    result = drop(loaded_state, start_drag(person), b.id)
    assert result.outcome is DropOutcome.MOVED
    assert tree.get(person.id).parent_id == b.id


def test_drop_with_mismatched_kind_is_ignored(state):
    tree = state.tree
    a = tree.add_org_node(CEO_NODE_ID, level_index=0)
    b = tree.add_org_node(a.id, level_index=1)

    forged = DragPayload(kind=DragKind.PERSON, node_id=a.id)
    assert drop(state, forged, b.id).outcome is DropOutcome.IGNORED
    assert tree.get(a.id).parent_id == CEO_NODE_ID


def test_forged_president_payload_is_ignored(state):
    tree = state.tree
    a = tree.add_org_node(CEO_NODE_ID, level_index=0)
    forged = DragPayload(kind=DragKind.ORG, node_id=PRESIDENT_NODE_ID)
    assert drop(state, forged, a.id).outcome is DropOutcome.IGNORED
