"""组织图接口的集成测试用例。"""

from fastapi.testclient import TestClient

from app.packages.orgchart.core.constants import CEO_NODE_ID, PRESIDENT_NODE_ID


def _add_org(client: TestClient, parent_id: str, **extra) -> dict:
    response = client.post("/api/v1/chart/nodes", json={"parent_id": parent_id, **extra})
    assert response.status_code == 200
    return response.json()["data"]


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["data"] == {"status": "healthy"}
    assert response.headers["x-request-id"]


def test_list_initial_nodes(client: TestClient):
    response = client.get("/api/v1/chart")

    assert response.status_code == 200
    payload = response.json()
    assert payload["code"] == 200
    assert [node["id"] for node in payload["data"]] == [PRESIDENT_NODE_ID, CEO_NODE_ID]


def test_create_org_nodes(client: TestClient):
    division = _add_org(client, CEO_NODE_ID, level_index=0)
    assert division["label"] == "부문"
    assert division["level"] == 1
    assert division["layout"] == "standard"

    exception = _add_org(client, division["id"], is_exception=True, layout="side")
    assert exception["level"] == -1
    assert exception["label"] == "예외 조직"

    side = client.post(f"/api/v1/chart/nodes/{division['id']}/side-units", json={})
    assert side.status_code == 200
    side_node = side.json()["data"]
    assert side_node["layout"] == "side"
    assert side_node["level"] == 3
    assert side_node["label"] == "팀"


def test_create_org_node_with_invalid_level_index(client: TestClient):
    response = client.post("/api/v1/chart/nodes", json={"parent_id": CEO_NODE_ID, "level_index": 9})
    assert response.status_code == 400
    assert response.json()["code"] == 400

    negative = client.post("/api/v1/chart/nodes", json={"parent_id": CEO_NODE_ID, "level_index": -1})
    assert negative.status_code == 422
    assert negative.json()["msg"] == "请求参数验证失败"


def test_create_org_node_under_person_is_rejected(client: TestClient):
    person = client.post(f"/api/v1/chart/nodes/{CEO_NODE_ID}/persons", json={"employee_id": "emp-0"}).json()["data"]["node"]

    response = client.post("/api/v1/chart/nodes", json={"parent_id": person["id"]})

    assert response.status_code == 400
    assert response.json()["code"] == 400
    assert len(client.get("/api/v1/chart").json()["data"]) == 3


def test_president_cannot_be_moved(client: TestClient):
    dangling = _add_org(client, "org-missing")

    response = client.put(f"/api/v1/chart/nodes/{PRESIDENT_NODE_ID}/parent", json={"parent_id": dangling["id"]})

    assert response.status_code == 200
    assert response.json()["data"]["changed"] is False
    assert response.json()["data"]["node"]["parent_id"] is None


def test_place_employee_and_selection_batch(client: TestClient):
    team = _add_org(client, CEO_NODE_ID, level_index=2)

    single = client.post(f"/api/v1/chart/nodes/{team['id']}/persons", json={"employee_id": "emp-0"})
    assert single.status_code == 200
    node = single.json()["data"]["node"]
    assert node["label"] == "Kim"
    assert node["role"] == "TEAM"

    missing = client.post(f"/api/v1/chart/nodes/{team['id']}/persons", json={"employee_id": "emp-404"})
    assert missing.status_code == 404

    client.post("/api/v1/employees/selection/emp-1")
    client.post("/api/v1/employees/selection/emp-2")
    batch = client.post(f"/api/v1/chart/nodes/{team['id']}/selected")
    assert batch.status_code == 200
    assert [n["label"] for n in batch.json()["data"]["nodes"]] == ["Lee", "Park"]

    selection = client.get("/api/v1/employees", params={"keyword": "sales"}).json()["data"]
    assert all(item["selected"] is False for item in selection)


def test_batch_into_person_clears_selection_without_creating(client: TestClient):
    team = _add_org(client, CEO_NODE_ID, level_index=2)
    person = client.post(f"/api/v1/chart/nodes/{team['id']}/persons", json={"employee_id": "emp-0"}).json()["data"]["node"]
    client.post("/api/v1/employees/selection/emp-1")

    batch = client.post(f"/api/v1/chart/nodes/{person['id']}/selected")
    assert batch.json()["data"] == {"changed": False, "nodes": []}
    assert client.delete("/api/v1/employees/selection").json()["data"] == []


def test_rename_move_and_delete(client: TestClient):
    a = _add_org(client, CEO_NODE_ID, level_index=0)
    b = _add_org(client, a["id"], level_index=1)
    c = _add_org(client, CEO_NODE_ID, level_index=0)

    renamed = client.patch(f"/api/v1/chart/nodes/{a['id']}", json={"label": ""})
    assert renamed.json()["data"]["node"]["label"] == ""

    cycle = client.put(f"/api/v1/chart/nodes/{a['id']}/parent", json={"parent_id": b["id"]})
    assert cycle.status_code == 200
    assert cycle.json()["data"]["changed"] is False
    assert cycle.json()["data"]["node"]["parent_id"] == CEO_NODE_ID

    moved = client.put(f"/api/v1/chart/nodes/{b['id']}/parent", json={"parent_id": c["id"]})
    assert moved.json()["data"]["changed"] is True

    deleted = client.delete(f"/api/v1/chart/nodes/{c['id']}")
    assert sorted(deleted.json()["data"]["deleted_ids"]) == sorted([b["id"], c["id"]])

    protected = client.delete(f"/api/v1/chart/nodes/{CEO_NODE_ID}")
    assert protected.json()["data"] == {"changed": False, "deleted_ids": []}


def test_drag_and_drop_flow(client: TestClient):
    team = _add_org(client, CEO_NODE_ID, level_index=2)

    drag = client.post("/api/v1/chart/drag", json={"employee_id": "emp-4"})
    payload = drag.json()["data"]
    assert payload["kind"] == "pool-emp"

    dropped = client.post("/api/v1/chart/drop", json={"payload": payload, "target_id": team["id"]})
    result = dropped.json()["data"]
    assert result["outcome"] == "created"

    person_drag = client.post("/api/v1/chart/drag", json={"node_id": result["node_id"]}).json()["data"]
    assert person_drag["kind"] == "person"
    assert person_drag["node_id"] == result["node_id"]

    ignored = client.post("/api/v1/chart/drop", json={"payload": person_drag, "target_id": result["node_id"]})
    assert ignored.json()["data"]["outcome"] == "ignored"

    president = client.post("/api/v1/chart/drag", json={"node_id": PRESIDENT_NODE_ID})
    assert president.status_code == 200
    assert president.json()["data"] is None

    both = client.post("/api/v1/chart/drag", json={"node_id": team["id"], "employee_id": "emp-0"})
    assert both.status_code == 422


def test_tree_view_and_statistics(client: TestClient):
    division = _add_org(client, CEO_NODE_ID, level_index=1)
    _add_org(client, division["id"], level_index=2, layout="side")
    _add_org(client, division["id"], is_exception=True, layout="side")
    client.post(f"/api/v1/chart/nodes/{division['id']}/persons", json={"employee_id": "emp-4"})

    tree = client.get("/api/v1/chart/tree").json()["data"]
    assert tree["id"] == PRESIDENT_NODE_ID
    assert tree["level_name"] == "TOP"
    ceo = tree["children"][0]
    assert ceo["level_name"] == "부문"
    node = ceo["children"][0]
    assert node["level_name"] == "그룹"
    assert node["person_count"] == 1
    assert node["persons"][0]["badge"]["label"] == "부문리더"
    assert [child["level_name"] for child in node["side_children"]] == ["팀", "EXC"]

    stats = client.get("/api/v1/chart/statistics").json()["data"]
    assert stats == {"division": 1, "group": 1, "team": 0, "person": 1}


def test_reset(client: TestClient):
    _add_org(client, CEO_NODE_ID, level_index=0)
    response = client.post("/api/v1/chart/reset")
    assert [node["id"] for node in response.json()["data"]] == [PRESIDENT_NODE_ID, CEO_NODE_ID]
