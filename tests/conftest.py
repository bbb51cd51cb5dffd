"""测试夹具：为 pytest 提供组织图状态与客户端的共享配置。"""

import os
import tempfile
from typing import Generator

os.environ.setdefault("FETCH_FEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "org-maker-test-logs"))

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.packages.orgchart.state import OrgChartState, init_state

SAMPLE_ROWS = [
    "1,Sales,Alpha,Core,Kim,팀리더",
    "2,Sales,Alpha,Core,Lee,",
    "3,Platform,Beta,Infra,Park,그룹리더",
    "4,Platform,Beta,Web,Choi,Engineer",
    "5,Finance,Gamma,Audit,Jung,부문리더",
]


@pytest.fixture()
def state() -> OrgChartState:
    """提供一份全新的应用状态。"""
    return init_state()


@pytest.fixture()
def loaded_state(state: OrgChartState) -> OrgChartState:
    """已载入示例员工的应用状态。"""
    state.pool.load(SAMPLE_ROWS)
    return state


@pytest.fixture()
def client(loaded_state: OrgChartState) -> Generator[TestClient, None, None]:
    """构建 FastAPI TestClient，并为每个用例注入独立的状态对象。"""
    app.state.chart_state = loaded_state

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
