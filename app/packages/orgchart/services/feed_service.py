"""员工数据源：从远端 CSV 地址拉取员工表并替换员工池。"""

from __future__ import annotations

from typing import List, Optional

import httpx

from app.packages.orgchart.core.config import get_settings
from app.packages.orgchart.core.logger import logger
from app.packages.orgchart.state import OrgChartState


def parse_feed(text: str) -> List[str]:
    """按换行拆分 CSV 文本并丢弃首行表头；不支持带引号的逗号。"""
    return text.split("\n")[1:]


class EmployeeFeedService:
    """拉取员工 CSV 并以代次号保护写入。

    每次拉取先向员工池登记一个代次；返回时若已有更新的拉取开始，
    结果直接丢弃。失败只记录日志，员工池保留原值，不重试。
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.url = url or settings.employee_feed_url
        self.timeout = timeout or settings.employee_feed_timeout
        self._transport = transport

    async def fetch_text(self) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(self.url)
            response.raise_for_status()
            return response.text

    async def refresh(self, state: OrgChartState) -> bool:
        """拉取并替换员工池，返回本次结果是否被采用。"""
        pool = state.pool
        generation = pool.begin_load()
        try:
            text = await self.fetch_text()
            rows = parse_feed(text)
        except (httpx.HTTPError, httpx.InvalidURL):
            logger.exception("Failed to fetch employee feed from %s", self.url)
            pool.fail_load(generation)
            return False
        return pool.finish_load(generation, rows)
