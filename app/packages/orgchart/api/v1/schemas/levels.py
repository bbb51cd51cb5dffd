"""层级配置相关的请求与响应模型定义。"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from app.packages.orgchart.api.v1.schemas.common import ResponseEnvelope

_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class LevelItem(BaseModel):
    id: int
    name: str
    color: str


class LevelUpdateRequest(BaseModel):
    """修改层级名称或颜色，至少提供一项。"""

    name: Optional[str] = Field(default=None, description="层级名称")
    color: Optional[str] = Field(default=None, pattern=_COLOR_PATTERN, description="十六进制颜色，如 #7C3AED")

    @model_validator(mode="after")
    def _require_change(self) -> "LevelUpdateRequest":
        if self.name is None and self.color is None:
            raise ValueError("名称与颜色至少提供一项")
        return self


LevelListResponse = ResponseEnvelope[List[LevelItem]]
LevelMutationResponse = ResponseEnvelope[LevelItem]
