"""层级配置模型：定义具名、带颜色的层级序列。"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class LevelConfig:
    id: int
    name: str
    color: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
