"""枚举定义：约束节点类型、布局、领导角色与拖拽协议的可选值。"""

from enum import Enum


class NodeType(str, Enum):
    ORG = "org"
    PERSON = "person"


class OrgLayout(str, Enum):
    """组织节点的排布方式：纵向下级或横向直属。"""

    STANDARD = "standard"
    SIDE = "side"


class LeaderRole(str, Enum):
    """由职位文本推导出的领导徽章。"""

    PRESIDENT = "PRESIDENT"
    CEO = "CEO"
    DIVISION = "DIVISION"
    GROUP = "GROUP"
    TEAM = "TEAM"


class DragKind(str, Enum):
    """拖拽载荷中携带的实体类型标识。"""

    POOL_EMPLOYEE = "pool-emp"
    ORG = "org"
    PERSON = "person"


class DropOutcome(str, Enum):
    CREATED = "created"
    MOVED = "moved"
    IGNORED = "ignored"
