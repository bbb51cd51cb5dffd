"""常量定义：HTTP 状态码与组织图的固定配置。"""

HTTP_STATUS_OK = 200
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_NOT_FOUND = 404

# 两个引导节点：始终存在，不可删除
PRESIDENT_NODE_ID = "root-president"
CEO_NODE_ID = "root-ceo"
PROTECTED_NODE_IDS = frozenset({PRESIDENT_NODE_ID, CEO_NODE_ID})
PRESIDENT_LABEL = "사장"
CEO_LABEL = "대표이사"

# 人员节点与例外组织使用的层级哨兵值
UNRANKED_LEVEL = -1

DEFAULT_ORG_LABEL = "신규 조직"
EXCEPTION_ORG_LABEL = "예외 조직"

# (名称, 颜色)，顺序即层级，第 i 项对应 level = i + 1
DEFAULT_LEVELS = (
    ("부문", "#111827"),
    ("그룹", "#7C3AED"),
    ("팀", "#4B5563"),
    ("유닛", "#8B5CF6"),
    ("파트", "#EC4899"),
)

EXCEPTION_BADGE = ("EXC", "#94a3b8")
TOP_BADGE = ("TOP", "#0f172a")

# 统计口径：部门/组/团队 分别对应的 level
DIVISION_LEVEL = 2
GROUP_LEVEL = 3
TEAM_LEVEL = 4

# “직속 가로 조직” 快捷入口使用的层级下标
SIDE_UNIT_LEVEL_INDEX = 2

# 员工数据源：少于该列数的行直接丢弃
MIN_EMPLOYEE_FIELDS = 5
