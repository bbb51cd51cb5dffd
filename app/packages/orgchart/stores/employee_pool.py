"""员工池存储：保存从外部数据源载入的扁平员工列表，支持过滤与多选。"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Union

from app.packages.orgchart.core.constants import MIN_EMPLOYEE_FIELDS
from app.packages.orgchart.core.logger import logger
from app.packages.orgchart.core.timezone import now as tz_now
from app.packages.orgchart.models.employee import Employee

RawRow = Union[str, Sequence[str]]


def split_row(row: RawRow) -> List[str]:
    """把一行原始数据拆成去除空白的单元格；不处理引号与转义。"""
    cells = row.split(",") if isinstance(row, str) else list(row)
    return [str(cell).strip() for cell in cells]


def parse_rows(raw_rows: Iterable[RawRow]) -> List[Employee]:
    """将原始行解析为员工记录，按保留下来的行顺序分配 ``emp-<n>`` 编号。"""
    employees: List[Employee] = []
    discarded = 0
    for row in raw_rows:
        cells = split_row(row)
        if len(cells) < MIN_EMPLOYEE_FIELDS:
            discarded += 1
            continue
        employees.append(
            Employee(
                id=f"emp-{len(employees)}",
                no=cells[0],
                division=cells[1],
                group=cells[2],
                team=cells[3],
                name=cells[4],
                position=cells[5] if len(cells) > 5 else "",
            )
        )
    if discarded:
        logger.debug("Discarded %s employee rows with fewer than %s fields", discarded, MIN_EMPLOYEE_FIELDS)
    return employees


class PoolView:
    """员工池的惰性过滤视图，每次迭代都从完整员工池重新计算。"""

    def __init__(self, store: "EmployeePoolStore", term: Optional[str]) -> None:
        self._store = store
        self._term = (term or "").lower()

    def __iter__(self) -> Iterator[Employee]:
        for employee in self._store.employees:
            if employee.matches(self._term):
                yield employee

    def ids(self) -> List[str]:
        return [employee.id for employee in self]


class EmployeePoolStore:
    """员工池与选择集。

    员工池只能整体替换；选择集中的编号始终指向当前池内存在的员工。
    ``begin_load``/``finish_load`` 通过递增的代次号保证较早发起的拉取
    不会覆盖较新的结果。
    """

    def __init__(self) -> None:
        self._employees: tuple[Employee, ...] = ()
        self._index: dict[str, Employee] = {}
        self._selected: Set[str] = set()
        self._generation = 0
        self.loading = False
        self.loaded_at: Optional[datetime] = None

    # ------------------------------------------------------------------
    # 员工池
    # ------------------------------------------------------------------

    @property
    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._index.get(employee_id)

    def load(self, raw_rows: Iterable[RawRow]) -> List[Employee]:
        """解析并整体替换员工池。"""
        employees = parse_rows(raw_rows)
        self._employees = tuple(employees)
        self._index = {employee.id: employee for employee in employees}
        self._selected = {employee_id for employee_id in self._selected if employee_id in self._index}
        self.loaded_at = tz_now()
        logger.info("Employee pool loaded with %s employees", len(employees))
        return employees

    def filter(self, term: Optional[str] = None) -> PoolView:
        return PoolView(self, term)

    # ------------------------------------------------------------------
    # 拉取代次
    # ------------------------------------------------------------------

    @property
    def generation(self) -> int:
        return self._generation

    def begin_load(self) -> int:
        """登记一次新的拉取并返回其代次号。"""
        self._generation += 1
        self.loading = True
        return self._generation

    def finish_load(self, generation: int, raw_rows: Iterable[RawRow]) -> bool:
        """仅当 ``generation`` 仍是最新代次时才应用结果。"""
        if generation != self._generation:
            logger.info(
                "Discarding superseded employee feed result (generation %s, latest %s)",
                generation,
                self._generation,
            )
            return False
        self.load(raw_rows)
        self.loading = False
        return True

    def fail_load(self, generation: int) -> None:
        """拉取失败：员工池保持原值，只复位加载标记。"""
        if generation == self._generation:
            self.loading = False

    # ------------------------------------------------------------------
    # 选择集
    # ------------------------------------------------------------------

    @property
    def selected_ids(self) -> frozenset[str]:
        return frozenset(self._selected)

    def is_selected(self, employee_id: str) -> bool:
        return employee_id in self._selected

    def select(self, employee_id: str) -> None:
        if employee_id in self._index:
            self._selected.add(employee_id)

    def deselect(self, employee_id: str) -> None:
        self._selected.discard(employee_id)

    def toggle(self, employee_id: str) -> None:
        if employee_id in self._selected:
            self._selected.discard(employee_id)
        else:
            self.select(employee_id)

    def select_all(self, visible_ids: Iterable[str]) -> None:
        """用当前可见的员工替换选择集，未知编号被忽略。"""
        self._selected = {employee_id for employee_id in visible_ids if employee_id in self._index}

    def clear_selection(self) -> None:
        self._selected = set()

    def selected_employees(self) -> List[Employee]:
        """按员工池顺序返回已选员工。"""
        return [employee for employee in self._employees if employee.id in self._selected]
