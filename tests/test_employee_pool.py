"""员工池存储的单元测试：载入、过滤与选择集。"""

from app.packages.orgchart.stores.employee_pool import EmployeePoolStore, parse_rows


def test_load_two_rows_and_default_position():
    pool = EmployeePoolStore()
    employees = pool.load(["1,Sales,Alpha,Core,Kim,팀리더", "2,Sales,Alpha,Core,Lee,"])

    assert [e.id for e in employees] == ["emp-0", "emp-1"]
    assert employees[0].name == "Kim"
    assert employees[0].position == "팀리더"
    assert employees[1].position == ""
    assert pool.loaded_at is not None


def test_short_rows_are_discarded_and_ids_stay_sequential():
    employees = parse_rows(["1,Sales,Alpha,Core", "", "2, Sales , Alpha ,Core, Lee ", "3,A,B,C,Han,Lead"])

    assert [e.id for e in employees] == ["emp-0", "emp-1"]
    assert employees[0].division == "Sales"
    assert employees[0].name == "Lee"
    assert employees[0].position == ""


def test_load_accepts_pre_split_rows():
    pool = EmployeePoolStore()
    pool.load([["1", "Sales", "Alpha", "Core", "Kim", "팀리더"]])
    assert pool.get("emp-0").position == "팀리더"


def test_load_replaces_whole_pool(loaded_state):
    pool = loaded_state.pool
    pool.load(["9,Ops,Delta,Night,Yoon,Operator"])
    assert [e.name for e in pool.employees] == ["Yoon"]


def test_filter_is_case_insensitive_over_name_division_team_position(loaded_state):
    pool = loaded_state.pool

    assert [e.name for e in pool.filter("kim")] == ["Kim"]
    assert [e.name for e in pool.filter("PLATFORM")] == ["Park", "Choi"]
    assert [e.name for e in pool.filter("infra")] == ["Park"]
    assert [e.name for e in pool.filter("리더")] == ["Kim", "Park", "Jung"]
    # group 列不参与搜索
    assert list(pool.filter("gamma")) == []
    assert len(list(pool.filter(""))) == 5


def test_filter_view_is_restartable_and_follows_reload(loaded_state):
    pool = loaded_state.pool
    view = pool.filter("sales")

    assert len(list(view)) == 2
    assert len(list(view)) == 2

    pool.load(["1,Sales,Alpha,Core,Kim,팀리더"])
    assert view.ids() == ["emp-0"]


def test_selection_ignores_unknown_ids(loaded_state):
    pool = loaded_state.pool
    pool.select("emp-1")
    pool.select("emp-404")
    pool.deselect("emp-405")

    assert pool.selected_ids == {"emp-1"}


def test_toggle_select_all_and_clear(loaded_state):
    pool = loaded_state.pool
    pool.toggle("emp-0")
    pool.toggle("emp-2")
    pool.toggle("emp-0")
    assert pool.selected_ids == {"emp-2"}

    pool.select_all(pool.filter("platform").ids() + ["ghost"])
    assert pool.selected_ids == {"emp-2", "emp-3"}
    assert [e.name for e in pool.selected_employees()] == ["Park", "Choi"]

    pool.clear_selection()
    assert pool.selected_ids == frozenset()


def test_reload_drops_selection_of_missing_employees(loaded_state):
    pool = loaded_state.pool
    pool.select("emp-0")
    pool.select("emp-4")

    pool.load(["1,Sales,Alpha,Core,Kim,팀리더"])
    assert pool.selected_ids == {"emp-0"}


def test_superseded_generation_is_discarded(loaded_state):
    pool = loaded_state.pool
    first = pool.begin_load()
    second = pool.begin_load()

    assert pool.finish_load(second, ["1,New,A,B,Newer,"]) is True
    assert pool.loading is False
    assert pool.finish_load(first, ["1,Old,A,B,Older,"]) is False
    assert [e.name for e in pool.employees] == ["Newer"]


def test_failed_load_keeps_previous_pool(loaded_state):
    pool = loaded_state.pool
    generation = pool.begin_load()
    assert pool.loading is True

    pool.fail_load(generation)
    assert pool.loading is False
    assert len(pool.employees) == 5
