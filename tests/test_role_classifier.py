"""领导角色识别的单元测试。"""

from app.packages.orgchart.core.enums import LeaderRole
from app.packages.orgchart.services.role_classifier import badge_for, classify_role


def test_keyword_substring_matches():
    assert classify_role("팀리더") is LeaderRole.TEAM
    assert classify_role("Sales 그룹리더 (acting)") is LeaderRole.GROUP
    assert classify_role("대표이사") is LeaderRole.CEO


def test_no_match_returns_none():
    assert classify_role("Engineer") is None
    assert classify_role("") is None
    assert classify_role(None) is None


def test_first_entry_in_table_wins():
    """“부사장” 同时包含“사장”，按表顺序命中 PRESIDENT。"""
    assert classify_role("부사장 겸 팀리더") is LeaderRole.PRESIDENT


def test_custom_table_changes_priority():
    table = (("팀리더", LeaderRole.TEAM), ("사장", LeaderRole.PRESIDENT))
    assert classify_role("부사장 겸 팀리더", table=table) is LeaderRole.TEAM


def test_badge_lookup():
    assert badge_for(None) is None
    assert badge_for(LeaderRole.TEAM).label == "팀리더"
