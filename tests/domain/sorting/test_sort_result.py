"""Tests for SortResult"""

import pytest

from domain.sorting.value_objects.sort_result import SortResult, DuplicateMessageError


class TestSortResult:
    """SortResult 测试"""

    def test_empty_result(self):
        """测试空结果"""
        result = SortResult()

        assert not result
        assert len(result) == 0
        assert result.message_count == 0
        assert result.mailboxes == frozenset()

    def test_add_groups_by_mailbox(self):
        """测试按邮箱分组"""
        result = SortResult()
        result.add("example_com.a", 1)
        result.add("example_com.a", 2)
        result.add("example_org.b", 3)

        assert result.as_dict() == {"example_com.a": {1, 2}, "example_org.b": {3}}
        assert result.message_count == 3
        assert "example_com.a" in result

    def test_add_same_pair_is_idempotent(self):
        """测试重复加入同一邮箱是幂等的"""
        result = SortResult()
        result.add("m", 7)
        result.add("m", 7)

        assert result.as_dict() == {"m": {7}}
        assert result.message_count == 1

    def test_uid_in_two_mailboxes_raises(self):
        """测试同一 UID 加入两个邮箱抛出异常"""
        result = SortResult()
        result.add("m1", 7)

        with pytest.raises(DuplicateMessageError) as exc_info:
            result.add("m2", 7)

        assert exc_info.value.uid == 7
        assert exc_info.value.existing == "m1"
        assert "m2" not in result

    def test_items_sorted_by_mailbox(self):
        """测试 items() 按邮箱名排序"""
        result = SortResult()
        result.add("b", 2)
        result.add("a", 1)

        assert [mailbox for mailbox, _ in result.items()] == ["a", "b"]

    def test_as_dict_returns_copy(self):
        """测试 as_dict() 返回副本"""
        result = SortResult()
        result.add("m", 1)

        copy = result.as_dict()
        copy["m"].add(99)

        assert result.as_dict() == {"m": {1}}
