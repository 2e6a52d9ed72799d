"""Tests for mailbox hierarchy resolver"""

from domain.sorting.services.mailbox_hierarchy import MailboxHierarchy, hierarchy


class TestMailboxHierarchy:
    """祖先链测试"""

    def test_three_segments(self):
        """测试三段路径"""
        assert list(hierarchy("foo.bar.baz")) == ["foo", "foo.bar", "foo.bar.baz"]

    def test_single_segment(self):
        """测试单段路径只包含自身"""
        assert list(hierarchy("inbox")) == ["inbox"]

    def test_empty_path(self):
        """测试空路径只包含空字符串"""
        assert list(hierarchy("")) == [""]

    def test_empty_leading_segment(self):
        """测试首段为空的路径"""
        assert list(hierarchy(".postmaster")) == ["", ".postmaster"]

    def test_is_restartable(self):
        """测试可以多次遍历"""
        chain = hierarchy("a.b")

        assert list(chain) == ["a", "a.b"]
        assert list(chain) == ["a", "a.b"]

    def test_is_lazy(self):
        """测试按需产生"""
        iterator = iter(MailboxHierarchy("a.b.c"))

        assert next(iterator) == "a"
        assert next(iterator) == "a.b"

    def test_each_item_is_prefix_of_next(self):
        """测试每一项都是下一项的前缀"""
        items = list(hierarchy("example_com.a_b.c"))

        for parent, child in zip(items, items[1:]):
            assert child.startswith(parent + ".")
