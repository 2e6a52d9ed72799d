"""RelocationExecutor 单元测试"""

from unittest.mock import Mock, call

import pytest

from application.sorting.services.relocation_executor import RelocationExecutor
from domain.sorting.services.mail_session import MailSessionError
from domain.sorting.value_objects.sort_result import SortResult


@pytest.fixture
def sort_result():
    result = SortResult()
    result.add("example_com.a_b", 3)
    result.add("example_com.a_b", 1)
    result.add("example_org.c", 2)
    return result


@pytest.fixture
def executor():
    return RelocationExecutor()


class TestRelocate:
    """批量移动测试"""

    def test_one_move_per_mailbox(self, executor, sort_result):
        """测试每个目标邮箱发起一次批量移动"""
        session = Mock()

        report = executor.relocate(session, sort_result, {"example_com.a_b", "example_org.c"})

        assert session.move_messages.call_args_list == [
            call(frozenset({1, 3}), "example_com.a_b"),
            call(frozenset({2}), "example_org.c"),
        ]
        assert report.moved == {"example_com.a_b", "example_org.c"}
        assert report.success

    def test_mailboxes_not_ready_are_skipped(self, executor, sort_result):
        """测试未就绪的目标邮箱不移动"""
        session = Mock()

        report = executor.relocate(session, sort_result, {"example_org.c"})

        session.move_messages.assert_called_once_with(frozenset({2}), "example_org.c")
        assert report.moved == {"example_org.c"}

    def test_failed_batch_does_not_stop_others(self, executor, sort_result):
        """测试某一批失败后继续移动其他批次"""
        session = Mock()
        session.move_messages.side_effect = [MailSessionError("NO [TRYCREATE]"), None]

        report = executor.relocate(session, sort_result, {"example_com.a_b", "example_org.c"})

        assert session.move_messages.call_count == 2
        assert report.failures == {"example_com.a_b": "NO [TRYCREATE]"}
        assert report.moved == {"example_org.c"}
        assert not report.success

    def test_logs_sorted_uid_list(self, sort_result):
        """测试日志中的 UID 列表按升序逗号分隔"""
        logger = Mock()
        session = Mock()

        RelocationExecutor(logger=logger).relocate(session, sort_result, {"example_com.a_b"})

        logger.info.assert_called_once_with("Moved 1,3 to example_com.a_b")
