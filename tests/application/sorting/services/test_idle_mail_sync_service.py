"""IdleMailSyncService 单元测试"""

from unittest.mock import Mock

import pytest

from application.sorting.exceptions import RelocationError
from application.sorting.services.idle_mail_sync_service import IdleMailSyncService
from domain.sorting.services.mail_session import MailSessionError
from domain.sorting.value_objects.sorting_enums import SyncState, WaitOutcome


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def sort_service():
    service = Mock()
    service.sort.return_value = frozenset()
    return service


@pytest.fixture
def notifier():
    return Mock()


@pytest.fixture
def executor():
    return Mock()


@pytest.fixture
def sync_service(session, sort_service, notifier, executor):
    return IdleMailSyncService(
        session=session,
        sort_service=sort_service,
        notifier=notifier,
        idle_timeout=60,
        executor=executor,
    )


class TestIdleMailSyncService:
    """同步循环测试"""

    def test_initial_state(self, sync_service):
        """测试初始状态"""
        assert sync_service.state is SyncState.CONNECTED
        assert sync_service.idle_timeout == 60

    def test_sorts_once_before_waiting(self, sync_service, session, sort_service):
        """测试进入等待前先完整分拣一次"""
        session.wait_for_change.side_effect = MailSessionError("connection lost")

        with pytest.raises(MailSessionError):
            sync_service.run()

        sort_service.sort.assert_called_once()
        session.wait_for_change.assert_called_once_with(60)

    def test_timeout_does_not_sort(self, sync_service, session, sort_service):
        """测试等待超时后直接继续等待，不分拣"""
        session.wait_for_change.side_effect = [
            WaitOutcome.TIMED_OUT,
            WaitOutcome.MAILBOX_CHANGED,
            MailSessionError("connection lost"),
        ]

        with pytest.raises(MailSessionError):
            sync_service.run()

        # 初始一次 + 邮箱变化一次
        assert sort_service.sort.call_count == 2
        assert session.wait_for_change.call_count == 3

    def test_logout_once_on_termination(self, sync_service, session, executor):
        """测试终止时登出一次并关闭执行器"""
        session.wait_for_change.side_effect = MailSessionError("connection lost")

        with pytest.raises(MailSessionError):
            sync_service.run()

        session.logout.assert_called_once()
        executor.shutdown.assert_called_once_with(wait=False)
        assert sync_service.state is SyncState.TERMINATED

    def test_sort_failure_terminates(self, sync_service, session, sort_service):
        """测试分拣失败时终止循环"""
        sort_service.sort.side_effect = RelocationError("move failed", {"a": "NO"})

        with pytest.raises(RelocationError):
            sync_service.run()

        session.wait_for_change.assert_not_called()
        session.logout.assert_called_once()

    def test_notification_submitted_for_touched_mailboxes(
        self, sync_service, session, sort_service, notifier, executor
    ):
        """测试分拣成功后把涉及的邮箱交给执行器发送通知"""
        sort_service.sort.side_effect = [frozenset(), frozenset({"example_org.c"})]
        session.wait_for_change.side_effect = [
            WaitOutcome.MAILBOX_CHANGED,
            MailSessionError("connection lost"),
        ]

        with pytest.raises(MailSessionError):
            sync_service.run()

        executor.submit.assert_called_once_with(notifier.notify, frozenset({"example_org.c"}))

    def test_default_executor_is_created(self, session, sort_service, notifier):
        """测试未提供执行器时创建线程池"""
        session.wait_for_change.side_effect = MailSessionError("connection lost")
        service = IdleMailSyncService(session, sort_service, notifier)

        with pytest.raises(MailSessionError):
            service.run()

        assert service.idle_timeout == IdleMailSyncService.DEFAULT_IDLE_TIMEOUT
