"""基于 IDLE 的邮件同步服务实现"""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional

from domain.sorting.services.mail_session import MailSession, MailSessionError
from domain.sorting.value_objects.sorting_enums import SyncState, WaitOutcome
from application.notification.services.sort_notification_service import (
    SortNotificationService,
)
from application.sorting.exceptions import SortPassError
from application.sorting.services.mail_sort_service import MailSortService
from application.sorting.services.mail_sync_service import MailSyncService


class IdleMailSyncService(MailSyncService):
    """
    基于 IDLE 的邮件同步服务实现

    状态机：CONNECTED -> SORTING -> WAITING -> (SORTING | WAITING) -> TERMINATED

    - 会话只由调用 run() 的线程使用
    - 每轮分拣成功后，把涉及邮箱的 frozenset 交给线程池发送通知，
      不等待结果，通知失败对循环不可见
    - 不自动重试或重连，致命错误在尽力登出后向上抛出
    """

    DEFAULT_NOTIFY_WORKERS = 2

    def __init__(
        self,
        session: MailSession,
        sort_service: MailSortService,
        notifier: SortNotificationService,
        idle_timeout: float = MailSyncService.DEFAULT_IDLE_TIMEOUT,
        executor: Optional[Executor] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化同步服务

        Args:
            session: 已连接并选择被监听邮箱的会话
            sort_service: 单轮分拣服务
            notifier: 分拣通知服务
            idle_timeout: 单次 IDLE 等待超时（秒），默认 5 分钟
            executor: 发送通知的执行器，默认创建线程池
            logger: 可选的日志记录器
        """
        self._session = session
        self._sort_service = sort_service
        self._notifier = notifier
        self._idle_timeout = idle_timeout
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self.DEFAULT_NOTIFY_WORKERS,
            thread_name_prefix="notify-",
        )
        self._logger = logger or logging.getLogger(__name__)
        self._state = SyncState.CONNECTED

    @property
    def state(self) -> SyncState:
        """当前状态"""
        return self._state

    @property
    def idle_timeout(self) -> float:
        """IDLE 超时（秒）"""
        return self._idle_timeout

    def run(self) -> None:
        """
        运行同步循环

        先执行一次完整分拣，再进入等待循环。只在发生致命错误时返回（抛出）。

        Raises:
            MailSessionError: IDLE 或其他会话调用出错
            SortPassError: 分拣轮次失败
        """
        self._logger.info(f"Mail sync started (idle_timeout={self._idle_timeout}s)")
        try:
            self._sort()

            while True:
                self._state = SyncState.WAITING
                outcome = self._session.wait_for_change(self._idle_timeout)

                if outcome is WaitOutcome.TIMED_OUT:
                    self._logger.debug("Timed out")
                    continue

                self._logger.info("Mailbox changed")
                self._sort()

        except (MailSessionError, SortPassError) as e:
            self._logger.error(f"Mail sync terminated: {e}")
            raise

        finally:
            self._state = SyncState.TERMINATED
            self._session.logout()
            # 不等待仍在发送中的通知
            self._executor.shutdown(wait=False)

    def _sort(self) -> None:
        """执行一轮分拣，成功后异步发送通知"""
        self._state = SyncState.SORTING
        touched = self._sort_service.sort()
        if touched:
            self._executor.submit(self._notifier.notify, frozenset(touched))
