"""单轮分拣服务"""

import logging
from typing import FrozenSet, Optional

from domain.sorting.services.mail_session import MailSession
from application.sorting.exceptions import (
    MailboxProvisioningError,
    RelocationError,
)
from application.sorting.services.inbox_scanner import InboxScanner
from application.sorting.services.mailbox_reconciler import MailboxReconciler
from application.sorting.services.relocation_executor import RelocationExecutor


class MailSortService:
    """
    单轮分拣服务

    一轮分拣 = 邮箱快照 -> 扫描 -> 协调目标邮箱 -> 批量移动。
    所有互不依赖的工作都会被尝试，之后若有任何失败再抛出整轮错误。
    """

    def __init__(
        self,
        session: MailSession,
        scanner: InboxScanner,
        reconciler: MailboxReconciler,
        relocator: RelocationExecutor,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化分拣服务

        Args:
            session: 邮件会话（由同步循环独占使用）
            scanner: 收件箱扫描服务
            reconciler: 目标邮箱协调服务
            relocator: 批量移动服务
            logger: 可选的日志记录器
        """
        self._session = session
        self._scanner = scanner
        self._reconciler = reconciler
        self._relocator = relocator
        self._logger = logger or logging.getLogger(__name__)

    def sort(self) -> FrozenSet[str]:
        """
        执行一轮分拣

        Returns:
            本轮收到邮件的目标邮箱集合

        Raises:
            InboxScanError: 扫描失败
            MailboxProvisioningError: 有目标邮箱创建或订阅失败
            RelocationError: 有批次移动失败
            MailSessionError: 列出邮箱时会话出错
        """
        existing = self._session.list_mailboxes()
        sort_result = self._scanner.scan(self._session)
        if not sort_result:
            self._logger.debug("Nothing to sort")
            return frozenset()

        reconciliation = self._reconciler.reconcile(self._session, sort_result, existing)
        relocation = self._relocator.relocate(self._session, sort_result, reconciliation.ready)

        if not reconciliation.success:
            failures = {**reconciliation.failures, **relocation.failures}
            raise MailboxProvisioningError(
                f"Failed to provision {len(reconciliation.failures)} mailbox(es): "
                f"{', '.join(sorted(reconciliation.failures))}",
                failures,
            )
        if not relocation.success:
            raise RelocationError(
                f"Failed to move messages to {len(relocation.failures)} mailbox(es): "
                f"{', '.join(sorted(relocation.failures))}",
                relocation.failures,
            )

        self._logger.info(
            f"Sort pass complete: {sort_result.message_count} message(s) moved "
            f"into {len(relocation.moved)} mailbox(es), "
            f"{len(reconciliation.created)} mailbox(es) created"
        )
        return frozenset(relocation.moved)
