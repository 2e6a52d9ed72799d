"""目标邮箱协调服务"""

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Optional, Set

from domain.sorting.services.mail_session import MailSession, MailSessionError
from domain.sorting.services.mailbox_hierarchy import hierarchy
from domain.sorting.value_objects.sort_result import SortResult


@dataclass
class ReconciliationReport:
    """协调结果

    Attributes:
        ready: 可以作为移动目标的邮箱
        created: 本轮创建的邮箱（按创建顺序）
        failures: 创建或订阅失败的目标邮箱 -> 原因
    """

    ready: Set[str] = field(default_factory=set)
    created: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failures


class MailboxReconciler:
    """
    目标邮箱协调服务

    对比分拣结果与服务器已有邮箱，为缺失的目标邮箱按祖先链顺序
    逐级创建并订阅，保证父邮箱总是先于子邮箱存在。

    - "本轮已创建" 集合只在一次 reconcile() 调用内有效
    - 空名称的祖先（无域名地址的首段）不创建
    - 创建失败但服务器报告邮箱已存在（外部并发创建）时继续订阅
    - 某个目标失败只中止该目标，不回滚其他目标已创建的层级
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def reconcile(
        self,
        session: MailSession,
        sort_result: SortResult,
        existing: AbstractSet[str],
    ) -> ReconciliationReport:
        """
        确保分拣结果中的所有目标邮箱存在

        Args:
            session: 邮件会话
            sort_result: 本轮分拣结果
            existing: 本轮开始时服务器上的邮箱快照

        Returns:
            ReconciliationReport
        """
        report = ReconciliationReport()
        created: Set[str] = set()

        for destination in sorted(sort_result.mailboxes):
            if destination in existing:
                report.ready.add(destination)
                continue

            try:
                for ancestor in hierarchy(destination):
                    # 空名称只是无域名地址的首段，不是可创建的邮箱
                    if not ancestor or ancestor in existing or ancestor in created:
                        continue
                    self._provision(session, ancestor)
                    created.add(ancestor)
                    report.created.append(ancestor)
            except MailSessionError as e:
                self._logger.error(f"Failed to provision mailbox {destination}: {e}")
                report.failures[destination] = str(e)
                continue

            report.ready.add(destination)

        return report

    def _provision(self, session: MailSession, name: str) -> None:
        """
        创建并订阅单个邮箱

        Raises:
            MailSessionError: 创建（且邮箱确实不存在）或订阅失败
        """
        try:
            session.create_mailbox(name)
        except MailSessionError as e:
            if not session.mailbox_exists(name):
                raise
            self._logger.info(f"Mailbox {name} was created concurrently, reusing it ({e})")
        else:
            self._logger.info(f"Created {name}")

        session.subscribe_mailbox(name)
