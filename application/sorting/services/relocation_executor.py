"""邮件批量移动服务"""

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Optional, Set

from domain.sorting.services.mail_session import MailSession, MailSessionError
from domain.sorting.value_objects.sort_result import SortResult


@dataclass
class RelocationReport:
    """移动结果

    Attributes:
        moved: 成功移动的目标邮箱
        failures: 移动失败的目标邮箱 -> 原因
    """

    moved: Set[str] = field(default_factory=set)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failures


class RelocationExecutor:
    """
    邮件批量移动服务

    每个目标邮箱发起一次批量移动。某一批失败只记录，
    继续尝试后续目标邮箱（尽力而为）。
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def relocate(
        self,
        session: MailSession,
        sort_result: SortResult,
        ready: AbstractSet[str],
    ) -> RelocationReport:
        """
        移动已确认存在的目标邮箱对应的邮件

        Args:
            session: 邮件会话
            sort_result: 本轮分拣结果
            ready: 已确认存在的目标邮箱

        Returns:
            RelocationReport
        """
        report = RelocationReport()

        for mailbox, uids in sort_result.items():
            if mailbox not in ready:
                continue
            uid_list = ",".join(str(uid) for uid in sorted(uids))
            try:
                session.move_messages(uids, mailbox)
            except MailSessionError as e:
                self._logger.error(f"Failed to move {uid_list} to {mailbox}: {e}")
                report.failures[mailbox] = str(e)
                continue

            report.moved.add(mailbox)
            self._logger.info(f"Moved {uid_list} to {mailbox}")

        return report
