"""收件箱扫描服务"""

import email
import logging
import re
from typing import Optional

from domain.sorting.services.address_classifier import classify
from domain.sorting.services.mail_session import MailSession
from domain.sorting.value_objects.sort_result import SortResult
from application.sorting.exceptions import InboxScanError

# 折叠行的换行 + 续行空白
_FOLDING = re.compile(r"\r?\n(?=[ \t])")


class InboxScanner:
    """
    收件箱扫描服务

    收取被监听邮箱中所有邮件的收件头部，逐封分类，
    按目标邮箱分组 UID，生成本轮的 SortResult。

    - 缺少 UID 或头部数据块：整轮失败（InboxScanError）
    - 头部存在但字段缺失 / 无法解析 / 地址组：跳过该邮件
    """

    DEFAULT_HEADER_FIELD = "To"

    def __init__(
        self,
        header_field: str = DEFAULT_HEADER_FIELD,
        watched_mailbox: str = "INBOX",
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化扫描服务

        Args:
            header_field: 决定分拣目标的头部字段
            watched_mailbox: 被监听的邮箱，分类结果等于它时跳过
            logger: 可选的日志记录器
        """
        self._header_field = header_field
        self._watched_mailbox = watched_mailbox
        self._logger = logger or logging.getLogger(__name__)

    def scan(self, session: MailSession) -> SortResult:
        """
        扫描收件箱

        Args:
            session: 已选择被监听邮箱的会话

        Returns:
            本轮分拣结果

        Raises:
            InboxScanError: 某封邮件缺少 UID 或头部数据
        """
        fetched = session.fetch_headers(self._header_field)
        result = SortResult()
        skipped = 0

        for item in fetched:
            if item.header is None:
                raise InboxScanError(
                    f"Missing {self._header_field} header data for message {item.uid}"
                )
            if item.uid is None:
                raise InboxScanError("Missing UID in fetch response")

            mailbox = classify(self._header_value(item.header), self._header_field)
            if mailbox is None or mailbox == self._watched_mailbox.lower():
                skipped += 1
                self._logger.debug(
                    f"Message {item.uid} has no routable {self._header_field} address, "
                    f"leaving it in {self._watched_mailbox}"
                )
                continue

            result.add(mailbox, item.uid)

        self._logger.info(
            f"Scanned {len(fetched)} message(s): {result.message_count} sorted "
            f"into {len(result)} mailbox(es), {skipped} skipped"
        )
        return result

    def _header_value(self, header: bytes) -> Optional[str]:
        """从头部数据块中取出字段原始值（字段不存在时返回 None）"""
        message = email.message_from_bytes(header)
        value = message.get(self._header_field)
        if value is None:
            return None
        return _FOLDING.sub("", str(value))
