"""IMAP 邮件会话实现"""

import logging
import ssl
import time
from typing import AbstractSet, Any, Callable, List, Optional, Sequence, Set, TypeVar

from imapclient import IMAPClient
from imapclient.exceptions import IMAPClientError, LoginError

from domain.sorting.services.mail_session import (
    MailSession,
    MailSessionError,
    ImapConnectionError,
    ImapAuthenticationError,
)
from domain.sorting.value_objects.fetched_header import FetchedHeader
from domain.sorting.value_objects.imap_config import ImapConfig
from domain.sorting.value_objects.sorting_enums import WaitOutcome

T = TypeVar("T")


class ImapMailSessionImpl(MailSession):
    """
    IMAP 邮件会话实现

    使用 imapclient 实现长连接会话，支持：
    - SSL/TLS 安全连接（端口 993）
    - LIST / CREATE / SUBSCRIBE
    - UID FETCH 指定头部字段（BODY.PEEK，不改变已读状态）
    - UID MOVE，服务器不支持 MOVE 时退化为 COPY + 删除标记 + EXPUNGE
    - IDLE 等待 EXISTS 推送

    不做自动重连：任何协议或传输错误都转换为 MailSessionError。
    """

    FETCH_RANGE = "1:*"
    HEADER_KEY_PREFIX = b"BODY[HEADER.FIELDS"

    def __init__(
        self,
        config: ImapConfig,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化 IMAP 会话

        Args:
            config: IMAP 会话配置
            logger: 可选的日志记录器
        """
        self._config = config
        self._client: Optional[IMAPClient] = None
        self._logger = logger or logging.getLogger(__name__)

    @property
    def config(self) -> ImapConfig:
        return self._config

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        """
        建立 IMAP 连接、登录并选择被监听的邮箱

        Raises:
            ImapConnectionError: 连接失败
            ImapAuthenticationError: 认证失败
            MailSessionError: 选择邮箱失败
        """
        server = self._config.server
        port = self._config.port

        try:
            self._logger.debug(f"Connecting to {server}:{port}")
            client = IMAPClient(
                host=server,
                port=port,
                ssl=self._config.use_ssl,
                ssl_context=ssl.create_default_context() if self._config.use_ssl else None,
                timeout=self._config.timeout,
            )
        except (IMAPClientError, OSError) as e:
            raise ImapConnectionError(server=server, port=port, message=str(e)) from e

        try:
            self._logger.debug(f"Authenticating as {self._config.username}")
            client.login(self._config.username, self._config.password)
        except LoginError as e:
            self._safe_logout(client)
            raise ImapAuthenticationError(
                username=self._config.username,
                message=str(e),
            ) from e
        except (IMAPClientError, OSError) as e:
            self._safe_logout(client)
            raise ImapConnectionError(server=server, port=port, message=str(e)) from e

        try:
            client.select_folder(self._config.mailbox)
        except (IMAPClientError, OSError) as e:
            self._safe_logout(client)
            raise MailSessionError(
                f"Failed to select {self._config.mailbox}: {e}"
            ) from e

        self._client = client
        self._logger.info(
            f"Successfully connected to {self._config.connection_string}"
        )

    def logout(self) -> None:
        """尽力登出，不抛出异常"""
        if not self.is_connected:
            return
        client, self._client = self._client, None
        self._safe_logout(client)
        self._logger.info("Logged out")

    def list_mailboxes(self, pattern: str = "*") -> Set[str]:
        folders = self._call("LIST", lambda client: client.list_folders("", pattern))
        return {self._folder_name(name) for _flags, _delimiter, name in folders}

    def mailbox_exists(self, name: str) -> bool:
        return name in self.list_mailboxes(name)

    def create_mailbox(self, name: str) -> None:
        self._call(f"CREATE {name}", lambda client: client.create_folder(name))

    def subscribe_mailbox(self, name: str) -> None:
        self._call(f"SUBSCRIBE {name}", lambda client: client.subscribe_folder(name))

    def fetch_headers(self, field: str) -> List[FetchedHeader]:
        """
        收取所有邮件的 UID 和指定头部字段

        Args:
            field: 头部名称

        Returns:
            FetchedHeader 列表（按 UID 升序）
        """
        item = f"BODY.PEEK[HEADER.FIELDS ({field.upper()})]"
        response = self._call(
            "FETCH",
            lambda client: client.fetch(self.FETCH_RANGE, ["UID", item]),
        )

        fetched: List[FetchedHeader] = []
        for msg_id in sorted(response, key=lambda key: (not isinstance(key, int), key)):
            data = response[msg_id]
            uid = msg_id if isinstance(msg_id, int) else None
            fetched.append(FetchedHeader(uid=uid, header=self._header_bytes(data)))
        return fetched

    def move_messages(self, uids: AbstractSet[int], destination: str) -> None:
        messages = sorted(uids)
        if not messages:
            return

        def move(client: IMAPClient) -> None:
            if client.has_capability("MOVE"):
                client.move(messages, destination)
            else:
                client.copy(messages, destination)
                client.delete_messages(messages)
                client.uid_expunge(messages)

        self._call(f"MOVE to {destination}", move)

    def wait_for_change(self, timeout: float) -> WaitOutcome:
        """
        通过 IDLE 阻塞等待 EXISTS

        其他未请求的响应（FETCH、EXPUNGE、心跳 OK 等）记录后丢弃，继续等待。

        Args:
            timeout: 最长等待时间（秒）

        Returns:
            WaitOutcome

        Raises:
            MailSessionError: IDLE 期间协议或传输出错
        """
        client = self._require_client()
        deadline = time.monotonic() + timeout
        changed = False

        try:
            client.idle()
            while not changed:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                changed = self._contains_exists(client.idle_check(timeout=remaining))
            _text, trailing = client.idle_done()
            changed = self._contains_exists(trailing) or changed
        except (IMAPClientError, OSError) as e:
            raise MailSessionError(f"IDLE failed: {e}") from e

        return WaitOutcome.MAILBOX_CHANGED if changed else WaitOutcome.TIMED_OUT

    def _contains_exists(self, responses: Sequence[Any]) -> bool:
        """IDLE 响应中是否包含 EXISTS"""
        found = False
        for response in responses:
            if (
                isinstance(response, tuple)
                and len(response) >= 2
                and response[1] == b"EXISTS"
            ):
                found = True
            else:
                self._logger.debug(f"Ignoring unsolicited response: {response!r}")
        return found

    def _header_bytes(self, data: dict) -> Optional[bytes]:
        """从 FETCH 结果中取出头部数据块"""
        for key, value in data.items():
            if isinstance(key, bytes) and key.upper().startswith(self.HEADER_KEY_PREFIX):
                if value is None:
                    return None
                return bytes(value)
        return None

    def _call(self, description: str, operation: Callable[[IMAPClient], T]) -> T:
        """执行一次会话调用，统一转换异常"""
        client = self._require_client()
        try:
            return operation(client)
        except (IMAPClientError, OSError) as e:
            raise MailSessionError(f"{description} failed: {e}") from e

    def _require_client(self) -> IMAPClient:
        if not self.is_connected:
            raise MailSessionError("Session is not connected. Call connect() first.")
        return self._client

    @staticmethod
    def _folder_name(name: Any) -> str:
        if isinstance(name, bytes):
            return name.decode("utf-8", errors="replace")
        return str(name)

    def _safe_logout(self, client: IMAPClient) -> None:
        try:
            client.logout()
        except Exception as e:
            self._logger.debug(f"Error during logout: {e}")
