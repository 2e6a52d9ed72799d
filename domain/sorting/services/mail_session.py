"""邮件会话接口"""

from abc import ABC, abstractmethod
from typing import AbstractSet, List, Set

from domain.sorting.value_objects.fetched_header import FetchedHeader
from domain.sorting.value_objects.sorting_enums import WaitOutcome


class MailSession(ABC):
    """
    邮件会话接口

    定义分拣引擎通过长连接会话访问邮箱服务器的契约。
    具体实现在基础设施层，负责：
    - 连接、认证、选择被监听的邮箱
    - 列出 / 创建 / 订阅邮箱
    - 批量收取头部、批量移动邮件
    - IDLE 等待邮箱变化

    会话只被同步循环单线程使用，实现无需加锁。
    所有协议或传输错误统一抛出 MailSessionError（或其子类）。
    """

    @abstractmethod
    def connect(self) -> None:
        """
        建立连接、登录并选择被监听的邮箱

        Raises:
            ImapConnectionError: 连接失败
            ImapAuthenticationError: 认证失败
            MailSessionError: 选择邮箱失败
        """
        raise NotImplementedError

    @abstractmethod
    def logout(self) -> None:
        """尽力登出并断开连接，不抛出异常"""
        raise NotImplementedError

    @abstractmethod
    def list_mailboxes(self, pattern: str = "*") -> Set[str]:
        """
        列出服务器上已存在的邮箱名称

        Args:
            pattern: LIST 通配模式

        Returns:
            邮箱名称集合
        """
        raise NotImplementedError

    @abstractmethod
    def mailbox_exists(self, name: str) -> bool:
        """检查邮箱当前是否存在"""
        raise NotImplementedError

    @abstractmethod
    def create_mailbox(self, name: str) -> None:
        """
        创建邮箱

        Raises:
            MailSessionError: 创建失败（包括邮箱已存在）
        """
        raise NotImplementedError

    @abstractmethod
    def subscribe_mailbox(self, name: str) -> None:
        """
        订阅邮箱

        Raises:
            MailSessionError: 订阅失败
        """
        raise NotImplementedError

    @abstractmethod
    def fetch_headers(self, field: str) -> List[FetchedHeader]:
        """
        收取被监听邮箱中所有邮件（1:*）的 UID 和指定头部

        Args:
            field: 头部名称，例如 "To"

        Returns:
            每封邮件一个 FetchedHeader
        """
        raise NotImplementedError

    @abstractmethod
    def move_messages(self, uids: AbstractSet[int], destination: str) -> None:
        """
        批量移动邮件

        Args:
            uids: 邮件 UID 集合
            destination: 目标邮箱

        Raises:
            MailSessionError: 移动失败
        """
        raise NotImplementedError

    @abstractmethod
    def wait_for_change(self, timeout: float) -> WaitOutcome:
        """
        阻塞等待被监听邮箱的邮件数量变化

        Args:
            timeout: 最长等待时间（秒）

        Returns:
            WaitOutcome.MAILBOX_CHANGED 或 WaitOutcome.TIMED_OUT

        Raises:
            MailSessionError: 协议或传输错误
        """
        raise NotImplementedError


class MailSessionError(Exception):
    """邮件会话错误（协议或传输层）"""


class ImapConnectionError(MailSessionError):
    """IMAP 连接错误"""

    def __init__(self, server: str, port: int, message: str):
        self.server = server
        self.port = port
        super().__init__(f"Failed to connect to {server}:{port} - {message}")


class ImapAuthenticationError(MailSessionError):
    """IMAP 认证错误"""

    def __init__(self, username: str, message: str):
        self.username = username
        super().__init__(f"Authentication failed for {username} - {message}")
