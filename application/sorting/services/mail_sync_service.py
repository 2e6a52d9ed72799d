"""邮件同步服务接口"""

from abc import ABC, abstractmethod

from domain.sorting.value_objects.sorting_enums import SyncState


class MailSyncService(ABC):
    """
    邮件同步服务接口

    定义长连接同步循环的契约，负责：
    - 启动后立即执行一次分拣，处理积压邮件
    - 阻塞等待邮箱变化（带超时）
    - 邮箱变化时重新分拣，超时时继续等待
    - 协议错误或分拣失败时终止
    """

    DEFAULT_IDLE_TIMEOUT: float = 300.0  # 默认 IDLE 超时（秒）

    @property
    @abstractmethod
    def state(self) -> SyncState:
        """
        获取当前状态

        Returns:
            同步循环状态
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def idle_timeout(self) -> float:
        """
        获取 IDLE 超时（秒）

        Returns:
            单次等待的最长秒数
        """
        raise NotImplementedError

    @abstractmethod
    def run(self) -> None:
        """
        运行同步循环，直到发生致命错误

        Raises:
            MailSessionError: 协议或传输错误
            SortPassError: 分拣轮次失败
        """
        raise NotImplementedError
