"""分拣通知服务"""

import logging
from typing import AbstractSet, Optional

from domain.notification.services.notification_client import (
    NotificationClient,
    NotificationResult,
)
from domain.notification.value_objects.notification_config import NotificationConfig
from domain.notification.value_objects.notification_message import (
    NotificationMessage,
    NotificationPriority,
)


class SortNotificationService:
    """分拣通知服务

    一轮分拣完成后，汇总本轮涉及的目标邮箱并发送一条通知。

    职责：
    - 涉及邮箱为空时不发送
    - 按字典序排序、以 ", " 连接生成正文
    - 与关注邮箱有交集时普通优先级，否则静默
    - 发送失败只记录日志，不重试、不向上抛出
    """

    SEPARATOR = ", "

    def __init__(
        self,
        client: NotificationClient,
        config: NotificationConfig,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化服务

        Args:
            client: 通知客户端
            config: 通知配置（不可变）
            logger: 日志记录器
        """
        self._client = client
        self._config = config
        self._logger = logger or logging.getLogger(__name__)

    @property
    def config(self) -> NotificationConfig:
        return self._config

    def build_message(self, touched: AbstractSet[str]) -> Optional[NotificationMessage]:
        """构建通知消息，touched 为空时返回 None"""
        if not touched:
            return None

        if self._config.is_subscribed(touched):
            priority = NotificationPriority.NORMAL
        else:
            priority = NotificationPriority.QUIET

        return NotificationMessage(
            user=self._config.user,
            token=self._config.token,
            text=self.SEPARATOR.join(sorted(touched)),
            priority=priority,
        )

    def notify(self, touched: AbstractSet[str]) -> Optional[NotificationResult]:
        """发送分拣通知

        Args:
            touched: 本轮收到邮件的目标邮箱名称

        Returns:
            发送结果；touched 为空或发送异常时返回 None
        """
        message = self.build_message(touched)
        if message is None:
            return None

        self._logger.info(
            f"Notifying about: {message.text} (priority {int(message.priority)})"
        )

        try:
            result = self._client.send(message)
        except Exception as e:
            self._logger.error(f"Notification delivery raised: {e}")
            return None

        if not result.success:
            self._logger.warning(
                f"Notification delivery failed: {result.error_message} "
                f"(status {result.status_code})"
            )
        return result
