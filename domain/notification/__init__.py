"""
分拣通知界限上下文

- NotificationConfig, NotificationMessage 值对象
- NotificationPriority 枚举
- NotificationClient 通知渠道接口
"""

from domain.notification.value_objects.notification_config import NotificationConfig
from domain.notification.value_objects.notification_message import (
    NotificationMessage,
    NotificationPriority,
)
from domain.notification.services.notification_client import (
    NotificationClient,
    NotificationResult,
)

__all__ = [
    "NotificationConfig",
    "NotificationMessage",
    "NotificationPriority",
    "NotificationClient",
    "NotificationResult",
]
