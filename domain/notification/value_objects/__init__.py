"""通知值对象模块"""

from domain.notification.value_objects.notification_config import NotificationConfig
from domain.notification.value_objects.notification_message import (
    NotificationMessage,
    NotificationPriority,
)

__all__ = ["NotificationConfig", "NotificationMessage", "NotificationPriority"]
