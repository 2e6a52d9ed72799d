"""通知领域服务模块"""

from domain.notification.services.notification_client import (
    NotificationClient,
    NotificationResult,
)

__all__ = ["NotificationClient", "NotificationResult"]
