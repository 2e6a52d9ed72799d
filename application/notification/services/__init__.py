"""通知应用服务"""

from application.notification.services.sort_notification_service import (
    SortNotificationService,
)

__all__ = ["SortNotificationService"]
