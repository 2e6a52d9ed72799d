"""通知客户端接口"""

from dataclasses import dataclass
from typing import Optional, Protocol

from domain.notification.value_objects.notification_message import NotificationMessage


@dataclass
class NotificationResult:
    """通知发送结果

    Attributes:
        success: 是否成功（收到 2xx 响应）
        status_code: HTTP 状态码（如果有响应）
        error_message: 错误信息（失败时）
    """

    success: bool
    status_code: Optional[int] = None
    error_message: str = ""


class NotificationClient(Protocol):
    """通知客户端接口

    定义发送推送通知的契约。
    通知只是提示性的：实现只尝试一次，不重试，
    失败通过返回值表达而不是抛出异常。
    """

    def send(self, message: NotificationMessage) -> NotificationResult:
        """发送通知

        Args:
            message: 通知消息

        Returns:
            NotificationResult 包含发送结果
        """
        ...
