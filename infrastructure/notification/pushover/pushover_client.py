"""Pushover 通知客户端实现"""

import logging
from typing import Optional

import httpx

from domain.notification.services.notification_client import (
    NotificationClient,
    NotificationResult,
)
from domain.notification.value_objects.notification_message import NotificationMessage


class PushoverClient(NotificationClient):
    """Pushover 通知客户端实现

    使用 httpx 库发送一次 HTTP POST 请求（表单编码），不重试。

    Attributes:
        API_URL: Pushover 消息接口
        TIMEOUT: 请求超时时间（秒）
    """

    API_URL: str = "https://api.pushover.net/1/messages.json"
    TIMEOUT: float = 10.0

    def __init__(
        self,
        api_url: str = API_URL,
        timeout: float = TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化客户端

        Args:
            api_url: 消息接口地址
            timeout: 请求超时（秒）
            logger: 日志记录器（可选）
        """
        self._api_url = api_url
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    def send(self, message: NotificationMessage) -> NotificationResult:
        """发送通知

        Args:
            message: 通知消息

        Returns:
            NotificationResult 包含发送结果
        """
        try:
            response = httpx.post(
                self._api_url,
                data={
                    "token": message.token,
                    "user": message.user,
                    "message": message.text,
                    "priority": str(int(message.priority)),
                },
                timeout=self._timeout,
            )
        except httpx.TimeoutException:
            self._logger.warning(f"Pushover timeout: {self._api_url}")
            return NotificationResult(success=False, error_message="Request timeout")
        except httpx.RequestError as e:
            self._logger.warning(f"Pushover error: {self._api_url} - {e}")
            return NotificationResult(success=False, error_message=f"Request error: {e}")

        if 200 <= response.status_code < 300:
            self._logger.debug(f"Pushover accepted notification (status {response.status_code})")
            return NotificationResult(success=True, status_code=response.status_code)

        self._logger.warning(f"Pushover rejected notification: HTTP {response.status_code}")
        return NotificationResult(
            success=False,
            status_code=response.status_code,
            error_message=f"HTTP {response.status_code}",
        )
