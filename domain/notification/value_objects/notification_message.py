"""通知消息值对象"""

from dataclasses import dataclass
from enum import IntEnum

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


class NotificationPriority(IntEnum):
    """通知优先级（取值与 Pushover priority 一致）"""

    QUIET = -1
    """静默通知，不响铃"""

    NORMAL = 0
    """普通通知"""


@dataclass(frozen=True)
class NotificationMessage(BaseValueObject):
    """
    一条待发送的通知

    Attributes:
        user: 接收者 user key
        token: 应用 API token
        text: 通知正文
        priority: 优先级
    """

    user: str
    token: str
    text: str
    priority: NotificationPriority = NotificationPriority.NORMAL

    def validate(self) -> None:
        if not self.text:
            raise InvalidValueObjectException(
                value_object_type="NotificationMessage",
                value=self.text,
                reason="Notification text cannot be empty",
            )

    def __repr__(self) -> str:
        return (
            f"NotificationMessage(user={self.user!r}, text={self.text!r}, "
            f"priority={self.priority.name})"
        )
