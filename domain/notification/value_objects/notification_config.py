"""通知配置值对象"""

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class NotificationConfig(BaseValueObject):
    """
    通知配置值对象

    进程生命周期内不可变，可以安全地被多个通知线程同时读取。

    Attributes:
        user: 接收者 user key
        token: 应用 API token
        mailboxes: 关注的邮箱集合，只用于决定通知优先级
    """

    user: str
    token: str
    mailboxes: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # 接受任意集合，统一冻结为 frozenset
        object.__setattr__(self, "mailboxes", frozenset(self.mailboxes))
        super().__post_init__()

    def validate(self) -> None:
        """验证通知配置的有效性"""
        if not self.user:
            raise InvalidValueObjectException(
                value_object_type="NotificationConfig",
                value=self.user,
                reason="Notification user cannot be empty",
            )
        if not self.token:
            raise InvalidValueObjectException(
                value_object_type="NotificationConfig",
                value="***",
                reason="Notification token cannot be empty",
            )

    def is_subscribed(self, touched: AbstractSet[str]) -> bool:
        """touched 中是否有任何关注的邮箱"""
        return not self.mailboxes.isdisjoint(touched)

    def __repr__(self) -> str:
        return f"NotificationConfig(user={self.user!r}, mailboxes={sorted(self.mailboxes)!r})"
