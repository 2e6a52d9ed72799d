"""Tests for notification value objects"""

import dataclasses

import pytest

from domain.common.exceptions import InvalidValueObjectException
from domain.notification.value_objects.notification_config import NotificationConfig
from domain.notification.value_objects.notification_message import (
    NotificationMessage,
    NotificationPriority,
)


class TestNotificationConfig:
    """NotificationConfig 值对象测试"""

    def test_mailboxes_are_frozen(self):
        """测试任意集合都被冻结为 frozenset"""
        config = NotificationConfig(user="u", token="t", mailboxes={"a", "b"})

        assert isinstance(config.mailboxes, frozenset)
        assert config.mailboxes == frozenset({"a", "b"})

    def test_default_mailboxes_empty(self):
        """测试默认没有关注邮箱"""
        config = NotificationConfig(user="u", token="t")

        assert config.mailboxes == frozenset()

    def test_is_immutable(self):
        """测试不可变"""
        config = NotificationConfig(user="u", token="t")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.user = "other"  # type: ignore[misc]

    def test_is_subscribed(self):
        """测试与关注邮箱有交集"""
        config = NotificationConfig(user="u", token="t", mailboxes={"a"})

        assert config.is_subscribed({"a", "b"}) is True
        assert config.is_subscribed({"b"}) is False
        assert config.is_subscribed(set()) is False

    def test_empty_user_raises_error(self):
        """测试 user 为空抛出异常"""
        with pytest.raises(InvalidValueObjectException) as exc_info:
            NotificationConfig(user="", token="t")

        assert "user cannot be empty" in exc_info.value.message

    def test_empty_token_raises_error(self):
        """测试 token 为空抛出异常"""
        with pytest.raises(InvalidValueObjectException):
            NotificationConfig(user="u", token="")

    def test_repr_hides_token(self):
        """测试 repr 不包含 token"""
        config = NotificationConfig(user="u", token="secret-token")

        assert "secret-token" not in repr(config)


class TestNotificationMessage:
    """NotificationMessage 值对象测试"""

    def test_default_priority_is_normal(self):
        """测试默认普通优先级"""
        message = NotificationMessage(user="u", token="t", text="a, b")

        assert message.priority is NotificationPriority.NORMAL

    def test_priority_values_match_pushover(self):
        """测试优先级取值"""
        assert int(NotificationPriority.NORMAL) == 0
        assert int(NotificationPriority.QUIET) == -1

    def test_empty_text_raises_error(self):
        """测试正文为空抛出异常"""
        with pytest.raises(InvalidValueObjectException):
            NotificationMessage(user="u", token="t", text="")
