"""Pushover 通知渠道"""

from infrastructure.notification.pushover.pushover_client import PushoverClient

__all__ = ["PushoverClient"]
