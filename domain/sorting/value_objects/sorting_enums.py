"""分拣相关枚举类型"""

from enum import Enum


class WaitOutcome(str, Enum):
    """IDLE 等待结果枚举"""

    TIMED_OUT = "timed_out"
    """等待超时，邮箱无变化"""

    MAILBOX_CHANGED = "mailbox_changed"
    """收到 EXISTS，邮件数量发生变化"""


class SyncState(str, Enum):
    """同步循环状态枚举"""

    CONNECTED = "connected"
    """已连接，尚未执行首次分拣"""

    SORTING = "sorting"
    """正在执行分拣"""

    WAITING = "waiting"
    """IDLE 等待中"""

    TERMINATED = "terminated"
    """已终止（终态）"""
