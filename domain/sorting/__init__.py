"""
邮件分拣界限上下文

提供收件地址分拣的领域模型，包括：
- 地址分类规则（收件地址 -> 邮箱路径）
- 邮箱层级解析
- SortResult 分拣结果
- MailSession 会话接口
"""

from domain.sorting.services.address_classifier import classify, mailbox_from_address
from domain.sorting.services.mailbox_hierarchy import MailboxHierarchy, hierarchy
from domain.sorting.value_objects.sort_result import SortResult, DuplicateMessageError
from domain.sorting.value_objects.sorting_enums import WaitOutcome, SyncState

__all__ = [
    "classify",
    "mailbox_from_address",
    "MailboxHierarchy",
    "hierarchy",
    "SortResult",
    "DuplicateMessageError",
    "WaitOutcome",
    "SyncState",
]
