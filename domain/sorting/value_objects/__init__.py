"""分拣值对象模块"""

from domain.sorting.value_objects.fetched_header import FetchedHeader
from domain.sorting.value_objects.imap_config import ImapConfig
from domain.sorting.value_objects.sort_result import SortResult, DuplicateMessageError
from domain.sorting.value_objects.sorting_enums import WaitOutcome, SyncState

__all__ = [
    "FetchedHeader",
    "ImapConfig",
    "SortResult",
    "DuplicateMessageError",
    "WaitOutcome",
    "SyncState",
]
