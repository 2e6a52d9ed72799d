"""分拣结果"""

from typing import Dict, FrozenSet, Iterator, Set, Tuple


class DuplicateMessageError(Exception):
    """同一封邮件被分入两个目标邮箱"""

    def __init__(self, uid: int, existing: str, requested: str):
        self.uid = uid
        self.existing = existing
        self.requested = requested
        super().__init__(
            f"Message {uid} already sorted into {existing}, cannot add to {requested}"
        )


class SortResult:
    """
    单轮分拣结果

    目标邮箱路径 -> 邮件 UID 集合。每轮重新构建，
    保证一个 UID 最多只出现在一个目标邮箱中。
    """

    def __init__(self) -> None:
        self._buckets: Dict[str, Set[int]] = {}
        self._owners: Dict[int, str] = {}

    def add(self, mailbox: str, uid: int) -> None:
        """
        将邮件加入目标邮箱

        重复加入同一邮箱是幂等的。

        Raises:
            DuplicateMessageError: UID 已属于另一个邮箱
        """
        owner = self._owners.get(uid)
        if owner is not None and owner != mailbox:
            raise DuplicateMessageError(uid, owner, mailbox)
        self._owners[uid] = mailbox
        self._buckets.setdefault(mailbox, set()).add(uid)

    @property
    def mailboxes(self) -> FrozenSet[str]:
        """所有目标邮箱路径"""
        return frozenset(self._buckets)

    @property
    def message_count(self) -> int:
        """已分拣的邮件数量"""
        return len(self._owners)

    def items(self) -> Iterator[Tuple[str, FrozenSet[int]]]:
        """按邮箱名排序遍历 (邮箱, UID 集合)"""
        for mailbox in sorted(self._buckets):
            yield mailbox, frozenset(self._buckets[mailbox])

    def as_dict(self) -> Dict[str, Set[int]]:
        """转换为普通字典（副本）"""
        return {mailbox: set(uids) for mailbox, uids in self._buckets.items()}

    def __contains__(self, mailbox: object) -> bool:
        return mailbox in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __bool__(self) -> bool:
        return bool(self._buckets)

    def __repr__(self) -> str:
        return f"SortResult({self.as_dict()!r})"
