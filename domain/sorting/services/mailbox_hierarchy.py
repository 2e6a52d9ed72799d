"""邮箱层级解析"""

from typing import Iterator

from domain.sorting.services.address_classifier import HIERARCHY_SEPARATOR


class MailboxHierarchy:
    """
    邮箱路径的祖先链

    依次产生路径截断到第 1 段、第 2 段……第 n 段的结果，最后一项是完整路径。
    每次迭代都重新开始，可以多次遍历。

    Example:
        >>> list(MailboxHierarchy("foo.bar.baz"))
        ['foo', 'foo.bar', 'foo.bar.baz']
    """

    def __init__(self, path: str):
        self._path = path

    def __iter__(self) -> Iterator[str]:
        start = 0
        while True:
            index = self._path.find(HIERARCHY_SEPARATOR, start)
            if index == -1:
                yield self._path
                return
            yield self._path[:index]
            start = index + 1

    def __repr__(self) -> str:
        return f"MailboxHierarchy({self._path!r})"


def hierarchy(path: str) -> MailboxHierarchy:
    """返回 path 的祖先链（空字符串只产生它本身）"""
    return MailboxHierarchy(path)
