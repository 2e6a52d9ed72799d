"""收件地址分类规则"""

from email.errors import HeaderParseError, InvalidHeaderDefect
from email.headerregistry import HeaderRegistry
from typing import Optional

# 邮箱层级分隔符
HIERARCHY_SEPARATOR = "."
# 地址内的 "." 替换为此字符，避免产生多余层级
DOT_REPLACEMENT = "_"

_header_factory = HeaderRegistry()

# 解析器会修复这些缺陷，修复结果仍然可以作为地址使用
_TOLERATED_DEFECTS = frozenset({
    "addr-spec local part with no domain",
    "encoded word inside quoted string",
})


def _mailbox_path(local: str, domain: str) -> str:
    """lower(domain + "." + local)，两部分内的 "." 替换为 "_" """
    return (
        domain.replace(HIERARCHY_SEPARATOR, DOT_REPLACEMENT)
        + HIERARCHY_SEPARATOR
        + local.replace(HIERARCHY_SEPARATOR, DOT_REPLACEMENT)
    ).lower()


def _is_malformed(header) -> bool:
    """头部是否包含解析器只能猜测修复的语法错误"""
    return any(
        isinstance(defect, InvalidHeaderDefect) and str(defect) not in _TOLERATED_DEFECTS
        for defect in header.defects
    )


def mailbox_from_address(address: str) -> str:
    """
    将邮件地址转换为邮箱路径

    规则: lower(域名中 "." 替换为 "_" + "." + 用户名中 "." 替换为 "_")

    没有 "@" 的地址视为只有用户名，结果以 "." 开头（首段为空）。

    Args:
        address: local@domain 形式的地址

    Returns:
        邮箱路径，例如 "auth.service@example.com" -> "example_com.auth_service"
    """
    local, sep, domain = address.partition("@")
    if not sep:
        domain = ""
    return _mailbox_path(local, domain)


def classify(header_value: Optional[str], field_name: str = "To") -> Optional[str]:
    """
    根据收件头部值计算目标邮箱路径

    仅使用地址列表中的第一个地址。以下情况返回 None（跳过，不是错误）：
    - 头部不存在
    - 解析失败，或头部存在语法错误（缺少域名除外）
    - 地址列表为空
    - 第一项是地址组（group）
    - 第一个地址的用户名为空

    Args:
        header_value: 收件头部原始值（可能包含 RFC 2047 编码）
        field_name: 头部名称，决定使用的解析语法

    Returns:
        邮箱路径，或 None 表示本轮跳过该邮件
    """
    if header_value is None:
        return None

    try:
        header = _header_factory(field_name, header_value)
        groups = header.groups
    except (HeaderParseError, AttributeError, IndexError, TypeError, ValueError):
        return None

    if not groups or _is_malformed(header):
        return None

    first = groups[0]
    # display_name 不为 None 表示这是一个地址组
    if first.display_name is not None or not first.addresses:
        return None

    # username 是去掉引号后的用户名，addr_spec 会重新加上引号
    address = first.addresses[0]
    if not address.username:
        return None

    return _mailbox_path(address.username, address.domain)
