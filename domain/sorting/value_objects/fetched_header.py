"""收取的邮件头部值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class FetchedHeader(BaseValueObject):
    """
    单封邮件的头部收取结果

    uid 或 header 为 None 表示服务器响应中缺少对应数据，
    由扫描器决定如何处理。

    Attributes:
        uid: 邮件 UID
        header: 头部原始字节（只包含请求的头部字段）
    """

    uid: Optional[int]
    header: Optional[bytes]
