"""分拣流程异常

这些异常都是"整轮"级别的错误：当前分拣失败，
同步循环收到后终止进程，不自动重试。
"""

from typing import Dict, Optional


class SortPassError(Exception):
    """分拣轮次失败

    Attributes:
        failures: 失败的邮箱路径 -> 原因
    """

    def __init__(self, message: str, failures: Optional[Dict[str, str]] = None):
        self.failures: Dict[str, str] = dict(failures or {})
        super().__init__(message)


class InboxScanError(SortPassError):
    """扫描收件箱失败（缺少 UID 或头部数据）"""


class MailboxProvisioningError(SortPassError):
    """创建或订阅目标邮箱失败"""


class RelocationError(SortPassError):
    """批量移动邮件失败"""
