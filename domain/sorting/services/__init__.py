"""分拣领域服务模块"""

from domain.sorting.services.address_classifier import classify, mailbox_from_address
from domain.sorting.services.mailbox_hierarchy import MailboxHierarchy, hierarchy
from domain.sorting.services.mail_session import (
    MailSession,
    MailSessionError,
    ImapConnectionError,
    ImapAuthenticationError,
)

__all__ = [
    "classify",
    "mailbox_from_address",
    "MailboxHierarchy",
    "hierarchy",
    "MailSession",
    "MailSessionError",
    "ImapConnectionError",
    "ImapAuthenticationError",
]
