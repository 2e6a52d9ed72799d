"""邮件分拣应用服务"""

from application.sorting.services.inbox_scanner import InboxScanner
from application.sorting.services.mailbox_reconciler import (
    MailboxReconciler,
    ReconciliationReport,
)
from application.sorting.services.relocation_executor import (
    RelocationExecutor,
    RelocationReport,
)
from application.sorting.services.mail_sort_service import MailSortService
from application.sorting.services.mail_sync_service import MailSyncService
from application.sorting.services.idle_mail_sync_service import IdleMailSyncService

__all__ = [
    "InboxScanner",
    "MailboxReconciler",
    "ReconciliationReport",
    "RelocationExecutor",
    "RelocationReport",
    "MailSortService",
    "MailSyncService",
    "IdleMailSyncService",
]
