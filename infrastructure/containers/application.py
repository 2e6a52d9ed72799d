"""
应用容器（AppContainer）

管理应用层组件：扫描、协调、移动、单轮分拣、通知、同步循环。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.notification.services.sort_notification_service import (
    SortNotificationService,
)
from application.sorting.services.idle_mail_sync_service import IdleMailSyncService
from application.sorting.services.inbox_scanner import InboxScanner
from application.sorting.services.mail_sort_service import MailSortService
from application.sorting.services.mailbox_reconciler import MailboxReconciler
from application.sorting.services.relocation_executor import RelocationExecutor


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 分拣流水线 ============

    inbox_scanner = providers.Factory(
        InboxScanner,
        header_field=config.settings.provided.imap.recipient_header,
        watched_mailbox=config.settings.provided.imap.mailbox,
    )

    mailbox_reconciler = providers.Factory(MailboxReconciler)

    relocation_executor = providers.Factory(RelocationExecutor)

    sort_service = providers.Factory(
        MailSortService,
        session=infra.mail_session,
        scanner=inbox_scanner,
        reconciler=mailbox_reconciler,
        relocator=relocation_executor,
    )

    # ============ 通知 ============

    notifier = providers.Singleton(
        SortNotificationService,
        client=infra.notification_client,
        config=config.settings.provided.notification_config,
    )

    # ============ 同步循环 ============

    # 同步服务（单例，独占邮件会话）
    sync_service = providers.Singleton(
        IdleMailSyncService,
        session=infra.mail_session,
        sort_service=sort_service,
        notifier=notifier,
        idle_timeout=config.settings.provided.imap.idle_timeout,
    )
