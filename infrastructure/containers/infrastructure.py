"""
基础设施容器（InfraContainer）

管理所有基础设施组件：IMAP 会话、通知客户端。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.notification.pushover.pushover_client import PushoverClient
from infrastructure.sorting.services.imap_mail_session_impl import ImapMailSessionImpl


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 邮件会话 ============

    # IMAP 会话（单例，整个进程只有一个长连接）
    mail_session = providers.Singleton(
        ImapMailSessionImpl,
        config=config.settings.provided.imap_config,
    )

    # ============ 通知 ============

    # Pushover 通知客户端（单例，无状态，可被多个通知线程共享）
    notification_client = providers.Singleton(
        PushoverClient,
        api_url=config.settings.provided.pushover.api_url,
        timeout=config.settings.provided.pushover.timeout,
    )
