"""
依赖注入容器

使用示例：
    from infrastructure.config.settings import load_settings
    from infrastructure.containers import bootstrap

    boot = bootstrap(load_settings("mail_sorter.toml"))
    boot.infra.mail_session().connect()
    boot.app.sync_service().run()
"""

from dataclasses import dataclass

from infrastructure.config.settings import Settings
from .application import AppContainer
from .config import ConfigContainer
from .infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已装配的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer


def bootstrap(settings: Settings) -> Bootstrap:
    """
    装配所有容器

    Args:
        settings: 已加载的配置

    Returns:
        Bootstrap 实例
    """
    config = ConfigContainer(settings=settings)
    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)
    return Bootstrap(config=config, infra=infra, app=app)


__all__ = ["AppContainer", "Bootstrap", "ConfigContainer", "InfraContainer", "bootstrap"]
