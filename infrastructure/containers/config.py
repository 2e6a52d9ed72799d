"""
配置容器（ConfigContainer）

持有已加载的 Settings 实例，供其他容器读取配置。
"""

from dependency_injector import containers, providers

from infrastructure.config.settings import Settings


class ConfigContainer(containers.DeclarativeContainer):
    """配置容器 - 管理应用配置"""

    # 由 bootstrap() 注入已加载的配置
    settings = providers.Dependency(instance_of=Settings)
