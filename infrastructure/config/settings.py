"""
应用配置管理

使用 pydantic-settings 管理配置文件、环境变量和 .env 文件

配置文件为 TOML 格式：

    [imap]
    server = "imap.example.com"
    port = 993
    email = "me@example.com"
    password = "secret"

    [pushover]
    user = "user-key"
    token = "app-token"
    mailboxes = ["example_com.alerts"]

优先级：初始化参数（命令行） > 环境变量（IMAP__SERVER 等） > .env > TOML 文件
"""

from pathlib import Path
from typing import Any, FrozenSet, Optional, Tuple, Type, Union

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from domain.notification.value_objects.notification_config import NotificationConfig
from domain.sorting.value_objects.imap_config import ImapConfig


class ImapSettings(BaseModel):
    """IMAP 连接配置"""

    server: str
    port: int = Field(default=993, ge=1, le=65535)
    email: str
    password: SecretStr
    use_ssl: bool = True
    # ========== 分拣行为 ==========
    mailbox: str = "INBOX"
    recipient_header: str = "To"
    idle_timeout: float = Field(default=300.0, gt=0)
    timeout: float = Field(default=30.0, gt=0)


class PushoverSettings(BaseModel):
    """Pushover 通知配置"""

    user: str
    token: SecretStr
    mailboxes: FrozenSet[str] = frozenset()
    api_url: str = "https://api.pushover.net/1/messages.json"
    timeout: float = Field(default=10.0, gt=0)


class Settings(BaseSettings):
    """
    应用配置类

    自动从 TOML 配置文件、环境变量和 .env 文件读取配置
    """

    # ========== 应用 ==========
    app_name: str = "mail-sorter"

    # ========== 连接与通知 ==========
    imap: ImapSettings
    pushover: PushoverSettings

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
        toml_file="mail_sorter.toml",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def imap_config(self) -> ImapConfig:
        """IMAP 会话配置值对象"""
        return ImapConfig(
            server=self.imap.server,
            port=self.imap.port,
            username=self.imap.email,
            password=self.imap.password.get_secret_value(),
            mailbox=self.imap.mailbox,
            use_ssl=self.imap.use_ssl,
            timeout=self.imap.timeout,
        )

    @property
    def notification_config(self) -> NotificationConfig:
        """通知配置值对象（不可变）"""
        return NotificationConfig(
            user=self.pushover.user,
            token=self.pushover.token.get_secret_value(),
            mailboxes=self.pushover.mailboxes,
        )


def load_settings(
    config_file: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> Settings:
    """
    加载配置

    Args:
        config_file: TOML 配置文件路径，为空时使用默认的 mail_sorter.toml（不存在则忽略）
        **overrides: 最高优先级的配置项，例如 imap={"server": "..."}

    Returns:
        Settings 实例

    Raises:
        FileNotFoundError: 指定的配置文件不存在
        pydantic.ValidationError: 配置无效
    """
    if config_file is None:
        return Settings(**overrides)

    path = Path(config_file)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    class FileSettings(Settings):
        model_config = SettingsConfigDict(toml_file=path)

    return FileSettings(**overrides)
