"""IMAP 配置值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class ImapConfig(BaseValueObject):
    """
    IMAP 会话配置值对象

    Attributes:
        server: IMAP 服务器地址
        port: IMAP 服务器端口，默认 993 (SSL/TLS)
        username: 登录用户名
        password: 登录密码
        mailbox: 被监听的邮箱，默认 INBOX
        use_ssl: 是否使用 SSL/TLS 加密，默认 True
        timeout: 普通命令的套接字超时（秒）
    """

    server: str
    username: str
    password: str
    port: int = 993
    mailbox: str = "INBOX"
    use_ssl: bool = True
    timeout: float = 30.0

    def validate(self) -> None:
        """验证 IMAP 配置的有效性"""
        if not self.server or not self.server.strip():
            raise InvalidValueObjectException(
                value_object_type="ImapConfig",
                value=self.server,
                reason="IMAP server cannot be empty"
            )

        if not 1 <= self.port <= 65535:
            raise InvalidValueObjectException(
                value_object_type="ImapConfig",
                value=self.port,
                reason=f"Invalid port number: {self.port}. Must be between 1 and 65535"
            )

        if not self.mailbox:
            raise InvalidValueObjectException(
                value_object_type="ImapConfig",
                value=self.mailbox,
                reason="Watched mailbox cannot be empty"
            )

    @property
    def connection_string(self) -> str:
        """返回连接字符串格式"""
        protocol = "imaps" if self.use_ssl else "imap"
        return f"{protocol}://{self.server}:{self.port}/{self.mailbox}"

    def __repr__(self) -> str:
        return (
            f"ImapConfig(server={self.server!r}, port={self.port}, "
            f"username={self.username!r}, mailbox={self.mailbox!r})"
        )
