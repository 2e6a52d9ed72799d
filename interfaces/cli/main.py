"""
命令行入口

运行：
    mail-sorter --config mail_sorter.toml

或：
    uv run python main.py --config mail_sorter.toml
"""

import sys
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from common.logging import configure_logging, get_logger
from domain.sorting.services.mail_session import MailSessionError
from application.sorting.exceptions import SortPassError
from infrastructure.config.settings import load_settings
from infrastructure.containers import bootstrap

EXIT_FATAL = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130

logger = get_logger(__name__)


def _imap_overrides(
    server: Optional[str],
    port: Optional[int],
    email: Optional[str],
    password: Optional[str],
) -> Dict[str, Any]:
    """把命令行参数转换为 imap 配置覆盖项（忽略未提供的参数）"""
    values = {"server": server, "port": port, "email": email, "password": password}
    return {key: value for key, value in values.items() if value is not None}


@click.command(
    name="mail-sorter",
    help="Sort emails into mailboxes based on recipient addresses.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Path to the TOML config file.",
)
@click.option("--server", default=None, help="IMAP server host.")
@click.option("--port", type=int, default=None, help="IMAP server port.")
@click.option("--email", default=None, help="IMAP login.")
@click.option(
    "--password",
    default=None,
    envvar="MAIL_SORTER_PASSWORD",
    help="IMAP password (or MAIL_SORTER_PASSWORD).",
)
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, ...).")
def cli(
    config_file: Optional[str],
    server: Optional[str],
    port: Optional[int],
    email: Optional[str],
    password: Optional[str],
    log_level: Optional[str],
) -> None:
    """运行邮件分拣，直到发生致命错误"""
    overrides: Dict[str, Any] = {}
    imap = _imap_overrides(server, port, email, password)
    if imap:
        overrides["imap"] = imap
    if log_level:
        overrides["log_level"] = log_level

    try:
        settings = load_settings(config_file, **overrides)
        configure_logging(settings.log_level, settings.log_file or None)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(EXIT_CONFIG)

    container = bootstrap(settings)
    session = container.infra.mail_session()

    try:
        session.connect()
    except MailSessionError as e:
        logger.error(f"Could not open mail session: {e}")
        sys.exit(EXIT_FATAL)

    sync_service = container.app.sync_service()
    try:
        sync_service.run()
    except (MailSessionError, SortPassError) as e:
        logger.error(f"Exiting after fatal error: {e}")
        sys.exit(EXIT_FATAL)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(EXIT_INTERRUPTED)

    # run() 只会以异常结束
    sys.exit(EXIT_FATAL)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
