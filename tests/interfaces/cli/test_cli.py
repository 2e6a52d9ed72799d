"""命令行入口测试"""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from application.sorting.exceptions import RelocationError
from domain.sorting.services.mail_session import ImapConnectionError, MailSessionError
from interfaces.cli.main import EXIT_CONFIG, EXIT_FATAL, EXIT_INTERRUPTED, cli

CONFIG_TOML = """
[imap]
server = "imap.example.com"
email = "me@example.com"
password = "secret"

[pushover]
user = "user-key"
token = "app-token"
"""


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "mail_sorter.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("interfaces.cli.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def boot():
    with patch("interfaces.cli.main.bootstrap") as mock_bootstrap:
        container = MagicMock()
        mock_bootstrap.return_value = container
        yield container


class TestCli:
    """命令行测试"""

    def test_missing_config_file(self, tmp_path):
        """测试配置文件不存在时以配置错误退出"""
        result = CliRunner().invoke(cli, ["--config", str(tmp_path / "missing.toml")])

        assert result.exit_code == EXIT_CONFIG
        assert "Configuration error" in result.output

    def test_invalid_config(self, config_file):
        """测试配置无效时以配置错误退出"""
        result = CliRunner().invoke(cli, ["--config", config_file, "--port", "0"])

        assert result.exit_code == EXIT_CONFIG

    def test_connect_failure(self, config_file, boot):
        """测试无法连接时以致命错误退出"""
        boot.infra.mail_session.return_value.connect.side_effect = ImapConnectionError(
            "imap.example.com", 993, "connection refused"
        )

        result = CliRunner().invoke(cli, ["--config", config_file])

        assert result.exit_code == EXIT_FATAL
        boot.app.sync_service.assert_not_called()

    def test_sync_failure(self, config_file, boot):
        """测试同步循环失败时以致命错误退出"""
        boot.app.sync_service.return_value.run.side_effect = RelocationError("move failed")

        result = CliRunner().invoke(cli, ["--config", config_file])

        assert result.exit_code == EXIT_FATAL
        boot.infra.mail_session.return_value.connect.assert_called_once()

    def test_session_failure_during_sync(self, config_file, boot):
        """测试 IDLE 期间连接断开"""
        boot.app.sync_service.return_value.run.side_effect = MailSessionError("IDLE failed")

        result = CliRunner().invoke(cli, ["--config", config_file])

        assert result.exit_code == EXIT_FATAL

    def test_interrupt(self, config_file, boot):
        """测试 Ctrl+C 退出"""
        boot.app.sync_service.return_value.run.side_effect = KeyboardInterrupt()

        result = CliRunner().invoke(cli, ["--config", config_file])

        assert result.exit_code == EXIT_INTERRUPTED

    def test_command_line_overrides(self, config_file, no_logging_setup):
        """测试命令行参数覆盖配置文件"""
        with patch("interfaces.cli.main.bootstrap") as mock_bootstrap:
            mock_bootstrap.return_value.app.sync_service.return_value.run.side_effect = (
                KeyboardInterrupt()
            )

            CliRunner().invoke(
                cli,
                ["--config", config_file, "--server", "imap.cli.example", "--log-level", "DEBUG"],
            )

        settings = mock_bootstrap.call_args.args[0]
        assert settings.imap.server == "imap.cli.example"
        assert settings.imap.email == "me@example.com"
        no_logging_setup.assert_called_once_with("DEBUG", None)

