"""命令行接口"""

from interfaces.cli.main import cli

__all__ = ["cli"]
