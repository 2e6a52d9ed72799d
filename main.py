"""
Mail Sorter - 按收件地址分拣邮件

运行：
    uv run python main.py --config mail_sorter.toml

配置示例见 mail_sorter.example.toml
"""

from interfaces.cli.main import main


if __name__ == "__main__":
    main()
