"""CLI commands package."""

from cli.commands.month import month_command
from cli.commands.save import save_command
from cli.commands.serve import serve_command
from cli.commands.show import show_command
from cli.commands.summary import summary_command
from cli.commands.users import users_command

__all__ = [
    "month_command",
    "save_command",
    "serve_command",
    "show_command",
    "summary_command",
    "users_command",
]
