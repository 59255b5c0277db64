"""CLI commands package."""

from jcal_cli.commands.convert import convert_command
from jcal_cli.commands.types import types_command

__all__ = [
    "convert_command",
    "types_command",
]
