"""Display helpers for CLI output."""

from jcal_cli.display.console import console, err_console
from jcal_cli.display.renderers import render_conversion_summary, render_data_types

__all__ = [
    "console",
    "err_console",
    "render_conversion_summary",
    "render_data_types",
]
