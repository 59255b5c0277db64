"""Shared Rich console instances for consistent terminal output."""

from rich.console import Console

# Shared console instance used by all display renderers
console = Console()

# Status output goes to stderr so JSON written to stdout stays clean
err_console = Console(stderr=True)
