"""Shared Rich console instance for consistent terminal output."""

from rich.console import Console

# Shared console instance used by all schedule renderers
console = Console()
