"""Display module for rendering schedule output.

This module provides renderers for various display contexts:
- TableRenderer: Schedule and schema tables
- DiffRenderer: Local vs remote diff visualization
- SyncRenderer: Push/pull progress and results
- StatsRenderer: Statistics display
- ValidationRenderer: Roster validation findings

It also provides:
- console: Shared Rich console instance
- Formatting functions for dates and names
"""

from cli.display.console import console
from cli.display.diff_renderer import DiffRenderer
from cli.display.formatters import (
    format_datetime,
    format_entry_summary,
    format_name,
    format_relative_time,
)
from cli.display.stats_renderer import StatsRenderer
from cli.display.sync_renderer import SyncRenderer
from cli.display.table_renderer import TableRenderer
from cli.display.validation_renderer import ValidationRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "TableRenderer",
    "DiffRenderer",
    "StatsRenderer",
    "SyncRenderer",
    "ValidationRenderer",
    # Formatters
    "format_datetime",
    "format_entry_summary",
    "format_name",
    "format_relative_time",
]
