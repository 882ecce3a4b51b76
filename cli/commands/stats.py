"""Analyze the schedule: intervals, weekdays and leader rotation."""

import logging

import typer
from typing_extensions import Annotated

from app.exceptions import RemoteStoreError
from app.processing.analysis import analyze_schedule
from cli.context import get_context
from cli.display.stats_renderer import StatsRenderer
from cli.utils import require_remote

logger = logging.getLogger(__name__)


def stats(
    remote: Annotated[
        bool,
        typer.Option("--remote", "-r", help="Analyze the Notion schedule instead"),
    ] = False,
) -> None:
    """Analyze the schedule: intervals, weekdays and leader rotation."""
    ctx = get_context()

    if remote:
        try:
            entries = require_remote(ctx).query()
        except RemoteStoreError as e:
            logger.error(f"Could not fetch Notion schedule: {e}")
            raise typer.Exit(1)
        title = "Notion"
    else:
        entries = ctx.local_store.entries()
        title = "local"

    StatsRenderer().render_statistics(analyze_schedule(entries), title)
