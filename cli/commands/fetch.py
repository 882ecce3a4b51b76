"""Overwrite the local schedule with the Notion schedule."""

import logging

import typer
from typing_extensions import Annotated

from app.exceptions import RemoteStoreError, StorageError
from app.processing.analysis import analyze_schedule
from cli.context import get_context
from cli.display.stats_renderer import StatsRenderer
from cli.display.sync_renderer import SyncRenderer
from cli.utils import confirm_or_exit, require_remote

logger = logging.getLogger(__name__)


def fetch(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
    show_stats: Annotated[
        bool,
        typer.Option("--stats/--no-stats", help="Show statistics of the fetched schedule"),
    ] = True,
) -> None:
    """Overwrite the local schedule with the Notion schedule.

    Local entries that do not exist in Notion are dropped. Run 'diff'
    first to see what will change.
    """
    ctx = get_context()
    require_remote(ctx)
    local_store = ctx.local_store
    renderer = SyncRenderer()

    local_count = len(local_store.entries())
    renderer.render_header("Fetching from Notion")
    typer.echo(f"\nLocal schedule: {local_store.path} ({local_count} entries)")
    confirm_or_exit("Overwrite the local schedule with Notion?", force)

    try:
        schedule = ctx.synchronizer.pull_remote_to_local()
    except (RemoteStoreError, StorageError) as e:
        logger.error(f"Fetch failed: {e}")
        raise typer.Exit(1)

    renderer.render_pulled(schedule, local_store.path)

    if show_stats:
        StatsRenderer().render_statistics(analyze_schedule(schedule.schedule), "Notion")
