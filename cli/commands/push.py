"""Push local schedule changes to Notion."""

import logging

import typer
from typing_extensions import Annotated

from app.exceptions import RemoteStoreError, StorageError
from cli.commands.diff import check_local_schedule
from cli.context import get_context
from cli.display.diff_renderer import DiffRenderer
from cli.display.sync_renderer import SyncRenderer
from cli.utils import confirm_or_exit, require_remote

logger = logging.getLogger(__name__)


def push(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompts"),
    ] = False,
    refresh: Annotated[
        bool,
        typer.Option(
            "--refresh",
            "-r",
            help="Fetch Notion afterwards and overwrite the local schedule",
        ),
    ] = False,
    validate: Annotated[
        bool,
        typer.Option("--validate/--no-validate", help="Check leaders and hosts first"),
    ] = True,
) -> None:
    """Push local schedule changes to Notion.

    Creates Notion pages for entries that exist only locally and
    overwrites the leader and host of conflicting entries. Entries that
    exist only in Notion are left alone.
    """
    ctx = get_context()
    require_remote(ctx)
    synchronizer = ctx.synchronizer
    renderer = SyncRenderer()

    if validate:
        check_local_schedule(ctx, force)

    try:
        result = synchronizer.compute_diff()
    except RemoteStoreError as e:
        logger.error(f"Could not fetch Notion schedule: {e}")
        raise typer.Exit(1)

    pending = len(result.local_only) + len(result.conflicts)
    if pending == 0:
        typer.echo("Nothing to push.")
        if result.remote_only:
            typer.echo(
                f"  {len(result.remote_only)} entry(ies) exist only in Notion; "
                "run 'bookclub-sync fetch' to pull them."
            )
        return

    DiffRenderer().render_diff(result.model_copy(update={"remote_only": []}))
    confirm_or_exit(f"Push {pending} change(s) to Notion?", force)

    renderer.render_header("Pushing to Notion")
    try:
        report = synchronizer.push_local_to_remote(result, refresh_local=refresh)
    except (RemoteStoreError, StorageError) as e:
        # Only the refresh step can raise; per-entry failures are in the report
        logger.error(f"Refreshing local schedule failed: {e}")
        raise typer.Exit(1)

    renderer.render_report(report)
    if report.failed:
        raise typer.Exit(1)
