"""Compare the local schedule with Notion."""

import logging

import typer
from typing_extensions import Annotated

from app.exceptions import RemoteStoreError, StorageError
from app.processing.reconciler import diff as diff_schedules
from app.processing.validator import validate_schedule
from cli.context import CLIContext, get_context
from cli.display.diff_renderer import DiffRenderer
from cli.display.validation_renderer import ValidationRenderer
from cli.utils import confirm_or_exit, require_remote

logger = logging.getLogger(__name__)


def check_local_schedule(ctx: CLIContext, force: bool = False) -> None:
    """Validate the local schedule, asking before continuing if it is invalid.

    Shared by diff and push so neither reconciles a schedule with unknown
    leaders or duplicate dates without the user agreeing to it.
    """
    try:
        roster = ctx.leader_store.load()
    except StorageError as e:
        logger.error(f"Could not load leaders: {e}")
        raise typer.Exit(1)

    report = validate_schedule(ctx.local_store.entries(), roster)
    if report.is_valid:
        return

    ValidationRenderer().render_report(report)
    confirm_or_exit("The local schedule has problems. Continue anyway?", force)


def diff(
    compact: Annotated[
        bool,
        typer.Option("--compact", "-c", help="Show compact output (counts only)"),
    ] = False,
    validate: Annotated[
        bool,
        typer.Option("--validate/--no-validate", help="Check leaders and hosts first"),
    ] = True,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Continue without asking when validation fails"),
    ] = False,
) -> None:
    """Compare the local schedule with Notion.

    Entries are matched by date. Shows entries that exist on only one
    side and entries whose leader or host differ, then suggests the
    command that would resolve them.
    """
    ctx = get_context()
    remote_store = require_remote(ctx)

    if validate:
        check_local_schedule(ctx, force)

    try:
        remote_entries = remote_store.query()
    except RemoteStoreError as e:
        logger.error(f"Could not fetch Notion schedule: {e}")
        raise typer.Exit(1)

    result = diff_schedules(ctx.local_store.entries(), remote_entries)

    renderer = DiffRenderer()
    if renderer.render_diff(result, compact=compact):
        renderer.render_suggestions(result)
