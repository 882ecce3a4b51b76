"""Check the local schedule against the leader roster."""

import logging

import typer

from app.exceptions import StorageError
from app.processing.validator import validate_schedule
from cli.context import get_context
from cli.display.validation_renderer import ValidationRenderer

logger = logging.getLogger(__name__)


def validate() -> None:
    """Check the local schedule against the leader roster.

    Reports unknown leaders, hosts that are not flagged as hosts, and
    dates scheduled more than once. Exits with status 1 when invalid.
    """
    ctx = get_context()

    try:
        roster = ctx.leader_store.load()
    except StorageError as e:
        logger.error(f"Could not load leaders: {e}")
        raise typer.Exit(1)

    report = validate_schedule(ctx.local_store.entries(), roster)
    ValidationRenderer().render_report(report)

    if not report.is_valid:
        raise typer.Exit(1)
