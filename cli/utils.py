"""CLI utilities for confirmations and error exits."""

import logging

import typer

from app.exceptions import ConfigurationError
from app.remote.base import RemoteScheduleStore
from cli.context import CLIContext

logger = logging.getLogger(__name__)


def confirm_or_exit(prompt: str, force: bool = False) -> None:
    """Ask for confirmation, exiting cleanly if the user declines.

    Args:
        prompt: Question to show
        force: Skip the prompt and continue
    """
    if force:
        return
    if not typer.confirm(prompt, default=False):
        typer.echo("Cancelled.")
        raise typer.Exit(0)


def require_remote(ctx: CLIContext) -> RemoteScheduleStore:
    """Get the remote store or exit with the configuration error."""
    try:
        return ctx.remote_store
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        raise typer.Exit(1)
