"""Typer application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    diff,
    fetch,
    fields,
    push,
    schedule_app,
    serve,
    stats,
    validate,
)
from cli.context import CLIContext, set_context

app = typer.Typer(
    name="bookclub-sync",
    help="Keep the book club schedule in sync between a local file and Notion.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info-level log messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Keep the book club schedule in sync between a local file and Notion."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command()(fetch)
app.command()(diff)
app.command()(push)
app.command()(validate)
app.command()(fields)
app.command()(stats)
app.command()(serve)
app.add_typer(schedule_app, name="schedule")
