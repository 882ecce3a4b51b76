"""Manage entries in the local schedule."""

import logging

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from app.exceptions import ScheduleError
from app.models.schedule import ScheduleEntry
from cli.context import get_context
from cli.display.console import console
from cli.display.table_renderer import TableRenderer
from cli.utils import confirm_or_exit

logger = logging.getLogger(__name__)

schedule_app = typer.Typer(help="Manage entries in the local schedule.", no_args_is_help=True)


def _build_entry(**fields) -> ScheduleEntry:
    """Validate fields into an entry, exiting on invalid input."""
    try:
        return ScheduleEntry(**fields)
    except ValidationError as e:
        for err in e.errors():
            logger.error(f"Invalid {'.'.join(str(p) for p in err['loc'])}: {err['msg']}")
        raise typer.Exit(1)


@schedule_app.command("ls")
def ls(
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of entries to show"),
    ] = 20,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Show all entries (overrides --limit)"),
    ] = False,
) -> None:
    """List local schedule entries, newest first."""
    ctx = get_context()
    local_store = ctx.local_store
    schedule = local_store.load()

    entries = sorted(schedule.schedule, key=lambda e: e.date, reverse=True)
    truncated = not show_all and len(entries) > limit
    if truncated:
        entries = entries[:limit]

    TableRenderer().render_schedule(schedule, local_store.path, entries, truncated)


@schedule_app.command("add")
def add(
    date: Annotated[str, typer.Argument(help="Session date (YYYY-MM-DD)")],
    book: Annotated[str, typer.Argument(help="Book title, e.g. '第12期 Book'")],
    leader: Annotated[
        str | None,
        typer.Option("--leader", "-l", help="Leader name"),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", "-H", help="Host name"),
    ] = None,
    period: Annotated[
        int | None,
        typer.Option("--period", "-p", help="Period number (derived from the title if omitted)"),
    ] = None,
    replace: Annotated[
        bool,
        typer.Option("--replace", help="Replace an existing entry on the same date"),
    ] = False,
) -> None:
    """Add an entry to the local schedule."""
    ctx = get_context()
    entry = _build_entry(
        date=date, book_name=book, leader_name=leader, host_name=host, period=period
    )

    try:
        ctx.local_store.add(entry, replace=replace)
    except ScheduleError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Added {entry.date}")
    TableRenderer().render_entry(entry)


@schedule_app.command("edit")
def edit(
    date: Annotated[str, typer.Argument(help="Date of the entry to edit")],
    book: Annotated[
        str | None,
        typer.Option("--book", "-b", help="New book title"),
    ] = None,
    leader: Annotated[
        str | None,
        typer.Option("--leader", "-l", help="New leader name (empty string clears it)"),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", "-H", help="New host name (empty string clears it)"),
    ] = None,
    new_date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Move the entry to another date"),
    ] = None,
) -> None:
    """Edit fields of a local schedule entry."""
    ctx = get_context()
    local_store = ctx.local_store

    existing = local_store.get(date)
    if existing is None:
        logger.error(f"No schedule found for {date}")
        raise typer.Exit(1)

    changes = {
        "date": new_date,
        "book_name": book,
        "leader_name": leader,
        "host_name": host,
    }
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        typer.echo("Nothing to change.")
        return

    fields = existing.model_dump()
    fields.update(changes)
    if "book_name" in changes:
        # Re-derive the period from the new title
        fields["period"] = None
    entry = _build_entry(**fields)

    try:
        local_store.update(date, entry)
    except ScheduleError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Updated {date}")
    TableRenderer().render_entry(entry)


@schedule_app.command("rm")
def rm(
    date: Annotated[str, typer.Argument(help="Date of the entry to remove")],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Remove an entry from the local schedule."""
    ctx = get_context()
    local_store = ctx.local_store

    entry = local_store.get(date)
    if entry is None:
        logger.error(f"No schedule found for {date}")
        raise typer.Exit(1)

    TableRenderer().render_entry(entry)
    confirm_or_exit(f"Remove the entry for {date}?", force)

    local_store.delete(date)
    console.print(f"[bold green]✓[/bold green] Removed {date}")


@schedule_app.command("latest")
def latest() -> None:
    """Show the entry with the most recent date."""
    ctx = get_context()
    entry = ctx.local_store.latest()
    if entry is None:
        TableRenderer().render_empty("No schedule entries found")
        raise typer.Exit(1)

    console.print("Latest entry:")
    TableRenderer().render_entry(entry)
