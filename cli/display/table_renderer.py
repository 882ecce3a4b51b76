"""Table renderer for schedule entries and the remote schema."""

from pathlib import Path

from rich.table import Table

from app.models.schedule import Schedule, ScheduleEntry
from cli.display.console import console
from cli.display.formatters import format_datetime, format_name


class TableRenderer:
    """Render tables for schedule entries and remote properties.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_schedule(
        self,
        schedule: Schedule,
        path: Path,
        entries: list[ScheduleEntry] | None = None,
        truncated: bool = False,
    ) -> None:
        """Render a schedule as a table.

        Args:
            schedule: Loaded schedule (for header info).
            path: Schedule file path.
            entries: Entries to show (defaults to all entries).
            truncated: Whether the list was truncated.
        """
        entries = schedule.schedule if entries is None else entries
        if not entries:
            console.print("No schedule entries found")
            return

        console.print(
            f"Schedule at {path.resolve()} ({len(schedule.schedule)} entries, "
            f"updated {format_datetime(schedule.last_updated)}):"
        )
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("DATE", style="cyan")
        table.add_column("PERIOD", justify="right", style="dim")
        table.add_column("BOOK")
        table.add_column("LEADER")
        table.add_column("HOST", style="dim")

        for entry in entries:
            table.add_row(
                entry.date,
                str(entry.period) if entry.period is not None else "-",
                entry.book_name,
                format_name(entry.leader_name),
                format_name(entry.host_name),
            )

        console.print(table)

        if truncated:
            console.print()
            console.print(
                f"[dim]... (showing {len(entries)} of {len(schedule.schedule)} entries, "
                "use --all to see all)[/dim]"
            )

    def render_entry(self, entry: ScheduleEntry) -> None:
        """Render a single entry as key/value lines."""
        console.print(f"  Date:   [cyan]{entry.date}[/cyan]")
        console.print(f"  Book:   {entry.book_name}")
        if entry.period is not None:
            console.print(f"  Period: {entry.period}")
        console.print(f"  Leader: {format_name(entry.leader_name)}")
        console.print(f"  Host:   {format_name(entry.host_name)}")

    def render_property_types(self, property_types: dict[str, str], expected: dict[str, str]) -> None:
        """Render the remote schema, marking properties the sync depends on.

        Args:
            property_types: {property name: type} from the remote store.
            expected: {property name: entry field} used by the sync.
        """
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("PROPERTY", style="cyan")
        table.add_column("TYPE")
        table.add_column("FIELD", style="dim")

        for name, prop_type in sorted(property_types.items()):
            table.add_row(name, prop_type, expected.get(name, ""))

        console.print(table)

        missing = [name for name in expected if name not in property_types]
        if missing:
            console.print()
            console.print(
                f"[bold red]✗[/bold red] Missing properties: {', '.join(missing)}"
            )

    def render_empty(self, message: str) -> None:
        """Render an empty state message."""
        console.print(f"[dim]{message}[/dim]")
