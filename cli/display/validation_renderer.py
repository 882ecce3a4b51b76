"""Validation renderer for schedule checks against the leader roster."""

from app.models.validation import ValidationReport
from cli.display.console import console
from cli.display.formatters import format_entry_summary


class ValidationRenderer:
    """Render validation findings."""

    def render_report(self, report: ValidationReport) -> None:
        """Render a validation report.

        Args:
            report: Output of validate_schedule.
        """
        if report.is_valid:
            console.print("[bold green]✓[/bold green] Schedule is valid")
            return

        console.print("\n[bold red]Schedule validation failed:[/bold red]")

        if report.invalid_leaders:
            console.print("\n[bold]Unknown leaders:[/bold]")
            for entry in report.invalid_leaders:
                console.print(f"  [red]✗[/red] {format_entry_summary(entry)}")

        if report.invalid_hosts:
            console.print("\n[bold]Unknown or non-host hosts:[/bold]")
            for entry in report.invalid_hosts:
                console.print(f"  [red]✗[/red] {format_entry_summary(entry)}")

        if report.duplicate_dates:
            console.print("\n[bold]Duplicate dates:[/bold]")
            for date, entries in report.duplicate_dates.items():
                books = ", ".join(f"《{e.book_name}》" for e in entries)
                console.print(f"  [yellow]![/yellow] {date}: {books}")

        console.print()
