"""Sync renderer for push and pull operations."""

from app.models.schedule import Schedule
from app.models.sync import SyncReport
from cli.display.console import console


class SyncRenderer:
    """Render sync operation output.

    Provides output for push and pull operations including:
    - Header with the target store
    - Per-entry results
    - Success/failure totals
    """

    def render_header(self, title: str) -> None:
        """Render operation header.

        Args:
            title: Header text, e.g. "Pushing to Notion".
        """
        console.print()
        console.print("━" * 40)
        console.print(f"[bold]  {title}[/bold]")
        console.print("━" * 40)

    def render_report(self, report: SyncReport) -> None:
        """Render per-entry results and totals.

        Args:
            report: Report returned by the synchronizer.
        """
        console.print()
        for result in report.results:
            if result.status == "created":
                console.print(f"  [green]+[/green] {result.date} created")
            elif result.status == "updated":
                console.print(f"  [yellow]~[/yellow] {result.date} updated")
            else:
                console.print(f"  [red]✗[/red] {result.date} failed: {result.message}")

        console.print(
            f"\n{report.created} created, {report.updated} updated, {report.failed} failed"
        )
        if report.failed:
            console.print(
                f"[bold red]✗[/bold red] {report.failed} entry(ies) were not synced; "
                "fix the errors above and run push again"
            )
        else:
            console.print("[bold green]✓[/bold green] Push completed")

        if report.refreshed_local:
            console.print("  Local schedule refreshed from remote")

    def render_pulled(self, schedule: Schedule, path) -> None:
        """Render result of overwriting the local file."""
        console.print(
            f"\n[bold green]✓[/bold green] Saved {len(schedule.schedule)} entries to {path}"
        )
