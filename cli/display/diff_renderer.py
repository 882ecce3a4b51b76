"""Diff renderer for local vs remote schedule comparison."""

from app.models.diff import Conflict, DiffResult
from app.models.schedule import ScheduleEntry
from cli.display.console import console
from cli.display.formatters import format_entry_summary, format_name


class DiffRenderer:
    """Render schedule diff output.

    Displays local-only, remote-only and conflicting entries with
    color-coded output, followed by suggested actions.
    """

    def __init__(self, local_label: str = "local", remote_label: str = "Notion"):
        self.local_label = local_label
        self.remote_label = remote_label

    def render_diff(self, result: DiffResult, compact: bool = False) -> bool:
        """Render a diff.

        Args:
            result: Output of the reconciler.
            compact: If True, only show counts.

        Returns:
            True if there were differences, False otherwise.
        """
        if result.is_empty:
            self.render_no_differences()
            return False

        console.print(f"\nChanges ({self.local_label} ↔ {self.remote_label}):")
        console.print()

        if compact:
            self._render_counts(result)
            return True

        self._render_local_only(result.local_only)
        self._render_remote_only(result.remote_only)
        self._render_conflicts(result.conflicts)
        self._render_summary_line(result)
        return True

    def render_no_differences(self) -> None:
        """Render message when both stores agree."""
        console.print(
            f"[bold green]✓[/bold green] {self.local_label} and {self.remote_label} schedules match"
        )

    def render_suggestions(self, result: DiffResult) -> None:
        """Render the commands that would resolve the diff."""
        if result.is_empty:
            return

        console.print("\n[bold]Suggested actions:[/bold]")
        if result.local_only:
            console.print(
                f"  {len(result.local_only)} entry(ies) to add to {self.remote_label}: "
                "[cyan]bookclub-sync push[/cyan]"
            )
        if result.conflicts:
            console.print(
                f"  {len(result.conflicts)} conflict(s): "
                f"[cyan]bookclub-sync push[/cyan] keeps {self.local_label} assignments, "
                f"[cyan]bookclub-sync fetch[/cyan] keeps {self.remote_label}"
            )
        if result.remote_only:
            console.print(
                f"  {len(result.remote_only)} entry(ies) only in {self.remote_label}: "
                "[cyan]bookclub-sync fetch[/cyan]"
            )

    def _render_counts(self, result: DiffResult) -> None:
        console.print(f"  {self.local_label} only:  {len(result.local_only):>4} entry(ies)")
        console.print(f"  {self.remote_label} only: {len(result.remote_only):>4} entry(ies)")
        console.print(f"  Conflicts:   {len(result.conflicts):>4} entry(ies)")
        console.print("  ─────────────────")
        console.print(f"  Total:       {result.total:>4} difference(s)")

    def _render_local_only(self, entries: list[ScheduleEntry]) -> None:
        if not entries:
            return

        console.print(f"[bold green]Only in {self.local_label}:[/bold green]")
        for entry in entries:
            console.print(f"[green]  + {format_entry_summary(entry)}[/green]")
        console.print()

    def _render_remote_only(self, entries: list[ScheduleEntry]) -> None:
        if not entries:
            return

        console.print(f"[bold red]Only in {self.remote_label}:[/bold red]")
        for entry in entries:
            console.print(f"[red]  - {format_entry_summary(entry)}[/red]")
        console.print()

    def _render_conflicts(self, conflicts: list[Conflict]) -> None:
        if not conflicts:
            return

        console.print("[bold yellow]Conflicting assignments:[/bold yellow]")
        for conflict in conflicts:
            console.print(f"[yellow]  ~ {conflict.date} 《{conflict.local.book_name}》[/yellow]")
            for field in conflict.changed_fields():
                attr = "leader_name" if field == "leaderName" else "host_name"
                local_value = format_name(getattr(conflict.local, attr))
                remote_value = format_name(getattr(conflict.remote, attr))
                console.print(
                    f"      {field}: {local_value} ({self.local_label}) → "
                    f"{remote_value} ({self.remote_label})"
                )
        console.print()

    def _render_summary_line(self, result: DiffResult) -> None:
        summary_parts = []
        if result.local_only:
            summary_parts.append(f"[green]+{len(result.local_only)}[/green]")
        if result.remote_only:
            summary_parts.append(f"[red]-{len(result.remote_only)}[/red]")
        if result.conflicts:
            summary_parts.append(f"[yellow]~{len(result.conflicts)}[/yellow]")
        console.print(f"Summary: {', '.join(summary_parts)}")
