"""Stats renderer for schedule statistics display."""

from app.processing.analysis import ScheduleStatistics
from cli.display.console import console


class StatsRenderer:
    """Render schedule statistics.

    Displays entry counts, session intervals, weekday and leader
    distributions with bar charts.
    """

    def render_statistics(self, stats_data: ScheduleStatistics, title: str) -> None:
        """Render full statistics display.

        Args:
            stats_data: ScheduleStatistics object with computed stats.
            title: Header label (e.g. "local" or "Notion").
        """
        self._render_header(title)
        self._render_overview(stats_data)
        self._render_entries_by_year(stats_data)
        self._render_distribution("Sessions by Weekday", stats_data.entries_by_weekday)
        self._render_distribution("Sessions by Leader", stats_data.entries_by_leader)
        console.print()  # trailing newline

    def _render_header(self, title: str) -> None:
        console.print()
        console.print("━" * 50)
        console.print(f"[bold]  Statistics: {title}[/bold]")
        console.print("━" * 50)

    def _render_overview(self, stats_data: ScheduleStatistics) -> None:
        console.print("\n[bold]Overview:[/bold]")
        console.print(f"  Entries: {stats_data.total_entries:,}")
        if stats_data.date_range:
            console.print(f"  Date range: {stats_data.date_range}")
        if stats_data.average_interval_days is not None:
            console.print(
                f"  Average interval: {stats_data.average_interval_days:.1f} days"
            )
        console.print(f"  Upcoming: {stats_data.upcoming}")
        if stats_data.upcoming_without_leader:
            console.print(
                f"  [yellow]Upcoming without leader: "
                f"{stats_data.upcoming_without_leader}[/yellow]"
            )

    def _render_entries_by_year(self, stats_data: ScheduleStatistics) -> None:
        """Render entries by year section (only if multi-year)."""
        if len(stats_data.entries_by_year) <= 1:
            return

        console.print("\n[bold]Entries by Year:[/bold]")
        for year, count in stats_data.entries_by_year.items():
            console.print(f"  {year}: {count:,}")

    def _render_distribution(self, title: str, counts: dict[str, int]) -> None:
        if not counts:
            return

        console.print(f"\n[bold]{title}:[/bold]")
        width = max(len(k) for k in counts)
        peak = max(counts.values())
        for key, count in counts.items():
            # Bars scaled to 20 cells at the peak
            solid = "█" * max(1, round(count / peak * 20))
            console.print(f"  {key:<{width}}  [cyan]{solid}[/cyan] {count}")
