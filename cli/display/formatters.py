"""Pure formatting functions for display output."""

from datetime import datetime, timezone

from app.constants import UNSPECIFIED
from app.models.schedule import ScheduleEntry
from app.utils import is_unspecified


def format_relative_time(dt: datetime) -> str:
    """Format datetime as relative time.

    Args:
        dt: Datetime to format.

    Returns:
        Formatted time string (e.g., "2h ago", "1w ago", "3mo ago", "1y ago").
    """
    if dt.tzinfo is None:
        # If no timezone, assume UTC
        dt = dt.replace(tzinfo=timezone.utc)

    time_diff = datetime.now(timezone.utc) - dt

    if time_diff.days < 0:
        return "just now"
    if time_diff.days == 0:
        if time_diff.seconds < 60:
            return "just now"
        elif time_diff.seconds < 3600:
            return f"{time_diff.seconds // 60}m ago"
        return f"{time_diff.seconds // 3600}h ago"
    elif time_diff.days < 7:
        return f"{time_diff.days}d ago"
    elif time_diff.days < 30:
        return f"{time_diff.days // 7}w ago"
    elif time_diff.days < 365:
        return f"{time_diff.days // 30}mo ago"
    return f"{time_diff.days // 365}y ago"


def format_datetime(dt: datetime | None, include_relative: bool = True) -> str:
    """Format datetime with optional relative time.

    Returns:
        Formatted datetime string, or "N/A" if dt is None.
    """
    if dt is None:
        return "N/A"
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    date_str = dt.strftime("%Y-%m-%d %H:%M:%S")
    if include_relative:
        return f"{date_str} ({format_relative_time(dt)})"
    return date_str


def format_name(name: str | None) -> str:
    """Format a leader or host name, showing absent values as the placeholder."""
    if is_unspecified(name):
        return UNSPECIFIED
    return name.strip()


def format_entry_summary(entry: ScheduleEntry) -> str:
    """Format an entry on one line.

    Returns:
        String like "2024-03-02 《Book》 leader: A, host: B".
    """
    return (
        f"{entry.date} 《{entry.book_name}》 "
        f"leader: {format_name(entry.leader_name)}, host: {format_name(entry.host_name)}"
    )
