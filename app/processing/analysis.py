"""Schedule statistics."""

from collections import Counter
from datetime import date
from typing import Iterable

from pydantic import BaseModel

from app.models.schedule import ScheduleEntry
from app.utils import is_unspecified, parse_schedule_date

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class ScheduleStatistics(BaseModel):
    """Detailed statistics for a schedule."""

    total_entries: int
    date_range: str | None
    average_interval_days: float | None
    entries_by_weekday: dict[str, int]
    entries_by_leader: dict[str, int]
    entries_by_year: dict[int, int]
    upcoming: int
    upcoming_without_leader: int


def analyze_schedule(
    entries: Iterable[ScheduleEntry], today: date | None = None
) -> ScheduleStatistics:
    """Build statistics for a schedule.

    Args:
        entries: Schedule entries in any order.
        today: Sessions on or after this date count as upcoming
            (defaults to today).

    Returns:
        ScheduleStatistics with interval, weekday and leader distributions.
    """
    today = today or date.today()
    dated = sorted(
        ((parse_schedule_date(e.date), e) for e in entries), key=lambda pair: pair[0]
    )
    dates = [d for d, _ in dated]

    # Intervals between consecutive sessions, oldest first
    intervals = [(b - a).days for a, b in zip(dates, dates[1:])]
    average_interval = sum(intervals) / len(intervals) if intervals else None

    weekday_counts = Counter(d.weekday() for d in dates)
    entries_by_weekday = {
        WEEKDAY_NAMES[day]: weekday_counts[day] for day in sorted(weekday_counts)
    }

    leader_counts = Counter(
        e.leader_name for _, e in dated if not is_unspecified(e.leader_name)
    )
    entries_by_leader = dict(leader_counts.most_common())

    entries_by_year = dict(sorted(Counter(d.year for d in dates).items()))

    upcoming = [e for d, e in dated if d >= today]

    return ScheduleStatistics(
        total_entries=len(dated),
        date_range=f"{dates[0]} to {dates[-1]}" if dates else None,
        average_interval_days=average_interval,
        entries_by_weekday=entries_by_weekday,
        entries_by_leader=entries_by_leader,
        entries_by_year=entries_by_year,
        upcoming=len(upcoming),
        upcoming_without_leader=sum(1 for e in upcoming if is_unspecified(e.leader_name)),
    )
