"""File-backed local schedule store."""

import json
import logging
from pathlib import Path

from app.exceptions import (
    DuplicateDateError,
    DuplicatePeriodError,
    ScheduleNotFoundError,
    StorageError,
)
from app.models.schedule import Schedule, ScheduleEntry, parse_entries
from app.utils import parse_schedule_date, utc_now

logger = logging.getLogger(__name__)


class LocalScheduleStore:
    """JSON document holding the schedule plus its last-updated timestamp.

    Every save rewrites the whole file. There is no locking: concurrent
    writers race and the last one wins.
    """

    def __init__(self, path: Path):
        """
        Initialize store.

        Args:
            path: Path to the schedule JSON file
        """
        self.path = path

    def load(self) -> Schedule:
        """Load the schedule.

        A missing or unreadable file gives an empty schedule. Malformed
        entries are skipped.
        """
        if not self.path.exists():
            logger.info(f"Schedule file {self.path} does not exist, starting empty")
            return Schedule()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read schedule file {self.path}: {e}")
            return Schedule()

        if isinstance(data, list):
            # Bare list of entries
            records, last_updated = data, None
        elif isinstance(data, dict):
            records = data.get("schedule") or []
            last_updated = data.get("lastUpdated")
        else:
            logger.error(f"Schedule file {self.path} has unexpected shape, ignoring")
            return Schedule()

        entries = parse_entries(records)
        if last_updated:
            try:
                return Schedule(lastUpdated=last_updated, schedule=entries)
            except ValueError:
                logger.warning(f"Invalid lastUpdated value {last_updated!r}, ignoring")
        return Schedule(schedule=entries)

    def save(self, entries: list[ScheduleEntry]) -> Schedule:
        """Replace the stored schedule with the given entries.

        Raises:
            StorageError: If the file cannot be written
        """
        schedule = Schedule(lastUpdated=utc_now(), schedule=list(entries))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(schedule.to_json())
        except OSError as e:
            logger.error(f"Failed to write schedule file {self.path}: {e}")
            raise StorageError(f"Failed to write schedule file {self.path}: {e}") from e

        logger.info(f"Saved {len(schedule.schedule)} schedule entries to {self.path}")
        return schedule

    def entries(self) -> list[ScheduleEntry]:
        return self.load().schedule

    def get(self, date: str) -> ScheduleEntry | None:
        """Entry for a date, or None."""
        for entry in self.entries():
            if entry.date == date:
                return entry
        return None

    def add(self, entry: ScheduleEntry, replace: bool = False) -> ScheduleEntry:
        """Add an entry, keeping the file sorted newest first.

        Args:
            entry: Entry to add
            replace: Overwrite an existing entry on the same date

        Raises:
            DuplicateDateError: If the date is taken and replace is False
            DuplicatePeriodError: If another entry already uses entry.period
        """
        entries = self.entries()
        if any(e.date == entry.date for e in entries):
            if not replace:
                raise DuplicateDateError(f"A schedule already exists for {entry.date}")
            entries = [e for e in entries if e.date != entry.date]

        if entry.period is not None and any(e.period == entry.period for e in entries):
            raise DuplicatePeriodError(f"Period {entry.period} already exists")

        entries.append(entry)
        self.save(sort_entries(entries))
        return entry

    def update(self, date: str, entry: ScheduleEntry) -> ScheduleEntry:
        """Replace the entry for a date wholesale.

        The replacement may carry a new date, as long as no other entry
        already uses it.

        Raises:
            ScheduleNotFoundError: If no entry exists for date
            DuplicateDateError: If entry moves onto a date that is taken
        """
        entries = self.entries()
        if entry.date != date and any(e.date == entry.date for e in entries):
            raise DuplicateDateError(f"A schedule already exists for {entry.date}")
        for index, existing in enumerate(entries):
            if existing.date == date:
                entries[index] = entry
                self.save(entries)
                return entry
        raise ScheduleNotFoundError(f"No schedule found for {date}")

    def delete(self, date: str) -> ScheduleEntry:
        """Remove the entry for a date.

        Raises:
            ScheduleNotFoundError: If no entry exists for date
        """
        entries = self.entries()
        for index, existing in enumerate(entries):
            if existing.date == date:
                removed = entries.pop(index)
                self.save(entries)
                return removed
        raise ScheduleNotFoundError(f"No schedule found for {date}")

    def latest(self) -> ScheduleEntry | None:
        """Entry with the most recent date (not the last in file order)."""
        entries = self.entries()
        if not entries:
            return None
        return max(entries, key=lambda e: parse_schedule_date(e.date))


def sort_entries(
    entries: list[ScheduleEntry], descending: bool = True
) -> list[ScheduleEntry]:
    """Sort entries by date. Ties keep their relative order."""
    return sorted(entries, key=lambda e: e.date, reverse=descending)
