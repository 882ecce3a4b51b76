"""Local vs remote schedule reconciliation."""

import logging
from typing import Iterable

from app.models.diff import Conflict, DiffResult
from app.models.schedule import ScheduleEntry
from app.utils import names_differ

logger = logging.getLogger(__name__)


def entries_by_date(entries: Iterable[ScheduleEntry], label: str = "") -> dict[str, ScheduleEntry]:
    """Index entries by date.

    A date that appears twice keeps the later entry (and its first
    position). Entries without a date are skipped.
    """
    by_date: dict[str, ScheduleEntry] = {}
    for entry in entries:
        if not entry.date:
            logger.warning(f"Skipping {label} entry without date: {entry.book_name!r}")
            continue
        if entry.date in by_date:
            logger.warning(f"Duplicate date {entry.date} in {label} schedule, keeping last")
        by_date[entry.date] = entry
    return by_date


def assignments_differ(local: ScheduleEntry, remote: ScheduleEntry) -> bool:
    """True if leader or host differ between two entries for the same date."""
    return names_differ(local.leader_name, remote.leader_name) or names_differ(
        local.host_name, remote.host_name
    )


def diff(
    local: Iterable[ScheduleEntry], remote: Iterable[ScheduleEntry]
) -> DiffResult:
    """Classify entries as local-only, remote-only or conflicting.

    Entries are matched on date. A matched pair is a conflict when
    leaderName or hostName differ; otherwise it is omitted. Output order
    follows input order.

    Args:
        local: Local store entries
        remote: Remote store entries

    Returns:
        DiffResult with local_only, remote_only and conflicts
    """
    local_by_date = entries_by_date(local, "local")
    remote_by_date = entries_by_date(remote, "remote")

    result = DiffResult()

    for date, local_entry in local_by_date.items():
        remote_entry = remote_by_date.get(date)
        if remote_entry is None:
            result.local_only.append(local_entry)
        elif assignments_differ(local_entry, remote_entry):
            result.conflicts.append(Conflict(local=local_entry, remote=remote_entry))

    for date, remote_entry in remote_by_date.items():
        if date not in local_by_date:
            result.remote_only.append(remote_entry)

    logger.info(
        f"Diff: {len(result.local_only)} local-only, "
        f"{len(result.remote_only)} remote-only, {len(result.conflicts)} conflicts"
    )
    return result
