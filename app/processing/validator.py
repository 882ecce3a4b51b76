"""Local schedule validation against the leader roster."""

import logging
from collections import defaultdict
from typing import Iterable

from app.models.leader import LeaderRoster
from app.models.schedule import ScheduleEntry
from app.models.validation import ValidationReport
from app.utils import is_unspecified

logger = logging.getLogger(__name__)


def validate_schedule(
    entries: Iterable[ScheduleEntry], roster: LeaderRoster
) -> ValidationReport:
    """Check leaders, hosts and duplicate dates.

    Unassigned leaders/hosts are not checked. Hosts must be roster
    leaders flagged is_host.

    Args:
        entries: Local schedule entries
        roster: Known leaders

    Returns:
        ValidationReport (entries are not modified)
    """
    leader_names = roster.leader_names()
    host_names = roster.host_names()
    report = ValidationReport()
    by_date: dict[str, list[ScheduleEntry]] = defaultdict(list)

    for entry in entries:
        by_date[entry.date].append(entry)

        if not is_unspecified(entry.leader_name) and entry.leader_name not in leader_names:
            report.invalid_leaders.append(entry)

        if not is_unspecified(entry.host_name) and entry.host_name not in host_names:
            report.invalid_hosts.append(entry)

    report.duplicate_dates = {d: group for d, group in by_date.items() if len(group) > 1}

    if not report.is_valid:
        logger.warning(
            f"Validation found {len(report.invalid_leaders)} unknown leader(s), "
            f"{len(report.invalid_hosts)} invalid host(s), "
            f"{len(report.duplicate_dates)} duplicate date(s)"
        )
    return report
