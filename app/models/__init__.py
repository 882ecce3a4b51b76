"""Pydantic models for bookclub sync."""

from app.models.diff import Conflict, DiffResult
from app.models.leader import Leader, LeaderRoster
from app.models.schedule import Schedule, ScheduleEntry, parse_entries
from app.models.sync import SyncReport, SyncResult
from app.models.validation import ValidationReport

__all__ = [
    "Conflict",
    "DiffResult",
    "Leader",
    "LeaderRoster",
    "Schedule",
    "ScheduleEntry",
    "parse_entries",
    "SyncReport",
    "SyncResult",
    "ValidationReport",
]
