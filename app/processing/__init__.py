"""Schedule processing: reconciliation, synchronisation, validation, analysis."""

from app.processing.analysis import ScheduleStatistics, analyze_schedule
from app.processing.reconciler import diff
from app.processing.synchronizer import Synchronizer
from app.processing.validator import validate_schedule

__all__ = [
    "ScheduleStatistics",
    "Synchronizer",
    "analyze_schedule",
    "diff",
    "validate_schedule",
]
