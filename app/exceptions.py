"""Exception hierarchy for schedule operations."""


class ScheduleError(Exception):
    """Base exception for schedule operations."""

    pass


class ConfigurationError(ScheduleError):
    """Required configuration (credentials, database id) is missing."""

    pass


class StorageError(ScheduleError):
    """Local file could not be read or written."""

    pass


class ScheduleNotFoundError(ScheduleError):
    """No schedule entry for the requested date."""

    pass


class DuplicateDateError(ScheduleError):
    """A schedule entry already exists for this date."""

    pass


class DuplicatePeriodError(ScheduleError):
    """A schedule entry already uses this period number."""

    pass


class LeaderNotFoundError(ScheduleError):
    """Leader not found in the roster."""

    pass


class DuplicateLeaderError(ScheduleError):
    """Leader already exists in the roster."""

    pass


class RemoteStoreError(ScheduleError):
    """Error talking to the remote (Notion) store."""

    pass
