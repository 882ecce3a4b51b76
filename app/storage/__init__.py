"""Local file storage."""

from app.storage.leader_store import LeaderStore
from app.storage.schedule_store import LocalScheduleStore, sort_entries

__all__ = ["LeaderStore", "LocalScheduleStore", "sort_entries"]
