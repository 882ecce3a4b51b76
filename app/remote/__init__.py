"""Remote schedule stores."""

from app.remote.base import RemoteScheduleStore, SortDirection
from app.remote.notion_store import NotionScheduleStore, entry_to_properties, page_to_entry

__all__ = [
    "RemoteScheduleStore",
    "SortDirection",
    "NotionScheduleStore",
    "entry_to_properties",
    "page_to_entry",
]
