"""Remote schedule store protocol."""

from typing import Any, Literal, Protocol

from app.models.schedule import ScheduleEntry

SortDirection = Literal["ascending", "descending"]


class RemoteScheduleStore(Protocol):
    """A remote table of schedule entries keyed by date."""

    def query(
        self, sort_property: str | None = None, direction: SortDirection = "descending"
    ) -> list[ScheduleEntry]:
        """Fetch every entry, freshly, sorted by date."""
        ...

    def page_ids_by_date(self) -> dict[str, str]:
        """Remote id of the first record on each date, valid entry or not."""
        ...

    def create(self, entry: ScheduleEntry) -> str:
        """Create an entry and return its remote id."""
        ...

    def update(self, page_id: str, fields: dict[str, Any]) -> None:
        """Overwrite the given entry fields (by field name) on a remote entry."""
        ...
