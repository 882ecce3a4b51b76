"""Reconciliation result models."""

from pydantic import BaseModel, Field

from app.models.schedule import ScheduleEntry
from app.utils import names_differ


class Conflict(BaseModel):
    """The same date exists in both stores with different assignments."""

    local: ScheduleEntry
    remote: ScheduleEntry

    @property
    def date(self) -> str:
        return self.local.date

    def changed_fields(self) -> list[str]:
        """Names of the assignment fields that differ (leaderName, hostName)."""
        changed = []
        if names_differ(self.local.leader_name, self.remote.leader_name):
            changed.append("leaderName")
        if names_differ(self.local.host_name, self.remote.host_name):
            changed.append("hostName")
        return changed


class DiffResult(BaseModel):
    """Three-way difference between the local and remote schedules."""

    local_only: list[ScheduleEntry] = Field(default_factory=list)
    remote_only: list[ScheduleEntry] = Field(default_factory=list)
    conflicts: list[Conflict] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.local_only) + len(self.remote_only) + len(self.conflicts)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def swapped(self) -> "DiffResult":
        """The same result seen from the other store's side."""
        return DiffResult(
            local_only=list(self.remote_only),
            remote_only=list(self.local_only),
            conflicts=[Conflict(local=c.remote, remote=c.local) for c in self.conflicts],
        )

    def to_dict(self) -> dict:
        """Convert to the JSON shape served by the HTTP API."""
        return {
            "localOnly": [e.to_record() for e in self.local_only],
            "remoteOnly": [e.to_record() for e in self.remote_only],
            "conflicts": [
                {
                    "date": c.date,
                    "local": c.local.to_record(),
                    "remote": c.remote.to_record(),
                    "changed": c.changed_fields(),
                }
                for c in self.conflicts
            ],
        }
